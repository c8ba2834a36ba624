from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .domain.validation import ValidationError
from .exceptions import MovementsValidationError
from .logging_config import configure_logging
from .routers import movements

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

# CORS: allow web origin for dev
allowed_origins = {str(settings.app_url), "http://localhost:3000", "http://127.0.0.1:3000"}
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _reason(error: ValidationError) -> dict:
    reason = {"message": error.message}
    if error.details is not None:
        reason["details"] = error.details
    if settings.expose_error_codes and error.kind is not None:
        reason["code"] = error.kind.value
    return reason


@app.exception_handler(MovementsValidationError)
async def movements_validation_handler(request: Request, exc: MovementsValidationError):
    content = {
        "statusCode": 400,
        "message": "Validation failed",
        "reasons": [_reason(e) for e in exc.errors],
        "error": "Bad Request",
    }
    return JSONResponse(status_code=400, content=jsonable_encoder(content))


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": settings.app_name,
        "env": settings.app_env,
    }

# Routers
app.include_router(movements.router)
