import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_movements_service
from app.exceptions import MovementsValidationError
from app.schemas.movements import (
    ValidateMovementsRequest,
    ValidateMovementsResponse,
    ValidationFailedResponse,
)
from app.services.movements import MovementsService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/movements", tags=["movements"])


@router.post(
    "/validate",
    response_model=ValidateMovementsResponse,
    responses={400: {"model": ValidationFailedResponse}},
)
def validate_movements(
    payload: ValidateMovementsRequest,
    service: MovementsService = Depends(get_movements_service),
):
    logger.info(
        "Validating movements: %d movements, %d balances",
        len(payload.movements),
        len(payload.balances),
    )
    movements = [m.to_entity() for m in payload.movements]
    balances = [b.to_entity() for b in payload.balances]
    try:
        service.validate_movements(movements, balances)
    except MovementsValidationError as exc:
        logger.error("Movements validation failed at stage %s: %s", exc.stage, exc)
        raise
    logger.info("Movements validation successful")
    return ValidateMovementsResponse()
