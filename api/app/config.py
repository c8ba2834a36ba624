from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field, AnyUrl

class Settings(BaseSettings):
    app_name: str = "Movements Validation API"
    app_env: str = Field("development", alias="APP_ENV")
    app_url: AnyUrl | str = Field("http://localhost:3000", alias="APP_URL")
    api_url: AnyUrl | str = Field("http://localhost:8000", alias="API_URL")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    # Adds the machine-readable error kind to each rejection reason
    expose_error_codes: bool = Field(False, alias="EXPOSE_ERROR_CODES")

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
