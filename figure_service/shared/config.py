# figure_service/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "figure-service"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Server ---
    HOST: str = "127.0.0.1"
    PORT: int = 3030
    RELOAD: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "figure-service"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    @property
    def docs_enabled(self) -> bool:
        return self.APP_ENV != AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
