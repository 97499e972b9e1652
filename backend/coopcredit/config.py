"""Application configuration using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Credit application service settings.

    Values come from environment variables or a ``.env`` file; names are
    case-sensitive.
    """

    DATABASE_URL: str

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Comma-separated origins allowed by CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Risk Central service used for credit risk evaluation
    RISK_CENTRAL_BASE_URL: str = "http://localhost:8081"
    RISK_CENTRAL_TIMEOUT_SECONDS: float = Field(5.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case of a standard logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @field_validator("RISK_CENTRAL_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
