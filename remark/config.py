"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """API configuration."""

    title: str = "Remark API"
    version: str = "0.1.0"
    prefix: str = "/api/v1"

    # Origins allowed by CORS; "*" allows any origin
    cors_origins: list[str] = ["*"]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None

    # Print spans and logs to the console
    console: bool = True


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, e.g.:

        ENVIRONMENT=production
        HOST=0.0.0.0
        PORT=8080
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows OBSERVABILITY__CONSOLE syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @computed_field
    @property
    def is_production(self) -> bool:
        """Whether internal error details must be hidden from clients."""
        return self.environment == "production"
