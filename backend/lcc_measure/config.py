"""Runtime settings read from ``LCC_*`` environment variables or ``.env``."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration shared by the measure and the API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="LCC_",
        extra="ignore",
    )

    # Reproduce the historical lifecycle guards, which never reject input.
    legacy_lifecycle_checks: bool = False
    log_level: str = "INFO"
    # Comma-separated in the environment
    cors_origins: list[str] | str = Field(default_factory=lambda: ["http://localhost:3000"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: object) -> object:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return v.upper()
