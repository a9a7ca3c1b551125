"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application settings derived from environment variables."""

    strava_client_id: str
    strava_client_secret: str

    strava_token_url: str = Field(default="https://www.strava.com/oauth/token")
    strava_timeout_seconds: float = Field(default=30.0, gt=0)

    database_url: str = Field(
        default="sqlite:///./data/workout_planner.db",
        description="SQLAlchemy-compatible database URL.",
    )
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000, ge=1, le=65535)

    debug: bool = Field(default=False)

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used to decide which calendar day 'now' falls on.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("strava_client_id", "strava_client_secret")
    @classmethod
    def require_strava_credentials(cls, value: str, info) -> str:
        """Refuse to start with blank Strava credentials."""

        if not value.strip():
            raise ValueError(
                f"{info.field_name.upper()} is required. Set it in the environment or your .env file."
            )
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as err:
            raise ValueError(f"TIMEZONE '{value}' is not a known IANA timezone") from err
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    settings = Settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
