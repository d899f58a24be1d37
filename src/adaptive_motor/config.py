import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .categories import Intensity
from .normalize import parse_intensity


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseSettings):
    """
    Engine configuration loaded from ``ADAPTIVE_*`` environment variables.
    Uses pydantic for validation and parsing.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADAPTIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field("INFO", description="Root log level used by setup_logging")
    DEFAULT_INTENSITY: Intensity = Field(
        Intensity.INTERMEDIO,
        description="Nutrition intensity used when the caller passes none or an unknown one",
    )
    LOG_AUDIT_TRAIL: bool = Field(
        default_factory=lambda: _bool("ADAPTIVE_LOG_AUDIT_TRAIL", False),
        description="Log every prescription audit trail at INFO",
    )

    @field_validator("DEFAULT_INTENSITY", mode="before")
    @classmethod
    def normalize_intensity(cls, v):
        return parse_intensity(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        return (v or "INFO").strip().upper()


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
