# zerosource/config/settings.py

from __future__ import annotations

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="ZEROSOURCE_",
    )

    # ------------------------------------------------------------------
    # Generation / deep-validation service
    # ------------------------------------------------------------------
    GENERATION_URL: Optional[str] = Field(
        default=None,
        description=(
            "Base URL of the generation / deep-validation service. "
            "If None, only structural validation is available."
        ),
    )

    API_KEY: Optional[SecretStr] = Field(
        default=None,
        description="Bearer token sent to the generation service, if any.",
    )

    MODEL_NAME: str = Field(
        default="gpt-4",
        description="Model name forwarded to the generation service.",
    )

    REQUEST_TIMEOUT: int = Field(
        default=120,
        description="Timeout in seconds for generation service requests.",
    )

    # ------------------------------------------------------------------
    # Output / CLI
    # ------------------------------------------------------------------
    DEFAULT_PROJECT_NAME: str = Field(
        default="Unnamed Project",
        description="Name shown when a README has no level-1 title.",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level used by the CLI.",
    )

    @property
    def deep_validation_available(self) -> bool:
        return bool(self.GENERATION_URL and self.GENERATION_URL.strip())


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so we only read the environment / .env once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """
    Drop the cached Settings so the next get_settings() re-reads the env.
    """
    global _settings
    _settings = None
