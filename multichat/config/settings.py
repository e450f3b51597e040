"""
MultiChat SDK settings.

Loaded from MULTICHAT_* environment variables and an optional .env file.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    MultiChat SDK settings loaded from environment variables (and .env).

    Only used as defaults: every value can be passed explicitly to
    MultiChatConfig, which is what the client actually validates.
    """

    # MultiChat API connection
    MULTICHAT_TOKEN: str = Field("", description="Bearer token for the MultiChat API")
    MULTICHAT_BASE_URL: str = Field("", description="Base URL of the MultiChat service")
    MULTICHAT_API_VERSION: str = Field("v1", description="API version segment (/api/{version}/...)")

    # Timeouts (seconds)
    MULTICHAT_TIMEOUT: int = Field(10, description="Timeout for reader and chat requests")
    MULTICHAT_STATUS_TIMEOUT: int = Field(60, description="Timeout for manager status broadcasts")

    # Logging
    MULTICHAT_LOG_LEVEL: str = Field("INFO", description="Log level used by the CLI")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("MULTICHAT_TOKEN", "MULTICHAT_BASE_URL", "MULTICHAT_API_VERSION", mode="before")
    @classmethod
    def strip_strings(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("MULTICHAT_LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @property
    def is_configured(self) -> bool:
        """True when both token and base URL are present."""
        return bool(self.MULTICHAT_TOKEN and self.MULTICHAT_BASE_URL)


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.

    Avoids re-reading environment variables on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
