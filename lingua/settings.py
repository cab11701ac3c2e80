"""Lingua configuration settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinguaSettings(BaseSettings):
    """Runtime configuration for the translation library.

    Environment Variables:
        LINGUA_LANGUAGE_DIR: Directory holding language files (default: languages)
        LINGUA_DEFAULT_LANGUAGE: Language selected after init when it was loaded
            (default: en)
        LINGUA_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LINGUA_LOG_JSON: Render logs as JSON instead of console output

    Example:
        ```python
        from lingua.settings import get_settings

        settings = get_settings()
        language_dir = settings.LANGUAGE_DIR
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    LANGUAGE_DIR: str = Field(default="languages", alias="LINGUA_LANGUAGE_DIR")
    DEFAULT_LANGUAGE: str = Field(default="en", alias="LINGUA_DEFAULT_LANGUAGE")
    LOG_LEVEL: str = Field(default="INFO", alias="LINGUA_LOG_LEVEL")
    LOG_JSON: bool = Field(default=False, alias="LINGUA_LOG_JSON")


@lru_cache
def get_settings() -> LinguaSettings:
    """Get process-wide settings singleton.

    Returns:
        LinguaSettings: Cached settings instance loaded from environment.
    """
    return LinguaSettings()
