"""
Application configuration settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Logging
    log_level: str = Field("INFO", alias="PRESTO_SLIDE_LOG_LEVEL")
    log_format: str = Field("console", alias="PRESTO_SLIDE_LOG_FORMAT")

    # Templates
    views_path: Optional[str] = Field(None, alias="PRESTO_SLIDE_VIEWS_PATH")
    slide_template: str = Field("slide.html", alias="PRESTO_SLIDE_TEMPLATE")

    # Slide construction
    strict_slide_params: bool = Field(False, alias="PRESTO_SLIDE_STRICT_PARAMS")


_settings = None


def get_settings() -> Settings:
    """Get the settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
