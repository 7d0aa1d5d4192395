"""
Runtime settings for token resolution.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``THEME_TOKENS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="THEME_TOKENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Used to combine rem/em roots with px offsets
    root_font_size_px: float = Field(default=16.0, gt=0)

    # Raise on plugins that are configured but not registered
    strict_plugins: bool = False

    default_dark_selector: str = ".dark"
    css_variable_prefix: str = "--tw"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
