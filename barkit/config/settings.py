"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Rendering defaults and logging configuration loaded from the environment."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        env_prefix="BARKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Render defaults
    default_height: int = Field(80, description="Image height in pixel rows")
    default_module_width: int = Field(1, description="Pixels per module")
    foreground: int = Field(0, ge=0, le=255, description="Bar intensity")
    background: int = Field(255, ge=0, le=255, description="Space intensity")

    # Symbologies
    code39_checksum: bool = Field(False, description="Append the mod-43 check character")
    code39_wide_ratio: int = Field(2, ge=2, le=3, description="Modules per wide Code39 element")
    supplemental_gap: int = Field(9, ge=0, description="Modules between symbol and add-on")

    # Text output
    text_bar: str = Field("#", min_length=1, max_length=1)
    text_space: str = Field(" ", min_length=1, max_length=1)

    # PNG output
    png_compression: Literal["fixed", "stored"] = "fixed"
    png_idat_chunk_size: int = Field(65536, gt=0, description="Max bytes per IDAT chunk")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
