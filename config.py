"""
Configuration settings for the text2lesson compiler.

Uses Pydantic Settings for environment variable management with .env file support.
All variables are prefixed with ``T2L_`` (e.g. ``T2L_LOG_LEVEL=DEBUG``).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="T2L_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum level written to stderr",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path (rotated)",
    )
    log_rotation: str = Field(
        default="10 MB",
        description="Rotation threshold for the log file sink",
    )

    # ========================================
    # Lesson sources
    # ========================================
    source_encoding: str = Field(
        default="utf-8-sig",
        description="Encoding used when reading lesson source files",
    )

    # ========================================
    # Export
    # ========================================
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation used for JSON lesson exports",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
