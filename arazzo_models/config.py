"""
Type-safe configuration for arazzo_models using Pydantic Settings.

Settings are loaded from `ARAZZO_*` environment variables or a `.env` file.

Usage:
    from arazzo_models.config import config

    if config.strict_list_entries:
        ...
"""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArazzoSettings(BaseSettings):
    """
    Central configuration for the mapping layer.

    Nothing here changes how a valid document is loaded; the settings only
    control logging, rendering and how strictly malformed list entries are
    treated.
    """
    model_config = SettingsConfigDict(
        env_prefix="ARAZZO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ============================================================================
    # Logging
    # ============================================================================

    log_level: str = Field(default="INFO", description="Level for arazzo_models loggers")

    # ============================================================================
    # Loader behaviour
    # ============================================================================

    strict_list_entries: bool = Field(
        default=False,
        description="If True, non-object entries in parameter and action lists raise WrongType instead of being dropped."
    )

    # ============================================================================
    # Rendering
    # ============================================================================

    json_indent: int = Field(default=2, description="Indent used by dump_json")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


# ============================================================================
# Global Config Instance
# ============================================================================

config = ArazzoSettings()
