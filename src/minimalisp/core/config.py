"""Runtime settings for the minimalisp package."""

import logging
import os
from pydantic import BaseModel, Field, ValidationError, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    LOG_LEVEL: str = Field(
        "WARNING", description="Level name for the package logger (e.g. DEBUG)."
    )
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string handed to logging.Formatter.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}
        if "MINIMALISP_LOG_LEVEL" in os.environ:
            overrides["LOG_LEVEL"] = os.environ["MINIMALISP_LOG_LEVEL"]
        if "MINIMALISP_LOG_FORMAT" in os.environ:
            overrides["LOG_FORMAT"] = os.environ["MINIMALISP_LOG_FORMAT"]
        try:
            return cls(**overrides)
        except ValidationError as e:
            # Invalid environment values fall back to the defaults
            logging.getLogger(__name__).warning(
                f"Ignoring invalid minimalisp settings, using defaults: {e}"
            )
            return cls()


settings = Settings.load()
