import logging
import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _known_level(cls, value):
        if not isinstance(value, str):
            raise ValueError(f"Log level must be a string, got {value!r}")
        level = value.upper()
        # Accepts the standard aliases too (WARN, FATAL, NOTSET)
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``SEQUTILS_*`` environment variables.

        ``SEQUTILS_LOG_LEVEL`` falls back to the generic ``LOG_LEVEL``.
        """
        values = {}
        level = os.getenv("SEQUTILS_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        log_format = os.getenv("SEQUTILS_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format
        return cls(**values)


settings = Settings.load()
