"""Runtime settings read from the environment (or a .env file)."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings() -> Settings:
    """Load .env (if any) and build Settings from PATTERNS_* environment variables."""
    load_dotenv()
    return Settings(
        log_level=os.environ.get("PATTERNS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
