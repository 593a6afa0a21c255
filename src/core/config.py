"""Settings read from the environment. Command line flags take precedence (see src/cli.py)."""

import logging
import os
from typing import Self

from pydantic import BaseModel, field_validator

from src.chess.position import STARTING_FEN

LOG_LEVEL_ENV = "FEN_LOG_LEVEL"
DEFAULT_FEN_ENV = "FEN_DEFAULT_FEN"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = "WARNING"
    default_fen: str = STARTING_FEN

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Only variables that are actually set override the defaults."""
        overrides = {
            field: os.environ[variable]
            for field, variable in [
                ("log_level", LOG_LEVEL_ENV),
                ("default_fen", DEFAULT_FEN_ENV),
            ]
            if variable in os.environ
        }
        return cls(**overrides)
