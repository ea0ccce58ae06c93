"""
Central configuration.

Values come from environment variables (prefixed CHECKERS_) and are validated by pydantic.
Board size is the only setting the rule engine itself cares about; the rest is for the layers around it.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.shared_types import Color

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CheckersConfig(BaseModel):
    """Settings for a checkers session"""

    board_size: int = Field(default=8, ge=4, le=20, description="Squares per side")
    first_turn: Color = Field(default=Color.BLACK, description="Color that opens")
    database_url: str = Field(default="sqlite:///checkers.db")
    log_level: str = Field(default="INFO")

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        # both players need the same number of rows and a gap between the armies
        if value % 2 != 0:
            raise ValueError(f"board_size must be even, got {value}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")
        return level

    @classmethod
    def from_env(cls) -> "CheckersConfig":
        """Create configuration from environment variables."""
        return cls(
            board_size=int(os.getenv("CHECKERS_BOARD_SIZE", "8")),
            first_turn=os.getenv("CHECKERS_FIRST_TURN", "black").lower(),
            database_url=os.getenv("CHECKERS_DATABASE_URL", "sqlite:///checkers.db"),
            log_level=os.getenv("CHECKERS_LOG_LEVEL", "INFO"),
        )


_config: Optional[CheckersConfig] = None


def get_config() -> CheckersConfig:
    """Get or create the cached configuration instance."""
    global _config
    if _config is None:
        _config = CheckersConfig.from_env()
    return _config


def reset_config() -> None:
    global _config
    _config = None


def setup_logging(settings: Optional[CheckersConfig] = None) -> None:
    """Configure root logging once, using the configured log level."""
    if getattr(setup_logging, "_configured", False):
        return
    log_level = (settings or get_config()).log_level
    level: int = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
