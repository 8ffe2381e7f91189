"""
Runtime settings, read from BLINDBOARD_* environment variables.

    BLINDBOARD_ENGINE     executable used by the bestmove command (stockfish)
    BLINDBOARD_DEPTH      bestmove search depth, clamped to 1..64 (22)
    BLINDBOARD_CHESS960   write castling as king-captures-rook (false)
    BLINDBOARD_LOG_LEVEL  stderr log level name (WARNING)
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, field_validator

from ledger.constants import BESTMOVE_DEPTH, MAX_BESTMOVE_DEPTH

ENV_PREFIX = "BLINDBOARD_"

_ENV_FIELDS = {
    "ENGINE": "engine_path",
    "DEPTH": "bestmove_depth",
    "CHESS960": "chess960",
    "LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    engine_path: str = "stockfish"
    bestmove_depth: int = BESTMOVE_DEPTH
    chess960: bool = False
    log_level: str = "WARNING"

    @field_validator("engine_path")
    @classmethod
    def require_engine_path(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("engine path must not be empty")
        return v

    @field_validator("bestmove_depth")
    @classmethod
    def clamp_depth(cls, v: int) -> int:
        """Clamp the search depth to a range any UCI engine accepts."""
        return max(1, min(v, MAX_BESTMOVE_DEPTH))

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from the environment; unset variables keep defaults."""
        environ = os.environ if environ is None else environ
        values = {
            field: environ[ENV_PREFIX + name]
            for name, field in _ENV_FIELDS.items()
            if ENV_PREFIX + name in environ
        }
        return cls(**values)
