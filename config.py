"""
Runtime settings, read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TICK_MS = 100
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FALSE_VALUES = {"0", "false", "no", "off"}
TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None
    color: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables."""
    tick_ms = _parse_int("SNAKE_TICK_MS", os.getenv("SNAKE_TICK_MS", str(DEFAULT_TICK_MS)))
    if tick_ms <= 0:
        raise ValueError(f"SNAKE_TICK_MS must be positive, got {tick_ms}")

    seed_raw = os.getenv("SNAKE_SEED")
    seed = _parse_int("SNAKE_SEED", seed_raw) if seed_raw else None

    color = _parse_bool("SNAKE_COLOR", os.getenv("SNAKE_COLOR", "true"))

    log_level = os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"SNAKE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
    log_file = os.getenv("SNAKE_LOG_FILE") or None

    return Settings(
        tick_ms=tick_ms,
        seed=seed,
        color=color,
        log_level=log_level,
        log_file=log_file,
    )
