"""
Environment-driven settings for the API server and the CLI.

Values come from the process environment, optionally seeded from a .env
file via python-dotenv.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass
class Settings:
    grid_size: int = DEFAULT_GRID_SIZE
    cors_allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    flask_debug: bool = False
    log_level: str = "INFO"
    tick_delay: float = 0.0


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _get_bool(name: str) -> bool:
    raw = os.getenv(name)
    return raw is not None and raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: if a numeric variable does not parse or the grid size
            is outside 1..MAX_GRID_SIZE.
    """
    load_dotenv(dotenv_path)

    grid_size = _get_int("SNAKE_GRID_SIZE", DEFAULT_GRID_SIZE)
    if grid_size <= 0:
        raise ValueError(f"SNAKE_GRID_SIZE must be positive, got {grid_size}")
    if grid_size > MAX_GRID_SIZE:
        raise ValueError(f"SNAKE_GRID_SIZE must be at most {MAX_GRID_SIZE}, got {grid_size}")

    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        origins = list(DEFAULT_CORS_ORIGINS)

    return Settings(
        grid_size=grid_size,
        cors_allowed_origins=origins,
        flask_debug=_get_bool("FLASK_DEBUG"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        tick_delay=_get_float("SNAKE_TICK_DELAY", 0.0),
    )
