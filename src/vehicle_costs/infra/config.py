from __future__ import annotations

import os
from pathlib import Path

DEFAULT_LOG_LEVEL = "INFO"


def log_level() -> str:
    return os.getenv("VEHICLE_COSTS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def market_file() -> Path | None:
    """Path of the YAML market tables, or None to use the built-in defaults."""
    path = os.getenv("VEHICLE_COSTS_MARKET_FILE")

    if not path:
        return None

    return Path(path)
