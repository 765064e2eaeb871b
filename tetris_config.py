
"""Tunable constants for the board engine and its pygame front end"""
from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    "COLS": 10,                  # Board width
    "ROWS": 20,                  # Board height
    "DROP_INTERVAL_MS": 1000,    # Gravity timer period
    "LINE_SCORE": 100,           # Points per cleared row
    "HARD_DROP_PER_CELL": 2,     # Points per row of hard-drop distance
    "RANDOMIZER": "uniform",     # "uniform" or "bag"
    "SEED": None,                # Set int for reproducible piece sequences
    "ROTATION_KICKS": [(0, 0)],  # Offsets tried in order after a rotation; (0,0) only => no wall kick
    "CELL_SIZE": 30,
}

RANDOMIZERS = ("uniform", "bag")


def _as_int(cfg: Dict[str, Any], key: str) -> int:
    try:
        return int(cfg[key])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer, got {cfg[key]!r}") from exc


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for key in ("COLS", "ROWS", "DROP_INTERVAL_MS", "CELL_SIZE"):
        if _as_int(cfg, key) <= 0:
            raise ValueError(f"{key} must be positive, got {cfg[key]!r}")
    for key in ("LINE_SCORE", "HARD_DROP_PER_CELL"):
        if _as_int(cfg, key) < 0:
            raise ValueError(f"{key} must not be negative, got {cfg[key]!r}")
    if cfg["RANDOMIZER"] not in RANDOMIZERS:
        raise ValueError(f"unknown randomizer {cfg['RANDOMIZER']!r}, expected one of {RANDOMIZERS}")
    if not cfg["ROTATION_KICKS"]:
        raise ValueError("ROTATION_KICKS needs at least one offset")
    return cfg
