"""Central configuration for room-finder.

Tunable parameters live here. Every value has a sensible default and can be
overridden through environment variables; getters read the environment at
call time so tests and the CLI can change them without reloading modules.
"""
from __future__ import annotations
import os
from pathlib import Path

def _get_float_env(name: str, default: float, minval: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = float(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


# ---------------- Output formatting ----------------

def get_default_capitalize() -> bool:
    """Capitalize each direction line by default. Var: RF_CAPITALIZE (default true)."""
    return _get_bool_env("RF_CAPITALIZE", True)


def get_default_periods() -> bool:
    """End each direction line with a period. Var: RF_PERIODS (default false)."""
    return _get_bool_env("RF_PERIODS", False)


# ---------------- Routing ----------------

# Staircases whose name contains this word are narrated as elevators
DEFAULT_ELEVATOR_KEYWORD: str = "elevator"

# Discount per floor on stair edges: one long climb beats several short hops
DEFAULT_STAIR_DISCOUNT: float = 0.001


def get_elevator_keyword() -> str:
    """Var: RF_ELEVATOR_KEYWORD (default 'elevator'). Matched case-insensitively."""
    val = os.getenv("RF_ELEVATOR_KEYWORD", DEFAULT_ELEVATOR_KEYWORD).strip()
    return val or DEFAULT_ELEVATOR_KEYWORD


def get_stair_discount() -> float:
    """Var: RF_STAIR_DISCOUNT (default 0.001).

    Kept below 0.5 so that a stair edge still grows with the number of floors.
    """
    val = _get_float_env("RF_STAIR_DISCOUNT", DEFAULT_STAIR_DISCOUNT, minval=0.0)
    if val >= 0.5:
        return DEFAULT_STAIR_DISCOUNT
    return val


# ---------------- CLI ----------------

ASSETS_DIR = Path(__file__).resolve().parent / "assets" / "buildings"
DEFAULT_LAYOUT_FILE = ASSETS_DIR / "example.json"


def get_log_level() -> str:
    """Var: RF_LOG_LEVEL (default WARNING)."""
    return os.getenv("RF_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"


def get_layout_file() -> Path:
    """Layout used by the CLI when none is given. Var: RF_LAYOUT_FILE."""
    raw = os.getenv("RF_LAYOUT_FILE")
    if raw:
        return Path(raw)
    return DEFAULT_LAYOUT_FILE


__all__ = [
    "get_default_capitalize", "get_default_periods",
    "DEFAULT_ELEVATOR_KEYWORD", "DEFAULT_STAIR_DISCOUNT",
    "get_elevator_keyword", "get_stair_discount",
    "ASSETS_DIR", "DEFAULT_LAYOUT_FILE", "get_log_level", "get_layout_file",
]
