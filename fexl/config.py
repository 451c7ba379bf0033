from __future__ import annotations
import logging
import os
import sys

# Defaults
_DEFAULT_MAX_DEPTH = 1000
_DEFAULT_LOG_LEVEL = "WARNING"

# Python frames used by one level of fexl evaluation, with room for the
# intrinsic helpers between two evaluate calls
FRAMES_PER_LEVEL = 8
_RECURSION_HEADROOM = 500


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """
    Maximum nested evaluation depth before a runtime error is raised.

    Each user function call takes a few levels (the call, its body, and
    whatever the body nests), so the default of 1000 allows recursion a few
    hundred calls deep. Set FEXL_MAX_DEPTH to change it.
    """
    return int_from_env('FEXL_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def ensure_recursion_limit(max_depth: int) -> int:
    """Raise Python's recursion limit so `max_depth` levels fit under it."""
    needed = max_depth * FRAMES_PER_LEVEL + _RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)
    return sys.getrecursionlimit()


def get_log_level() -> int:
    raw = os.environ.get('FEXL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING
