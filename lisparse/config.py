from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import Optional


_DEFAULT_FLOAT_EPSILON = sys.float_info.epsilon


def float_from_env(var: str, default: float) -> float:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_float_epsilon() -> float:
    """Tolerance used by the numeric comparison builtins."""
    return float_from_env('LISPARSE_FLOAT_EPSILON', _DEFAULT_FLOAT_EPSILON)


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('LISPARSE_PRELUDE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())
