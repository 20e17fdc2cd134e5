from __future__ import annotations
import logging
import os
import sys
from typing import Optional

MAX_ITERATIONS_VAR = 'ORELANG_MAX_ITERATIONS'
LOG_LEVEL_VAR = 'ORELANG_LOG_LEVEL'

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_LOG_FORMAT = '%(name)s - %(levelname)s - %(message)s'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_iterations() -> Optional[int]:
    # 0 or negative disables the cap, same as leaving the variable unset
    limit = int_from_env(MAX_ITERATIONS_VAR)
    if limit is None or limit <= 0:
        return None
    return limit


def get_log_level() -> str:
    raw = os.environ.get(LOG_LEVEL_VAR)
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the command line.

    Logs go to stderr so that ``print`` output on stdout stays clean.
    """
    name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level {level!r}")
    logging.basicConfig(level=numeric_level, format=_LOG_FORMAT, stream=sys.stderr)
    logging.getLogger(__name__).debug("Logging initialized at %s level", name)
