from __future__ import annotations
import logging
import os

_DEFAULT_PROMPT = 'schemer> '


def get_prompt() -> str:
    return os.environ.get('SCHEMER_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    """Level named by SCHEMER_LOGLEVEL, defaulting to WARNING."""
    raw = os.environ.get('SCHEMER_LOGLEVEL', '').upper()
    if raw:
        level = getattr(logging, raw, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def get_recursion_limit() -> int | None:
    """Positive integer from SCHEMER_RECURSION_LIMIT, or None when unset/invalid."""
    raw = os.environ.get('SCHEMER_RECURSION_LIMIT', '').strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return None
