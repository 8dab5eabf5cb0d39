from __future__ import annotations
import os
from typing import Iterable, List

_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_PLACEHOLDERS = ('foo', 'bar', 'fib', 'fact')


def names_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    raw = os.environ.get(var)
    if raw is None:
        return list(defaults)
    return [p.strip() for p in raw.split(',') if p.strip()]


def get_log_level() -> str:
    return os.environ.get('FEZ_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = os.environ.get('FEZ_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def get_placeholders() -> List[str]:
    return names_from_env('FEZ_PLACEHOLDERS', _DEFAULT_PLACEHOLDERS)
