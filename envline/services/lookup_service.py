from __future__ import annotations

import re
from typing import Optional

from envline.core.errors import InvalidEnvError, MissingEnvError
from envline.infra import environ

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _non_empty(key: str) -> Optional[str]:
    v = environ.get_var(key)
    if v is None or v == "":
        return None
    return v


def parse_int(raw: str) -> Optional[int]:
    """Strict integer: optional sign and ASCII digits only (no spaces, no `_`)."""
    if not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def require_string(key: str) -> str:
    v = _non_empty(key)
    if v is None:
        raise MissingEnvError(key)
    return v


def get_string_or(key: str, default: str) -> str:
    v = _non_empty(key)
    return default if v is None else v


def require_int(key: str) -> int:
    raw = require_string(key)
    n = parse_int(raw)
    if n is None:
        raise InvalidEnvError(key, raw)
    return n


def get_int_or(key: str, default: int) -> int:
    v = _non_empty(key)
    if v is None:
        return default
    n = parse_int(v)
    return default if n is None else n
