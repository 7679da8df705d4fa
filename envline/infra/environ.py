from __future__ import annotations

import os
from typing import Optional


def get_var(key: str) -> Optional[str]:
    return os.environ.get(key)


def set_var(key: str, value: str) -> bool:
    """Best-effort `os.environ[key] = value`; False when the platform refuses it."""
    try:
        os.environ[key] = value
    except (ValueError, OSError):
        return False
    return True
