from __future__ import annotations

from pathlib import Path
from typing import Union

from envline.core.errors import DotenvIOError

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Read a dotenv file as UTF-8; any failure becomes `DotenvIOError`."""
    p = Path(path)
    try:
        return p.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DotenvIOError(p, e) from e


def read_text_lenient(path: PathLike) -> str:
    """
    Read for a read-modify-write cycle.
    - missing / unreadable file -> ""
    - undecodable bytes survive through surrogateescape so a rewrite keeps them
    """
    try:
        return Path(path).read_bytes().decode("utf-8", errors="surrogateescape")
    except OSError:
        return ""


def write_text(path: PathLike, text: str) -> None:
    p = Path(path)
    try:
        p.write_bytes(text.encode("utf-8", errors="surrogateescape"))
    except OSError as e:
        raise DotenvIOError(p, e) from e
