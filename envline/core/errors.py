from __future__ import annotations

from pathlib import Path
from typing import Union


class DotenvError(Exception):
    """Base class for every error raised by envline."""


class DotenvIOError(DotenvError):
    """The dotenv file could not be read or written."""

    def __init__(self, path: Union[str, Path], cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"I/O error on {self.path}: {cause}")


class DotenvParseError(DotenvError):
    """A non-ignorable line has no `=`."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"missing '=' in line: {line!r}")


class MissingEnvError(DotenvError):
    """A required environment variable is absent or empty."""

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"required environment variable {key} is not set")


class InvalidEnvError(MissingEnvError):
    """A required environment variable is set but not usable (e.g. not an integer)."""

    def __init__(self, key: str, raw: str) -> None:
        self.raw = raw
        super().__init__(key, f"environment variable {key} is not a valid integer: {raw!r}")
