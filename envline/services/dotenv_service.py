from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from envline.core.settings import load_settings
from envline.domain.pair import Pair
from envline.grammar.document import parse
from envline.grammar.upsert import upsert_text
from envline.infra import environ, files
from envline.infra.files import PathLike

logger = logging.getLogger(__name__)


def _default_path() -> str:
    return load_settings().resolve_dotenv_path()


def read_pairs(path: PathLike) -> List[Pair]:
    """
    Read and parse a dotenv file without touching the environment.
    Raises DotenvIOError / DotenvParseError.
    """
    return parse(files.read_text(path))


def apply_pairs(pairs: Iterable[Pair], override: bool = True) -> int:
    """
    Write pairs into the process environment in order (later duplicates win).
    - override=False keeps variables that existed before this call
    Returns how many pairs were actually set.
    """
    pairs = list(pairs)
    protected = set() if override else {p.key for p in pairs if environ.get_var(p.key) is not None}
    applied = 0
    for p in pairs:
        if p.key in protected:
            continue
        if environ.set_var(p.key, p.value):
            applied += 1
    return applied


def load_file(path: PathLike, override: Optional[bool] = None) -> List[Pair]:
    """
    Load `path` into the process environment.

    The whole file is parsed before anything is applied, so a malformed line
    leaves the environment untouched.
    """
    if override is None:
        override = load_settings().dotenv_override
    pairs = read_pairs(path)
    applied = apply_pairs(pairs, override=override)
    logger.info(f"📄 [dotenv] loaded {applied}/{len(pairs)} variables from {path}")
    return pairs


def load(override: Optional[bool] = None) -> List[Pair]:
    return load_file(_default_path(), override=override)


def set_string(key: str, value: str, path: Optional[PathLike] = None) -> None:
    """
    Upsert `key` into the dotenv file, then into the process environment.

    A missing or unreadable file is treated as empty. Write failures raise
    DotenvIOError; the environment update afterwards is best-effort.
    """
    target = path if path is not None else _default_path()
    existing = files.read_text_lenient(target)
    files.write_text(target, upsert_text(existing, key, value))
    logger.info(f"✏️ [dotenv] set {key} in {target}")
    environ.set_var(key, value)
