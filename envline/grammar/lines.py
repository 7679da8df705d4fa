from __future__ import annotations

import re
from typing import Optional

from envline.core.errors import DotenvParseError
from envline.domain.pair import Pair
from envline.grammar.comments import cut_comment
from envline.grammar.escapes import escape, unescape
from envline.grammar.quoting import QuoteKind, classify, unquote

_EXPORT_RE = re.compile(r"^export\s+")


def strip_export(line: str) -> str:
    """`export KEY=v` -> `KEY=v`; `export=v` and `exporter=v` are left alone."""
    return _EXPORT_RE.sub("", line, count=1)


def resolve_value(token: str) -> str:
    kind = classify(token)
    if kind is QuoteKind.DOUBLE:
        return unescape(unquote(token, kind))
    if kind is QuoteKind.SINGLE:
        return unquote(token, kind)
    return cut_comment(token)


def parse_line(line: str) -> Pair:
    """
    Parse one filtered logical line (already trimmed, `export` already stripped).
    Values may contain `=`, only the first one separates the key.
    """
    if "=" not in line:
        raise DotenvParseError(line)
    k, v = line.split("=", 1)
    return Pair(key=k.strip(), value=resolve_value(v.strip()))


def extract_key(raw_line: str) -> Optional[str]:
    """Key of a raw file line, or None for blank, comment and `=`-less lines."""
    line = strip_export(raw_line.strip())
    if not line or line.startswith("#") or "=" not in line:
        return None
    return line.split("=", 1)[0].strip()


def format_line(key: str, value: str) -> str:
    return f'{key}="{escape(value)}"'
