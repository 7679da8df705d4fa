from __future__ import annotations

from typing import List

from envline.grammar.document import normalize_newlines
from envline.grammar.lines import extract_key, format_line, strip_export


def validate_key(key: str) -> None:
    if not key or key != key.strip():
        raise ValueError(f"invalid dotenv key: {key!r}")
    if "=" in key or "\n" in key or "\r" in key or key.startswith("#") or strip_export(key) != key:
        raise ValueError(f"invalid dotenv key: {key!r}")


def upsert_text(existing: str, key: str, value: str) -> str:
    """
    Return `existing` with `key` set to `value`.

    The first line assigning `key` is rewritten in place, everything else
    (comments, blank lines, later duplicates) is kept verbatim. If no line
    matches, the assignment is appended. Trailing blank lines are dropped:
    the result always ends with exactly one newline.
    """
    validate_key(key)
    new_line = format_line(key, value)

    replaced = False
    lines: List[str] = []
    for line in normalize_newlines(existing).split("\n"):
        if not replaced and extract_key(line) == key:
            lines.append(new_line)
            replaced = True
        else:
            lines.append(line)
    body = "\n".join(lines)

    if not replaced:
        if body and not body.endswith("\n"):
            body += "\n"
        body += new_line

    return body.rstrip("\n") + "\n"
