from __future__ import annotations


def cut_comment(value: str) -> str:
    """
    Truncate an unquoted value at its first unescaped `#`, then trim.

    Backslashes toggle the escaped state instead of being consumed in pairs,
    so `\\\\#` still starts a comment. Backslashes are left in the value.
    """
    escaped = False
    for idx, ch in enumerate(value):
        if ch == "#":
            if not escaped:
                return value[:idx].strip()
            escaped = False
        elif ch == "\\":
            escaped = not escaped
        else:
            escaped = False
    return value.strip()
