from __future__ import annotations

from typing import Dict

_UNESCAPES: Dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "#": "#",
    "\\": "\\",
}

_ESCAPES: Dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "#": "\\#",
}


def unescape(body: str) -> str:
    """
    Decode the body of a double-quoted value.
    - `\\x` for an unknown `x` yields `x`
    - a trailing lone backslash is kept as-is
    """
    out = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 == n:
            out.append("\\")
            break
        nxt = body[i + 1]
        out.append(_UNESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def escape(raw: str) -> str:
    """Encode a raw value as the body of a double-quoted value."""
    return "".join(_ESCAPES.get(ch, ch) for ch in raw)
