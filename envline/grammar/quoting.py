from __future__ import annotations

import enum


class QuoteKind(enum.Enum):
    DOUBLE = "double"
    SINGLE = "single"
    NONE = "none"


def classify(token: str) -> QuoteKind:
    """
    Delimiter style of an already-trimmed value token.
    - a single quote character on its own is NONE, not an empty quoted value
    """
    if len(token) >= 2 and token[0] == token[-1] == '"':
        return QuoteKind.DOUBLE
    if len(token) >= 2 and token[0] == token[-1] == "'":
        return QuoteKind.SINGLE
    return QuoteKind.NONE


def unquote(token: str, kind: QuoteKind) -> str:
    if kind is QuoteKind.NONE:
        return token
    return token[1:-1]
