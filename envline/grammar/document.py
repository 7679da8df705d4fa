from __future__ import annotations

from typing import Iterator, List

from envline.domain.pair import Pair
from envline.grammar.lines import parse_line, strip_export


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_logical_lines(text: str) -> Iterator[str]:
    """
    Lines worth parsing, in file order.
    - skips blank lines, full-line `#` comments and lines starting with `=`
    """
    for raw in normalize_newlines(text).split("\n"):
        line = strip_export(raw.strip())
        if not line or line.startswith("#") or line.startswith("="):
            continue
        yield line


def parse(text: str) -> List[Pair]:
    """
    Parse a whole dotenv document.

    All-or-nothing: the first malformed line raises `DotenvParseError` and
    no pairs are returned. Duplicate keys are kept, in order.
    """
    return [parse_line(line) for line in iter_logical_lines(text)]
