"""Command line interface for reading and editing dotenv files."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from envline.core.errors import DotenvIOError, DotenvParseError, MissingEnvError
from envline.core.logging_config import setup_logging_from_settings
from envline.core.settings import load_settings
from envline.services.dotenv_service import load_file, read_pairs, set_string
from envline.services.lookup_service import get_int_or, get_string_or, require_int, require_string


def cmd_parse(args: argparse.Namespace) -> int:
    path = args.file or load_settings().resolve_dotenv_path()
    pairs = read_pairs(path)
    if args.json:
        print(json.dumps([{"key": p.key, "value": p.value} for p in pairs], ensure_ascii=False, indent=2))
        return 0
    for p in pairs:
        print(f"{p.key}={p.value!r}")
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    if args.file:
        load_file(args.file)
    if args.int:
        if args.default is None:
            print(require_int(args.key))
        else:
            print(get_int_or(args.key, int(args.default)))
        return 0
    if args.default is None:
        print(require_string(args.key))
    else:
        print(get_string_or(args.key, args.default))
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    set_string(args.key, args.value, path=args.file)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envline",
        description="Parse, query and update .env files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse a dotenv file and print its pairs")
    p_parse.add_argument("file", nargs="?", help="dotenv path (default: ENVLINE_ENV_FILE or .env)")
    p_parse.add_argument("--json", action="store_true", help="Output as JSON")

    p_get = sub.add_parser("get", help="Print an environment variable")
    p_get.add_argument("key")
    p_get.add_argument("--default", help="Fallback when the variable is absent or empty")
    p_get.add_argument("--int", action="store_true", help="Require an integer value")
    p_get.add_argument("--file", help="Load this dotenv file first")

    p_set = sub.add_parser("set", help="Insert or update a key in a dotenv file")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument("--file", help="dotenv path (default: ENVLINE_ENV_FILE or .env)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging_from_settings(load_settings())

    commands = {"parse": cmd_parse, "get": cmd_get, "set": cmd_set}
    try:
        return commands[args.command](args)
    except MissingEnvError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except DotenvParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (DotenvIOError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 3


if __name__ == "__main__":
    sys.exit(main())
