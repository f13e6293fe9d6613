"""Command-line front end for str-similarity.

Usage::

    echo -n "nutshell" | str-similarity nushell
    echo -n "nutshell" | str-similarity nushell --algorithm jarw --normalize
    echo -n "nutshell" | str-similarity nushell --all
    str-similarity --list

The pipeline input (stdin, or ``--input``) is the *left* operand and the
positional STRING is the *right* operand.  One trailing newline is stripped
from stdin so ``echo`` output compares as expected.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from str_similarity.api import compute_all, compute_one, list_algorithms
from str_similarity.resolver import DEFAULT_ALGORITHM, UnknownAlgorithmError

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="str-similarity",
        description="Compare strings to find similarity by algorithm",
    )
    p.add_argument("string", nargs="?", help="String to compare with")
    p.add_argument(
        "-n",
        "--normalize",
        action="store_true",
        help="Normalize the results between 0 and 1",
    )
    p.add_argument(
        "-l", "--list", action="store_true", help="List all available algorithms"
    )
    p.add_argument(
        "-a",
        "--algorithm",
        default=DEFAULT_ALGORITHM.value,
        help="Algorithm name or alias (default: %(default)s)",
    )
    p.add_argument(
        "--all", action="store_true", help="Run every algorithm and print a table"
    )
    p.add_argument(
        "--input",
        default=None,
        help="Left operand; read from stdin when omitted",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown algorithm names instead of using the default",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def _read_pipeline(stream: TextIO | None) -> str | None:
    """Return the piped text, or None when stdin is absent or a terminal."""
    if stream is None or stream.isatty():
        return None
    if hasattr(stream, "buffer"):
        text = stream.buffer.read().decode("utf-8")
    else:
        text = stream.read()
    return text.removesuffix("\n").removesuffix("\r")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name, alias in list_algorithms():
            print(f"{name}\t{alias}")
        return 0

    if args.string is None:
        parser.error("Expected a string as a parameter, found nothing")

    if args.input is not None:
        left = args.input
    else:
        try:
            left = _read_pipeline(sys.stdin)
        except UnicodeDecodeError as exc:
            print(f"error: pipeline input is not text: {exc}", file=sys.stderr)
            return 1
        if left is None:
            print("error: expected something from pipeline", file=sys.stderr)
            return 1

    logger.debug("comparing %r to %r", left, args.string)

    if args.all:
        for name, value in compute_all(left, args.string, args.normalize):
            print(f"{name}\t{value}")
        return 0

    try:
        value = compute_one(
            args.algorithm, left, args.string, args.normalize, strict=args.strict
        )
    except UnknownAlgorithmError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(value)
    return 0
