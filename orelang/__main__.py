"""Command-line entry point: run an orelang program.

    python -m orelang                  # runs the built-in sum program
    python -m orelang program.json
    python -m orelang -e '["print", 42]'
    cat program.json | python -m orelang -
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from orelang import config
from orelang.errors import OreError
from orelang.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orelang",
        description="Run a program written as a JSON array.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="program file, '-' for standard input; omit to run the built-in example",
    )
    parser.add_argument("-e", "--eval", dest="source", help="program text to run instead of a file")
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help=f"abort any while loop after N passes (default: ${config.MAX_ITERATIONS_VAR} or unbounded)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"logging level for diagnostics on stderr (default: ${config.LOG_LEVEL_VAR} or WARNING)",
    )
    return parser


def read_source(args: argparse.Namespace) -> str:
    if args.source is not None:
        return args.source
    if args.file is None:
        return Interpreter.DEFAULT_PROGRAM
    if args.file == "-":
        return sys.stdin.read()
    return Path(args.file).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.source is not None and args.file is not None:
        parser.error("give either a file or -e, not both")

    config.setup_logging(args.log_level)

    try:
        source = read_source(args)
    except (OSError, UnicodeDecodeError) as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    max_iterations = args.max_iterations if args.max_iterations is not None else 'auto'
    if max_iterations != 'auto' and max_iterations <= 0:
        max_iterations = None

    try:
        Interpreter(max_iterations=max_iterations).eval(source)
    except OreError as ex:
        logger.debug("Run aborted by %s", type(ex).__name__)
        print(f"error: {ex.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
