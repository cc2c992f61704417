"""Command-line entry point for rendering tab notation files.

Usage:
    tab-interpreter <input_file> [output_file]

Examples:
    tab-interpreter testdata/standard_riff.tab
    tab-interpreter testdata/standard_riff.tab riff.txt
    tab-interpreter testdata/standard_riff.tab --stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tab_interpreter.config import InterpreterConfig
from tab_interpreter.errors import TabInterpreterError
from tab_interpreter.interpreter import interpret, run
from tab_interpreter.logger import setup_logger

logger = logging.getLogger(__name__)

EXIT_BAD_INPUT = 1
EXIT_INTERPRETER_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tab-interpreter",
        description="Render compact tab notation as ASCII guitar tablature",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s testdata/standard_riff.tab
  %(prog)s testdata/standard_riff.tab riff.txt
  %(prog)s testdata/standard_riff.tab --stdout
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Tab notation file to interpret",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Output file, always given a .txt extension (default: <input>-output.txt)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the tablature instead of writing a file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable detailed debug logging messages",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        print("Could not parse arguments: No filename was provided.", file=sys.stderr)
        return EXIT_BAD_INPUT

    level = logging.DEBUG if args.debug else logging.INFO
    # keep progress messages out of printed tablature
    setup_logger(level, stream=sys.stderr if args.stdout else None)

    try:
        if args.stdout:
            logger.info(f"Reading contents from {args.input}.")
            print(interpret(args.input.read_text(encoding="utf-8")), end="")
        else:
            run(InterpreterConfig.from_paths(args.input, args.output))
    except (TabInterpreterError, OSError) as e:
        logger.debug("Interpretation failed", exc_info=True)
        print(f"Interpreter failed:\n{e}", file=sys.stderr)
        return EXIT_INTERPRETER_FAILED

    return 0


if __name__ == "__main__":
    sys.exit(main())
