"""Command-line interface.

Usage:
    bajzel message.fuzl > out.bin
    bajzel message.fuzl --seed 42
    bajzel message.fuzl --dump tokens
    bajzel message.fuzl --dump statements

Exit Codes:
    0   Output written
    1   Input could not be read, or the program failed to compile/generate

Python 3.13+.
"""

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from .diagnostics import BajzelError, DiagnosticFormatter
from .evaluator import evaluate
from .generator import Generator
from .syntax import FuzlParser, lex, serialize

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bajzel",
        description="Generate random bytes from a .fuzl layout description.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One random instance, raw bytes on stdout:
  bajzel examples/http.fuzl

  # Reproducible output:
  bajzel examples/http.fuzl --seed 1234

  # Inspect the lexer or parser output:
  bajzel examples/http.fuzl --dump tokens
""",
    )
    parser.add_argument("input", type=Path, help=".fuzl input file")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source (default: unseeded)",
    )
    parser.add_argument(
        "--dump",
        choices=("bytes", "tokens", "statements"),
        default="bytes",
        help="What to write to stdout (default: bytes)",
    )
    parser.add_argument(
        "--append-term",
        action="store_true",
        help="Append the generator's TERM bytes to the output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline progress and print full diagnostics on error",
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    source = args.input.read_text(encoding="utf-8")
    logger.info("Read %d characters from %s", len(source), args.input)

    if args.dump == "tokens":
        for token in lex(source):
            print(f"{token!r},")
        return

    program = FuzlParser().parse_source(source)
    if args.dump == "statements":
        sys.stdout.write(serialize(program))
        return

    rng = random.Random(args.seed)  # noqa: S311 - test data, not crypto
    output = Generator(rng, append_terminator=args.append_term).generate(evaluate(program))
    logger.info("Generated %d bytes", len(output))
    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
        )

    try:
        _run(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[-] Error: Could not read file: {e}", file=sys.stderr)
        return 1
    except BajzelError as e:
        print(f"[-] Error: {e}", file=sys.stderr)
        if args.verbose and e.diagnostic is not None:
            print(DiagnosticFormatter().format(e.diagnostic), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
