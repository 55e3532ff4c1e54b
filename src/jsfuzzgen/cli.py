"""Command-line driver: generate random JavaScript programs.

Usage:
    jsfuzzgen --seed 42 --budget 30
    jsfuzzgen --seed 1 --count 100 --budget 50 --output-dir corpus/
    jsfuzzgen --types object,array --config knobs.json --validate
    python -m jsfuzzgen -v --seed 7

Each program is one expression statement. With --count N, programs use
seeds seed, seed + 1, ..., seed + N - 1, so any program can be reproduced
from its file name.

Exit Codes:
    0   All programs generated
    1   Generation failed (unsatisfiable request, malformed tree)
    2   Invalid arguments or configuration

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from jsfuzzgen.constants import DEFAULT_EXTERNS
from jsfuzzgen.diagnostics import ConfigurationError, FuzzError
from jsfuzzgen.enums import Type
from jsfuzzgen.generation import Configuration, generate_program
from jsfuzzgen.syntax import CodePrinter

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

DEFAULT_BUDGET = 20


def _parse_types(text: str) -> frozenset[Type]:
    """Parse a comma-separated type list, e.g. ``object,array``."""
    names = [part.strip() for part in text.split(",") if part.strip()]
    if not names:
        msg = "expected at least one type"
        raise argparse.ArgumentTypeError(msg)
    try:
        return frozenset(Type(name) for name in names)
    except ValueError as e:
        choices = ", ".join(t.value for t in Type)
        msg = f"{e} (choose from: {choices})"
        raise argparse.ArgumentTypeError(msg) from e


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        msg = f"must be >= 0, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        msg = f"must be >= 1, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the jsfuzzgen command."""
    parser = argparse.ArgumentParser(
        prog="jsfuzzgen",
        description="Generate random, syntactically valid JavaScript expressions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One program to stdout:
  jsfuzzgen --seed 42 --budget 30

  # A corpus of 100 files named <seed>.js:
  jsfuzzgen --seed 1 --count 100 --output-dir corpus/

  # Only object or array roots, with custom knobs:
  jsfuzzgen --types object,array --config knobs.json
""",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed of the first program (default: random, logged)",
    )
    parser.add_argument(
        "--budget",
        type=_non_negative,
        default=DEFAULT_BUDGET,
        help=f"Maximum budget units per program (default: {DEFAULT_BUDGET})",
    )
    parser.add_argument(
        "--types",
        type=_parse_types,
        default=None,
        help="Comma-separated root types (default: any)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with generator knobs",
    )
    parser.add_argument(
        "--count",
        type=_positive,
        default=1,
        help="Number of programs to generate (default: 1)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write each program to <dir>/<seed>.js instead of stdout",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check tree shape before printing",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log generation decisions (DEBUG)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Configuration.from_json(args.config) if args.config else Configuration()
    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    seed: int = args.seed if args.seed is not None else random.SystemRandom().getrandbits(32)
    if args.seed is None:
        logger.info("Using random seed %d", seed)

    output_dir: Path | None = args.output_dir
    if output_dir is not None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"[ERROR] Cannot create output directory: {e}", file=sys.stderr)
            return 2

    printer = CodePrinter()

    for program_seed in range(seed, seed + args.count):
        try:
            tree = generate_program(
                program_seed, args.budget, args.types, config, externs=DEFAULT_EXTERNS
            )
            source = printer.print(tree, statement=True, validate=args.validate)
        except FuzzError as e:
            print(f"[ERROR] seed {program_seed}: {e}", file=sys.stderr)
            return 1

        if output_dir is None:
            sys.stdout.write(source)
        else:
            (output_dir / f"{program_seed}.js").write_text(source, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
