"""kjbpass CLI - Memorable passwords from the King James Bible.

Usage:
    python -m kjbpass.main
    python -m kjbpass.main --word-count 5 --symbol --number
    python -m kjbpass.main --symbol '#' --number 42 --no-hyphens --count 10
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import config as cfg
from .corpus import WordCorpus
from .errors import CorpusError
from .generator import PasswordBuilder


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    """Create the argument parser, using config.json defaults."""
    parser = argparse.ArgumentParser(
        description="kjbpass - Memorable passwords from the King James Bible"
    )
    parser.add_argument(
        "--word-count",
        "-w",
        type=int,
        default=defaults.get("word_count", 4),
        help=f"Number of words per password (default: {defaults.get('word_count', 4)})",
    )
    parser.add_argument(
        "--symbol",
        "-s",
        nargs="?",
        const=True,
        default=defaults.get("symbol", False),
        help="Append a symbol; without a value the default symbol is used",
    )
    parser.add_argument(
        "--number",
        "-n",
        nargs="?",
        const=True,
        default=defaults.get("number", False),
        help="Append a number; without a value a random digit is used",
    )
    parser.add_argument(
        "--no-hyphens",
        action="store_true",
        default=not defaults.get("hyphenate", True),
        help="Don't put hyphens between words",
    )
    parser.add_argument(
        "--seed",
        type=str,
        help="Seed for reproducible (not secret) passwords",
    )
    parser.add_argument(
        "--count",
        "-c",
        type=int,
        default=cfg.default_count(),
        help="Number of passwords to generate",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        help="Word list to use instead of the bundled one",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)
    args = build_parser(defaults).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        corpus = WordCorpus.from_file(args.corpus) if args.corpus else None
        builder = PasswordBuilder(corpus)

        options = {
            "wordCount": args.word_count,
            "symbol": args.symbol,
            "number": args.number,
            "hyphenate": not args.no_hyphens,
        }
        for i in range(max(args.count, 1)):
            if args.seed is not None:
                # Distinct but reproducible passwords for each index
                options["seed"] = args.seed if i == 0 else f"{args.seed}:{i}"
            print(builder.build(options))
    except CorpusError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
