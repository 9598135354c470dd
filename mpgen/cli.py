"""
Command-line interface for the memorable passphrase generator.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import config as defaults
from .config import ConfigOptions, build_config
from .password_maker import PasswordMaker
from .rng import make_rng, parse_seed
from .types import PaddingType, RngType, StrEnum, ValidationError, WordTransformation
from .wordlist import WordlistError, load_default_wordlist, load_wordlist

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1


def _choices_help(title: str, kind: type[StrEnum]) -> List[str]:
    width = max(len(name) for name in kind.names())
    lines = [f"{title}:"]
    for name, member in kind.choices():
        if member.description:
            lines.append(f"    {name:<{width}} ({member.description})")
        else:
            lines.append(f"    {name}")
    return lines


def _epilog() -> str:
    lines = ["types are case insensitive", ""]
    lines += _choices_help("WORD TRANSFORMATIONS", WordTransformation)
    lines.append("")
    lines += _choices_help("PADDING TYPES", PaddingType)
    lines.append("")
    lines += _choices_help("RNG TYPES", RngType)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    # argparse %-formats help strings
    symbols = f'default "{defaults.SYMBOL_ALPHABET}"'.replace("%", "%%")
    parser = argparse.ArgumentParser(
        prog="mpgen",
        description="Create memorable passwords from random words, digits and symbols.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Every value is kept as a raw string; build_config() does the checking.
    parser.add_argument(
        "-c", "--count", metavar="NUM",
        help=f"how many passwords to make (default {defaults.DEFAULT_COUNT})",
    )
    parser.add_argument(
        "-w", "--word-count", metavar="NUM",
        help=f"number of words (default {defaults.DEFAULT_WORD_COUNT})",
    )
    parser.add_argument(
        "-m", "--word-min-length", metavar="NUM",
        help=f"minimum length of a chosen word (default {defaults.DEFAULT_WORD_MIN_LENGTH})",
    )
    parser.add_argument(
        "-M", "--word-max-length", metavar="NUM",
        help=f"maximum length of a chosen word (default {defaults.DEFAULT_WORD_MAX_LENGTH})",
    )
    parser.add_argument(
        "-W", "--word-transformation", metavar="TYPE",
        help=(
            "transformation to apply to the selected words "
            f"(default {WordTransformation.default()})"
        ),
    )
    parser.add_argument(
        "-b", "--digits-before", metavar="NUM",
        help=f"number of digits to prepend (default {defaults.DEFAULT_DIGITS_BEFORE})",
    )
    parser.add_argument(
        "-a", "--digits-after", metavar="NUM",
        help=f"number of digits to append (default {defaults.DEFAULT_DIGITS_AFTER})",
    )
    parser.add_argument(
        "-T", "--padding-type", metavar="TYPE",
        help=f"how to apply padding (default {PaddingType.default()})",
    )
    parser.add_argument(
        "-l", "--padding-length", metavar="NUM",
        help=(
            f"how much to pad (default {defaults.DEFAULT_PADDING_LENGTH_FIXED} for fixed, "
            f"{defaults.DEFAULT_PADDING_LENGTH_ADAPTIVE} for adaptive)"
        ),
    )
    parser.add_argument(
        "-p", "--padding-characters", metavar="CHOICES",
        help=f"padding characters to choose from ({symbols})",
    )
    parser.add_argument(
        "-s", "--separators", metavar="CHOICES",
        help=f"separator characters to choose from ({symbols})",
    )
    parser.add_argument(
        "-r", "--rng", metavar="TYPE",
        help=f"method of random number generation (default {RngType.default()})",
    )
    parser.add_argument(
        "--seed", metavar="NUM",
        help="seed for reproducible output (overrides --rng)",
    )
    parser.add_argument(
        "--wordlist", metavar="PATH",
        help="word list file, one word per line (diceware lines accepted)",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="logging verbosity",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> ConfigOptions:
    return ConfigOptions(
        count=args.count,
        word_count=args.word_count,
        word_min_length=args.word_min_length,
        word_max_length=args.word_max_length,
        word_transformation=args.word_transformation,
        digits_before=args.digits_before,
        digits_after=args.digits_after,
        padding_type=args.padding_type,
        padding_length=args.padding_length,
        padding_characters=args.padding_characters,
        separator_characters=args.separators,
        rng=args.rng,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for `mpgen`, `python -m mpgen` and `run_mpgen.py`.

    Malformed arguments exit with status 2 (argparse); invalid values or an
    unreadable word list print the error and exit with status 1 without
    generating anything.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(options_from_args(args))
        seed = parse_seed(args.seed)
        wordlist = load_wordlist(args.wordlist) if args.wordlist else load_default_wordlist()
    except (ValidationError, WordlistError) as exc:
        print(exc, file=sys.stderr)
        return EXIT_INVALID

    maker = PasswordMaker(config, make_rng(config.rng, seed), wordlist)
    logger.debug("Generating %d password(s) from %d words", config.count, len(wordlist))
    for password in maker.create_passwords():
        print(password)
    return EXIT_OK
