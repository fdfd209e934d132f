"""Disjoint-letter word group finder.

Finds every group of N words from a dictionary such that no letter is used twice across the
group (e.g. five words covering 25 distinct letters).  Words are indexed in a trie keyed on
their sorted letters, which is then reordered by letter rarity and searched in parallel by
a fixed pool of worker threads.
"""

import argparse
import sys

from lettergroups.solver import solver
from lettergroups.solver.config import config as solver_config

__version__ = "0.1.0"


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lettergroups",
        description="Find groups of words that share no letters",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=positive_int,
        required=True,
        metavar="N",
        help="Number of distinct words to search for",
    )
    strategy = parser.add_mutually_exclusive_group()
    strategy.add_argument(
        "-N",
        "--naive",
        dest="strategy",
        action="store_const",
        const="naive",
        help="Use naive brute-force search",
    )
    strategy.add_argument(
        "-T",
        "--tree",
        dest="strategy",
        action="store_const",
        const="tree",
        help="Use tree-based search (this is the default)",
    )
    parser.add_argument(
        "-j",
        "--threads",
        type=positive_int,
        metavar="N",
        help="Use N threads (defaults to number of CPU cores)",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        metavar="INPUT",
        help="Input file, one word per line ('-' or omitted reads standard input)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the word group finder."""
    parser = build_parser()
    if argv is None and len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(2)
    args = parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.strategy is not None:
        overrides["strategy"] = args.strategy
    if args.threads is not None:
        overrides["max_workers"] = args.threads
    config = solver_config.model_copy(update=overrides)

    try:
        summary = solver.run(args.number, input_path=args.input, config=config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Search interrupted by user.", file=sys.stderr)
        sys.exit(1)

    if summary.failed:
        sys.exit(1)
