#!/usr/bin/env python3
"""
Enumerate combinations of typed atoms with limited availability.

Example:
    python examples/enumerate.py A=2 B=1 C=1 --size 3 --mode max
"""

import argparse
import logging

from limcomb.combination import Mode
from limcomb.itertools import count_combinations
from limcomb.limited import LimitedCombination, total_number_of_atoms
from limcomb.logging import setup_color_logging
from limcomb.metrics import log_counters

logger = logging.getLogger(__name__)


def parse_count(arg: str) -> tuple[str, int]:
    atom, sep, count = arg.partition("=")
    if not sep or not atom:
        raise argparse.ArgumentTypeError(f"Expected ATOM=COUNT, got {arg!r}")
    try:
        return atom, int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid count in {arg!r}") from None


def enumerate_combinations(
    availability: dict[str, int], size: int, mode: Mode, *, sep: str = ""
) -> int:
    """Print each combination on its own line and return how many there were."""
    combinations = LimitedCombination(availability, size, mode)
    logger.info(f"Enumerating {combinations}")
    count = 0
    for combination in combinations:
        print(sep.join(combination))
        count += 1
    expected = count_combinations(list(availability.values()), size, mode)
    if count != expected:
        logger.error(f"Found {count} combinations but expected {expected}")
    else:
        logger.info(f"Found {count} combinations")
    return count


def main(args: argparse.Namespace) -> None:
    setup_color_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    availability = dict(args.counts)
    size = args.size
    if size is None:
        size = total_number_of_atoms(availability)

    enumerate_combinations(availability, size, Mode(args.mode), sep=args.sep)
    if args.verbose:
        log_counters()


parser = argparse.ArgumentParser(
    description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument(
    "counts",
    nargs="+",
    type=parse_count,
    metavar="ATOM=COUNT",
    help="Number of available atoms of each type",
)
parser.add_argument(
    "--size",
    type=int,
    help="Combination size, defaults to the total number of atoms",
)
parser.add_argument(
    "--mode",
    default=Mode.MAX.value,
    choices=[m.value for m in Mode],
    help="Whether size is an exact, min, or max size",
)
parser.add_argument("--sep", default="", help="Separator between atoms")
parser.add_argument("-v", "--verbose", action="store_true")

if __name__ == "__main__":
    args = parser.parse_args()
    main(args)
