#!/usr/bin/env python3
"""
Subset-sum example.

This script searches for a subset of integers summing to a target by walking
the subsets in binary-counting order, stopping at the first hit.
"""

import argparse
import logging

import z3

from subgen.bridge import member, subset_var
from subgen.iterator import SubsetIterator
from subgen.logging import setup_color_logging
from subgen.universe import Universe

logger = logging.getLogger(__name__)


def find_subset(values: list[int], target: int) -> tuple[int, ...] | None:
    """Return the first subset of values summing to target, if any."""
    universe = Universe.of(values)
    for encoding in SubsetIterator(universe, include_empty=False):
        subset = universe.select(encoding)
        if sum(subset) == target:
            return subset
    return None


def z3_feasible(values: list[int], target: int) -> bool:
    """Decide feasibility symbolically, for cross-checking."""
    s = subset_var(len(values))
    terms = [z3.If(member(s, i), v, 0) for i, v in enumerate(values)]
    solver = z3.Solver()
    solver.add(s != 0, z3.Sum(terms) == target)
    return solver.check() == z3.sat


def main(args: argparse.Namespace) -> None:
    subset = find_subset(args.values, args.target)
    if subset is None:
        logger.info(f"No subset of {args.values} sums to {args.target}")
    else:
        logger.info(f"Found {' + '.join(map(str, subset))} = {args.target}")
    print(subset is not None)

    if args.z3:
        expected = z3_feasible(args.values, args.target)
        if expected != (subset is not None):
            logger.error(f"Z3 disagrees: feasible = {expected}")
        else:
            logger.info("Z3 agrees")


parser = argparse.ArgumentParser(
    description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument(
    "values", type=int, nargs="*", default=[3, 34, 4, 12, 5, 2], help="Values"
)
parser.add_argument("--target", "-t", type=int, default=9, help="Target sum")
parser.add_argument(
    "--z3", action="store_true", help="Cross-check feasibility with Z3"
)

if __name__ == "__main__":
    setup_color_logging(level=logging.INFO)
    args = parser.parse_args()
    main(args)
