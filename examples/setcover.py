#!/usr/bin/env python3
"""
Set cover example.

This script finds a smallest family of sets covering a universe by brute force
over subsets of the families, optionally restricted to at most --max-size
families.
"""

import argparse
import logging

import z3

from subgen.bridge import member, popcount, subset_var
from subgen.iterator import SubsetIterator, SubsetSource
from subgen.logging import setup_color_logging
from subgen.universe import Universe
from subgen.views import Bound, sized

logger = logging.getLogger(__name__)

FAMILIES = [[4], [0, 1, 2], [1, 3], [2, 4], [0, 3, 4]]


def min_cover(
    num_points: int, families: list[list[int]], max_size: int | None = None
) -> tuple[int, ...] | None:
    """Return the indices of a smallest covering family, if any."""
    universe = Universe(len(families))
    source: SubsetSource = SubsetIterator(universe, include_empty=num_points == 0)
    if max_size is not None:
        source = sized(source, max_size, Bound.AT_MOST)
    best: tuple[int, ...] | None = None
    for encoding in source:
        if best is not None and encoding.cardinality() >= len(best):
            continue
        covered: set[int] = set()
        for i in encoding:
            covered.update(families[i])
        if covered.issuperset(range(num_points)):
            best = tuple(encoding)
            logger.debug(f"Improved cover: {best}")
    return best


def z3_min_cover_size(num_points: int, families: list[list[int]]) -> int | None:
    """Optimize the cover size symbolically, for cross-checking."""
    s = subset_var(len(families))
    optimizer = z3.Optimize()
    for point in range(num_points):
        optimizer.add(
            z3.Or(
                [member(s, i) for i, family in enumerate(families) if point in family]
            )
        )
    size = popcount(s)
    optimizer.minimize(size)
    if optimizer.check() != z3.sat:
        return None
    return optimizer.model().eval(size, model_completion=True).as_long()


def main(args: argparse.Namespace) -> None:
    cover = min_cover(args.points, FAMILIES, args.max_size)
    if cover is None:
        logger.info("No cover found")
        print(None)
    else:
        logger.info(f"Cover: {[FAMILIES[i] for i in cover]}")
        print(len(cover))

    if args.z3:
        expected = z3_min_cover_size(args.points, FAMILIES)
        if args.max_size is not None and expected is not None:
            if expected > args.max_size:
                expected = None
        actual = None if cover is None else len(cover)
        if actual != expected:
            logger.error(f"Z3 disagrees: optimum = {expected}")
        else:
            logger.info("Z3 agrees")


parser = argparse.ArgumentParser(
    description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument(
    "--points", type=int, default=5, help="Number of points to cover"
)
parser.add_argument(
    "--max-size", type=int, help="Only consider covers of at most this many sets"
)
parser.add_argument("--z3", action="store_true", help="Cross-check with Z3")

if __name__ == "__main__":
    setup_color_logging(level=logging.INFO)
    args = parser.parse_args()
    main(args)
