#!/usr/bin/env python3
"""
Subset listing example.

This script prints the subsets of a universe of --number elements in
binary-counting order.
"""

import argparse
import logging

from subgen.iterator import SubsetIterator, SubsetSource
from subgen.logging import setup_color_logging
from subgen.metrics import log_counters
from subgen.universe import Universe
from subgen.views import sized


def main(args: argparse.Namespace) -> None:
    iterator = SubsetIterator(Universe(args.number), include_empty=not args.no_empty)
    if args.seek:
        iterator.seek(args.seek)
    source: SubsetSource = iterator
    if args.size is not None:
        source = sized(source, args.size)

    print("Index\tSubset")
    print("-" * 40)
    for count, encoding in enumerate(source):
        if count >= args.limit:
            break
        print(f"{int(encoding)}\t{encoding}")
    log_counters()


parser = argparse.ArgumentParser(
    description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument(
    "--number", "-n", type=int, default=4, help="Number of elements"
)
parser.add_argument("--size", "-k", type=int, help="Only show subsets of this size")
parser.add_argument("--seek", type=int, default=0, help="Cursor to start from")
parser.add_argument(
    "--no-empty", action="store_true", help="Omit the empty subset"
)
parser.add_argument(
    "--limit", type=int, default=100, help="Maximum number of subsets to print"
)

if __name__ == "__main__":
    setup_color_logging(level=logging.INFO)
    args = parser.parse_args()
    main(args)
