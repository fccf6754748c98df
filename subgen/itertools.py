from collections.abc import Iterable, Iterator
from typing import TypeVar

from .iterator import SubsetIterator
from .universe import Universe
from .views import sized

_T = TypeVar("_T")


def iter_subsets(
    elements: Iterable[_T], *, include_empty: bool = True
) -> Iterator[tuple[_T, ...]]:
    """Iterate over all subsets of elements, in binary-counting order."""
    universe = Universe.of(elements)
    for encoding in SubsetIterator(universe, include_empty=include_empty):
        yield universe.select(encoding)


def iter_subsets_of_size(elements: Iterable[_T], k: int) -> Iterator[tuple[_T, ...]]:
    """
    Iterate over all k-element subsets of elements, in the same relative order
    as `iter_subsets()`. Note this differs from `itertools.combinations()`,
    which orders lexicographically by position.
    """
    universe = Universe.of(elements)
    for encoding in sized(SubsetIterator(universe), k):
        yield universe.select(encoding)
