"""
# Lazy iteration over the subsets of a universe.

A `SubsetIterator` is a private cursor over the binary-counting sequence of a
universe's subsets: the encoding emitted at cursor k has bit pattern k. Since
the cursor-to-encoding mapping is stateless, `seek()` can jump to any position
in O(1) without replaying earlier steps.

The pull protocol is shared with constrained views via `SubsetSource`:
```
while source.has_next():
    encoding = source.advance()
```
or equivalently `for encoding in source: ...`.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator

from .encoding import SubsetEncoding
from .errors import IndexOutOfRange, IteratorExhausted
from .metrics import COUNTERS
from .universe import Universe

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]


class SubsetSource(ABC):
    """A pull-based, single-pass source of subset encodings."""

    @abstractmethod
    def has_next(self) -> bool:
        """Whether another encoding remains."""
        raise NotImplementedError

    @abstractmethod
    def advance(self) -> SubsetEncoding:
        """
        Return the next encoding and move past it.

        Raises `IteratorExhausted` if no encoding remains. Since that is a
        `StopIteration`, a generator calling this must check `has_next()`
        first, or the error surfaces as a `RuntimeError`.
        """
        raise NotImplementedError

    def __iter__(self) -> Iterator[SubsetEncoding]:
        return self

    def __next__(self) -> SubsetEncoding:
        # IteratorExhausted is a StopIteration, ending for loops cleanly.
        return self.advance()


class SubsetIterator(SubsetSource):
    """
    Iterator over all subsets of a universe in binary-counting order, starting
    at the empty subset and ending at the full universe.

    If `include_empty` is false the empty subset is skipped, leaving
    `2**n - 1` subsets.

    Iterators over the same universe are independent. A single iterator is
    not safe to share between threads.
    """

    def __init__(self, universe: Universe, *, include_empty: bool = True) -> None:
        self.universe = universe
        self._start = 0 if include_empty else 1
        self._end = universe.num_subsets
        self._cursor = self._start
        counter["iterator.init"] += 1
        logger.debug(f"Iterating over {self._end - self._cursor} subsets of {universe}")

    @staticmethod
    def over(universe: Universe) -> "SubsetIterator":
        """Iterator positioned at the empty subset."""
        return SubsetIterator(universe)

    @property
    def exhausted(self) -> bool:
        return self._cursor == self._end

    def has_next(self) -> bool:
        return self._cursor < self._end

    def advance(self) -> SubsetEncoding:
        counter["iterator.advance"] += 1
        if self._cursor == self._end:
            raise IteratorExhausted(f"all subsets of {self.universe} were emitted")
        encoding = SubsetEncoding(self.universe.size, self._cursor)
        self._cursor += 1
        if self._cursor == self._end:
            logger.debug(f"Exhausted subsets of {self.universe}")
        return encoding

    def seek(self, cursor: int) -> None:
        """
        Position the iterator so the next encoding has bit pattern `cursor`.
        Seeking to `2**n` exhausts the iterator.
        """
        counter["iterator.seek"] += 1
        if not self._start <= cursor <= self._end:
            raise IndexOutOfRange(
                f"cursor {cursor} out of range [{self._start}, {self._end}]"
            )
        logger.debug(f"Seeking from {self._cursor} to {cursor}")
        self._cursor = cursor

    def reset(self) -> None:
        """Restart from the first subset."""
        counter["iterator.reset"] += 1
        self._cursor = self._start

    def __length_hint__(self) -> int:
        return self._end - self._cursor

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.universe}, "
            f"include_empty={self._start == 0})"
        )


def nth_subset(universe: Universe, k: int) -> SubsetEncoding:
    """The k-th subset of a universe in binary-counting order, from zero."""
    if not 0 <= k < universe.num_subsets:
        raise IndexOutOfRange(f"no subset {k} in a universe of size {universe.size}")
    return SubsetEncoding(universe.size, k)
