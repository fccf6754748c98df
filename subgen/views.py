"""
# Constrained views over subset sources.

A `ConstrainedView` forwards only the encodings of its base source that pass
a `Constraint`, preserving base order. Views are themselves sources, so they
compose:
```
source = sized(SubsetIterator(universe), 2)
source = filtered(source, lambda s: 0 in s)
```
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from .encoding import SubsetEncoding
from .errors import IteratorExhausted
from .iterator import SubsetSource
from .metrics import COUNTERS

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]


class Constraint(ABC):
    """A test that encodings must pass to be forwarded by a view."""

    @abstractmethod
    def test(self, encoding: SubsetEncoding) -> bool:
        raise NotImplementedError


class Bound(Enum):
    EXACT = "exact"
    AT_MOST = "at_most"
    AT_LEAST = "at_least"


class SizeBound(Constraint):
    """Compares the cardinality of an encoding with `k`."""

    def __init__(self, k: int, bound: Bound = Bound.EXACT) -> None:
        if not isinstance(k, int) or isinstance(k, bool) or k < 0:
            raise ValueError(f"size bound must be a nonnegative int: {k!r}")
        self.k = k
        self.bound = bound

    def test(self, encoding: SubsetEncoding) -> bool:
        size = encoding.cardinality()
        if self.bound is Bound.EXACT:
            return size == self.k
        if self.bound is Bound.AT_MOST:
            return size <= self.k
        assert self.bound is Bound.AT_LEAST
        return size >= self.k

    def __repr__(self) -> str:
        return f"SizeBound({self.k}, {self.bound})"


class Predicate(Constraint):
    """Wraps an arbitrary caller-supplied test."""

    def __init__(self, fn: Callable[[SubsetEncoding], bool]) -> None:
        self.fn = fn

    def test(self, encoding: SubsetEncoding) -> bool:
        return bool(self.fn(encoding))

    def __repr__(self) -> str:
        return f"Predicate({self.fn!r})"


class ConstrainedView(SubsetSource):
    """
    Source of the encodings of `base` that satisfy `constraint`.

    Exhaustion is decided by looking ahead: `has_next()` pulls from the base
    until it finds a satisfying encoding, which is held until the next
    `advance()`. Consequently `has_next()` may consume the whole remaining
    base sequence.
    """

    def __init__(self, base: SubsetSource, constraint: Constraint) -> None:
        self.base = base
        self.constraint = constraint
        self._pending: SubsetEncoding | None = None

    def has_next(self) -> bool:
        if self._pending is not None:
            return True
        while self.base.has_next():
            encoding = self.base.advance()
            if self.constraint.test(encoding):
                counter["view.accept"] += 1
                self._pending = encoding
                return True
            counter["view.skip"] += 1
        logger.debug(f"Exhausted view with {self.constraint}")
        return False

    def advance(self) -> SubsetEncoding:
        if not self.has_next():
            raise IteratorExhausted(f"no further subsets satisfy {self.constraint}")
        encoding = self._pending
        assert encoding is not None
        self._pending = None
        return encoding

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base!r}, {self.constraint!r})"


def sized(
    base: SubsetSource, k: int, bound: Bound = Bound.EXACT
) -> ConstrainedView:
    """View of the encodings of `base` whose cardinality is bounded by `k`."""
    return ConstrainedView(base, SizeBound(k, bound))


def filtered(
    base: SubsetSource, predicate: Callable[[SubsetEncoding], bool]
) -> ConstrainedView:
    """View of the encodings of `base` satisfying `predicate`."""
    return ConstrainedView(base, Predicate(predicate))
