"""
# Memory-bounded enumeration of the subsets of a finite universe.

Subsets are produced lazily as bit-vector encodings, one per step, in
binary-counting order. See `subgen.iterator` and `subgen.views`.
"""

from .encoding import SubsetEncoding
from .errors import IndexOutOfRange, InvalidUniverse, IteratorExhausted, SubgenError
from .iterator import SubsetIterator, SubsetSource, nth_subset
from .universe import MAX_SIZE, Universe
from .views import (
    Bound,
    ConstrainedView,
    Constraint,
    Predicate,
    SizeBound,
    filtered,
    sized,
)

__all__ = [
    "MAX_SIZE",
    "Bound",
    "ConstrainedView",
    "Constraint",
    "IndexOutOfRange",
    "InvalidUniverse",
    "IteratorExhausted",
    "Predicate",
    "SizeBound",
    "SubgenError",
    "SubsetEncoding",
    "SubsetIterator",
    "SubsetSource",
    "Universe",
    "filtered",
    "nth_subset",
    "sized",
]
