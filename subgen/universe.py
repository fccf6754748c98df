"""
# Universes of indexed elements.

A universe is a fixed, immutable collection of `size` elements identified by
position. The engine never inspects elements; a universe built by
`Universe.of()` merely keeps them so that encodings can be mapped back.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .encoding import SubsetEncoding
from .errors import IndexOutOfRange, InvalidUniverse

# Iterator cursors are modelled as unsigned 64 bit counters ranging over
# [0, 2**size], so 2**size itself must be representable.
CURSOR_BITS = 64
MAX_SIZE = CURSOR_BITS - 1


@dataclass(frozen=True, slots=True)
class Universe:
    """An immutable universe of `size` elements indexed 0..size-1."""

    size: int
    elements: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            raise TypeError(f"universe size must be an int, got {self.size!r}")
        if self.size < 0:
            raise InvalidUniverse(f"universe size must be nonnegative: {self.size}")
        if self.size > MAX_SIZE:
            raise InvalidUniverse(
                f"universe size {self.size} exceeds {MAX_SIZE}, "
                f"the largest size a {CURSOR_BITS} bit cursor can enumerate"
            )
        if self.elements is not None:
            # Frozen, so bypass __setattr__ to keep elements hashable.
            object.__setattr__(self, "elements", tuple(self.elements))
            if len(self.elements) != self.size:
                raise InvalidUniverse(
                    f"universe size {self.size} does not match "
                    f"{len(self.elements)} elements"
                )

    @staticmethod
    def construct(size: int) -> "Universe":
        """Create a universe of `size` anonymous elements."""
        return Universe(size)

    @staticmethod
    def of(elements: Iterable[Any]) -> "Universe":
        """Create a universe over concrete elements, in the given order."""
        elements = tuple(elements)
        return Universe(len(elements), elements)

    def __len__(self) -> int:
        return self.size

    @property
    def num_subsets(self) -> int:
        """The number of subsets, 2**size."""
        return 1 << self.size

    def select(self, encoding: SubsetEncoding) -> tuple[Any, ...]:
        """Return the elements selected by an encoding, in index order."""
        if self.elements is None:
            raise ValueError("universe was constructed without elements")
        if encoding.width != self.size:
            raise IndexOutOfRange(
                f"encoding width {encoding.width} does not match "
                f"universe size {self.size}"
            )
        return tuple(self.elements[i] for i in encoding.to_index_list())
