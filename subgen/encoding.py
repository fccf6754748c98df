"""
# Bit-vector encodings of subsets.

A `SubsetEncoding` is a self-contained value: an unsigned integer `bits` whose
bit i is set iff element i of a universe of size `width` is a member. It does
not reference the universe that produced it.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import IndexOutOfRange


@dataclass(frozen=True, slots=True)
class SubsetEncoding:
    """A subset of a universe of size `width`, as a bit vector."""

    width: int
    bits: int = 0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be nonnegative: {self.width}")
        if self.bits < 0 or self.bits >> self.width:
            raise ValueError(f"bits {self.bits:#x} do not fit in width {self.width}")

    @staticmethod
    def empty(width: int) -> "SubsetEncoding":
        return SubsetEncoding(width, 0)

    @staticmethod
    def full(width: int) -> "SubsetEncoding":
        return SubsetEncoding(width, (1 << width) - 1)

    @staticmethod
    def from_indices(width: int, indices: Iterable[int]) -> "SubsetEncoding":
        """Build an encoding from the indices of its members."""
        bits = 0
        for i in indices:
            if not 0 <= i < width:
                raise IndexOutOfRange(f"index {i} out of range for width {width}")
            bits |= 1 << i
        return SubsetEncoding(width, bits)

    def contains(self, index: int) -> bool:
        """Whether element `index` is a member."""
        if not 0 <= index < self.width:
            raise IndexOutOfRange(
                f"index {index} out of range for width {self.width}"
            )
        return bool(self.bits >> index & 1)

    def cardinality(self) -> int:
        """The number of members."""
        return self.bits.bit_count()

    def to_index_list(self) -> list[int]:
        """The member indices in ascending order."""
        result = []
        bits = self.bits
        while bits:
            low = bits & -bits
            result.append(low.bit_length() - 1)
            bits ^= low
        return result

    def __contains__(self, index: int) -> bool:
        return self.contains(index)

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_index_list())

    def __len__(self) -> int:
        return self.cardinality()

    def __int__(self) -> int:
        return self.bits

    def __str__(self) -> str:
        return "{" + ", ".join(map(str, self.to_index_list())) + "}"
