"""
# Bridge between subset encodings and Z3 bit-vectors.

A subset of a universe of size n is represented symbolically as a Z3
bit-vector of width n, with the same bit layout as `SubsetEncoding.bits`.
This lets callers state subset constraints as Z3 formulas, filter views with
them, and enumerate their models for cross-checking.
"""

from collections.abc import Callable, Iterator

import z3

from .encoding import SubsetEncoding
from .errors import IndexOutOfRange
from .metrics import COUNTERS
from .views import Constraint

counter = COUNTERS[__name__]

Formula = Callable[[z3.BitVecRef], z3.BoolRef]


def _check_width(width: int) -> None:
    if width < 1:
        raise ValueError(f"Z3 bit-vectors need a positive width, got {width}")


def subset_var(width: int, name: str = "subset") -> z3.BitVecRef:
    """A symbolic subset of a universe of size `width`."""
    _check_width(width)
    return z3.BitVec(name, width)


def encoding_to_z3(encoding: SubsetEncoding) -> z3.BitVecNumRef:
    """Convert an encoding to a Z3 bit-vector constant."""
    _check_width(encoding.width)
    return z3.BitVecVal(encoding.bits, encoding.width)


def z3_to_encoding(value: z3.BitVecNumRef, width: int) -> SubsetEncoding:
    """Convert a Z3 bit-vector constant back to an encoding."""
    if value.size() != width:
        raise ValueError(f"expected a bit-vector of width {width}, got {value.size()}")
    return SubsetEncoding(width, value.as_long())


def member(var: z3.BitVecRef, index: int) -> z3.BoolRef:
    """Whether element `index` belongs to a symbolic subset."""
    if not 0 <= index < var.size():
        raise IndexOutOfRange(f"index {index} out of range for width {var.size()}")
    return z3.Extract(index, index, var) == 1


def popcount(var: z3.BitVecRef) -> z3.ArithRef:
    """The cardinality of a symbolic subset, as a Z3 integer."""
    return z3.Sum([z3.If(member(var, i), 1, 0) for i in range(var.size())])


class Z3Predicate(Constraint):
    """
    Constraint defined by a Z3 formula over a symbolic subset, evaluated on
    concrete encodings by substitution and simplification.
    """

    def __init__(self, width: int, formula: Formula) -> None:
        self.width = width
        self.var = subset_var(width)
        self.formula = formula(self.var)

    def test(self, encoding: SubsetEncoding) -> bool:
        counter["z3_predicate.test"] += 1
        if encoding.width != self.width:
            raise ValueError(
                f"expected an encoding of width {self.width}, got {encoding.width}"
            )
        value = z3.substitute(self.formula, (self.var, encoding_to_z3(encoding)))
        value = z3.simplify(value)
        if z3.is_true(value):
            return True
        if z3.is_false(value):
            return False
        raise ValueError(f"formula did not reduce to a constant: {value}")

    def __repr__(self) -> str:
        return f"Z3Predicate({self.formula})"


def iter_models(width: int, formula: Formula) -> Iterator[SubsetEncoding]:
    """
    Iterate over all encodings satisfying a formula, in binary-counting order.

    Each step solves for the least model greater than the previous one, so
    this is far slower than filtering a `SubsetIterator`; it is intended for
    cross-checking.
    """
    var = subset_var(width)
    optimizer = z3.Optimize()
    optimizer.add(formula(var))
    optimizer.minimize(var)
    while True:
        counter["iter_models.check"] += 1
        result = optimizer.check()
        if result == z3.unsat:
            return
        if result != z3.sat:
            raise ValueError(f"Z3 returned unexpected result: {result}")
        value = optimizer.model().eval(var, model_completion=True)
        yield z3_to_encoding(value, width)
        optimizer.add(z3.UGT(var, value))
