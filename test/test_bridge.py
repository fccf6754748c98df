import math

import pytest
import z3

from subgen.bridge import (
    Z3Predicate,
    encoding_to_z3,
    iter_models,
    member,
    popcount,
    subset_var,
    z3_to_encoding,
)
from subgen.encoding import SubsetEncoding
from subgen.errors import IndexOutOfRange
from subgen.iterator import SubsetIterator
from subgen.universe import Universe
from subgen.views import ConstrainedView, sized


@pytest.mark.parametrize("bits", [0, 1, 0b1010, 0b1111])
def test_encoding_to_z3(bits: int) -> None:
    encoding = SubsetEncoding(4, bits)
    value = encoding_to_z3(encoding)
    assert value.size() == 4
    assert value.as_long() == bits
    assert z3_to_encoding(value, 4) == encoding


def test_zero_width() -> None:
    with pytest.raises(ValueError):
        encoding_to_z3(SubsetEncoding(0, 0))
    with pytest.raises(ValueError):
        subset_var(0)


def test_z3_to_encoding_width_mismatch() -> None:
    with pytest.raises(ValueError):
        z3_to_encoding(z3.BitVecVal(1, 3), 4)


def test_member_out_of_range() -> None:
    with pytest.raises(IndexOutOfRange):
        member(subset_var(3), 3)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_z3_predicate_matches_size_bound(n: int) -> None:
    universe = Universe(n)
    for k in range(n + 1):
        constraint = Z3Predicate(n, lambda s: popcount(s) == k)
        actual = list(ConstrainedView(SubsetIterator(universe), constraint))
        expected = list(sized(SubsetIterator(universe), k))
        assert actual == expected


def test_z3_predicate_member() -> None:
    constraint = Z3Predicate(3, lambda s: z3.And(member(s, 0), z3.Not(member(s, 2))))
    assert constraint.test(SubsetEncoding(3, 0b011))
    assert not constraint.test(SubsetEncoding(3, 0b101))
    with pytest.raises(ValueError):
        constraint.test(SubsetEncoding(4, 0b0001))


def test_z3_predicate_free_variable() -> None:
    x = z3.Int("x")
    constraint = Z3Predicate(2, lambda s: popcount(s) == x)
    with pytest.raises(ValueError):
        constraint.test(SubsetEncoding(2, 0b01))


@pytest.mark.parametrize("n", [1, 4])
def test_iter_models(n: int) -> None:
    for k in range(n + 1):
        actual = list(iter_models(n, lambda s: popcount(s) == k))
        assert len(actual) == math.comb(n, k)
        assert actual == list(sized(SubsetIterator(Universe(n)), k))


def test_iter_models_unsat() -> None:
    assert list(iter_models(3, lambda s: popcount(s) > 3)) == []
