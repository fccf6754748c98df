import pytest

from subgen.encoding import SubsetEncoding
from subgen.errors import IndexOutOfRange, InvalidUniverse
from subgen.universe import MAX_SIZE, Universe


@pytest.mark.parametrize("size", [0, 1, 5, MAX_SIZE])
def test_construct(size: int) -> None:
    universe = Universe.construct(size)
    assert universe.size == size
    assert len(universe) == size
    assert universe.num_subsets == 2**size
    assert universe.elements is None


@pytest.mark.parametrize("size", [-1, -100, MAX_SIZE + 1, 1000])
def test_construct_invalid(size: int) -> None:
    with pytest.raises(InvalidUniverse):
        Universe.construct(size)


def test_invalid_universe_is_value_error() -> None:
    with pytest.raises(ValueError):
        Universe(-1)


@pytest.mark.parametrize("size", [1.5, "3", None, True])
def test_construct_type_error(size: object) -> None:
    with pytest.raises(TypeError):
        Universe(size)  # type: ignore[arg-type]


def test_immutable() -> None:
    universe = Universe(3)
    with pytest.raises(AttributeError):
        universe.size = 4  # type: ignore[misc]


def test_equality() -> None:
    assert Universe(3) == Universe.construct(3)
    assert hash(Universe(3)) == hash(Universe(3))
    assert Universe(3) != Universe(4)


def test_of() -> None:
    universe = Universe.of(["a", "b", "c"])
    assert universe.size == 3
    assert universe.elements == ("a", "b", "c")


def test_select() -> None:
    universe = Universe.of("abcd")
    assert universe.select(SubsetEncoding(4, 0b0000)) == ()
    assert universe.select(SubsetEncoding(4, 0b0101)) == ("a", "c")
    assert universe.select(SubsetEncoding(4, 0b1111)) == ("a", "b", "c", "d")


def test_select_errors() -> None:
    with pytest.raises(ValueError):
        Universe(2).select(SubsetEncoding(2, 1))
    with pytest.raises(IndexOutOfRange):
        Universe.of("abc").select(SubsetEncoding(2, 1))


def test_elements_are_hashable() -> None:
    universe = Universe(2, ["a", "b"])  # type: ignore[arg-type]
    assert universe.elements == ("a", "b")
    assert hash(universe) == hash(Universe.of("ab"))


def test_elements_length_mismatch() -> None:
    with pytest.raises(InvalidUniverse):
        Universe(3, ("a", "b"))
