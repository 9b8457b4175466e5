from __future__ import annotations

import array
import enum
from collections import OrderedDict, deque, namedtuple
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import PurePosixPath
from uuid import UUID

import pytest

from lib_log_mask.domain.values import (
    ArrayValue,
    Composite,
    MapValue,
    Null,
    Primitive,
    SequenceValue,
    Text,
    classify,
    is_named_tuple,
    plain_text,
)


class Colour(enum.Enum):
    RED = "red"


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value


class Plain:
    def __init__(self) -> None:
        self.name = "p"


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, Primitive("True")),
        (7, Primitive("7")),
        (2.5, Primitive("2.5")),
        (Decimal("1.10"), Primitive("1.10")),
        (b"ab", Primitive("b'ab'")),
        (Colour.RED, Primitive("Colour.RED")),
        (date(2024, 1, 2), Primitive("2024-01-02")),
        (UUID(int=1), Primitive("00000000-0000-0000-0000-000000000001")),
        (PurePosixPath("/srv/x"), Primitive("/srv/x")),
    ],
)
def test_scalars_classify_as_primitives(value: object, expected: Primitive) -> None:
    assert classify(value) == expected


def test_none_and_strings() -> None:
    assert classify(None) == Null()
    assert classify("hi") == Text("hi")
    assert classify("") == Text("")


def test_mappings_keep_iteration_order() -> None:
    shape = classify(OrderedDict([("b", 1), ("a", 2)]))
    assert isinstance(shape, MapValue)
    assert shape.entries == (("b", 1), ("a", 2))


@pytest.mark.parametrize("value", [(1, 2), array.array("i", [1, 2])])
def test_fixed_arrays(value: object) -> None:
    shape = classify(value)
    assert isinstance(shape, ArrayValue)
    assert shape.items == (1, 2)


@pytest.mark.parametrize("value", [[1, 2], deque([1, 2]), {1, 2}, frozenset({1, 2})])
def test_collections_classify_as_sequences(value: object) -> None:
    shape = classify(value)
    assert isinstance(shape, SequenceValue)
    assert sorted(shape.items) == [1, 2]
    assert shape.source is value


@pytest.mark.parametrize("value, name", [(Point(1, 2), "Point"), (Slotted(1), "Slotted"), (Plain(), "Plain")])
def test_objects_with_state_are_composites(value: object, name: str) -> None:
    shape = classify(value)
    assert isinstance(shape, Composite)
    assert shape.type_name == name
    assert shape.source is value


def test_objects_without_state_fall_back_to_text() -> None:
    value = object()
    assert classify(value) == Primitive(str(value))


def test_types_and_callables_are_leaves() -> None:
    assert classify(Point) == Primitive(str(Point))
    assert isinstance(classify(len), Primitive)
    assert isinstance(classify(iter([1])), Primitive)


def test_plain_text() -> None:
    assert plain_text(None) == "null"
    assert plain_text(Point(1, 2)) == "Point(x=1, y=2)"


def test_named_tuples_are_composites() -> None:
    Pair = namedtuple("Pair", ["left", "right"])
    pair = Pair(1, 2)
    assert is_named_tuple(pair)
    assert not is_named_tuple((1, 2))
    shape = classify(pair)
    assert isinstance(shape, Composite)
    assert shape.type_name == "Pair"
    assert isinstance(classify((1, 2)), ArrayValue)


@pytest.mark.parametrize("error", [ValueError("bad input"), KeyboardInterrupt("stop")])
def test_exceptions_classify_as_their_message(error: BaseException) -> None:
    assert classify(error) == Primitive(str(error))
