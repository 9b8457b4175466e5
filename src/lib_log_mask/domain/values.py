"""Closed set of value shapes understood by the rendering engine.

Purpose
-------
Model the value being rendered as a tagged union so the engine can dispatch
exhaustively on shape instead of sprinkling type checks through the traversal.

Contents
--------
* :class:`Null`, :class:`Primitive`, :class:`Text` – leaf shapes.
* :class:`SequenceValue`, :class:`MapValue`, :class:`ArrayValue` – ordered
  container shapes.
* :class:`Composite` – structured objects with named fields.
* :func:`classify` – map a live Python object onto one of the shapes.

System Role
-----------
Domain layer. Container shapes keep a reference to the live ``source`` object
and its children; children are classified lazily while the engine walks the
graph, which keeps self-referential graphs finite and lets the engine guard
cycles by identity.
"""

from __future__ import annotations

import array
import datetime
import inspect
import ipaddress
import numbers
import re
import uuid
from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum
from pathlib import PurePath
from types import ModuleType
from typing import Any, Union

NULL_TEXT = "null"

#: Value types whose text form is their identity even though they keep slots.
_VALUE_TYPES = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    PurePath,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    re.Pattern,
)


@dataclass(slots=True, frozen=True)
class Null:
    """Absent value; renders as ``"null"``."""


@dataclass(slots=True, frozen=True)
class Primitive:
    """Scalar value (numbers, booleans, enums, dates ...) in its text form."""

    text: str


@dataclass(slots=True, frozen=True)
class Text:
    """String value."""

    text: str


@dataclass(slots=True, frozen=True)
class SequenceValue:
    """Ordered collection of arbitrary items."""

    source: Any
    items: tuple[Any, ...]


@dataclass(slots=True, frozen=True)
class MapValue:
    """Associative collection; entries keep the mapping's iteration order."""

    source: Any
    entries: tuple[tuple[Any, Any], ...]


@dataclass(slots=True, frozen=True)
class ArrayValue:
    """Fixed-size sequence (plain tuples and :class:`array.array`)."""

    source: Any
    items: tuple[Any, ...]


@dataclass(slots=True, frozen=True)
class Composite:
    """Structured object (including named tuples) whose fields are discovered by a resolver."""

    type_name: str
    source: Any


Value = Union[Null, Primitive, Text, SequenceValue, MapValue, ArrayValue, Composite]
CONTAINER_SHAPES = (SequenceValue, MapValue, ArrayValue, Composite)


def _has_instance_state(obj: Any) -> bool:
    if is_dataclass(obj):
        return True
    if hasattr(obj, "__dict__"):
        return True
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if any(name not in ("__dict__", "__weakref__") for name in slots):
            return True
    return False


def is_named_tuple(obj: Any) -> bool:
    """Return ``True`` for instances of ``typing.NamedTuple`` and ``collections.namedtuple``."""
    return isinstance(obj, tuple) and isinstance(getattr(type(obj), "_fields", None), tuple)


def _is_scalar(obj: Any) -> bool:
    if isinstance(obj, (bool, numbers.Number, bytes, bytearray, Enum, BaseException)):
        return True
    if isinstance(obj, _VALUE_TYPES):
        return True
    return isinstance(obj, (type, ModuleType, Iterator)) or inspect.isroutine(obj)


def classify(obj: Any) -> Value:
    """Return the :data:`Value` shape describing ``obj``.

    Examples
    --------
    >>> classify(None)
    Null()
    >>> classify(42)
    Primitive(text='42')
    >>> classify({"a": 1}).entries
    (('a', 1),)
    >>> type(classify((1, 2))).__name__
    'ArrayValue'
    >>> classify(ValueError("bad input"))
    Primitive(text='bad input')
    """
    if obj is None:
        return Null()
    if _is_scalar(obj):
        return Primitive(str(obj))
    if isinstance(obj, str):
        return Text(obj)
    if is_named_tuple(obj):
        return Composite(type_name=type(obj).__name__, source=obj)
    if isinstance(obj, Mapping):
        return MapValue(source=obj, entries=tuple(obj.items()))
    if isinstance(obj, (tuple, array.array)):
        return ArrayValue(source=obj, items=tuple(obj))
    if isinstance(obj, Collection) and not is_dataclass(obj):
        return SequenceValue(source=obj, items=tuple(obj))
    if not _has_instance_state(obj):
        return Primitive(str(obj))
    return Composite(type_name=type(obj).__name__, source=obj)


def plain_text(obj: Any) -> str:
    """Return the unmasked text form of ``obj`` (``"null"`` for ``None``)."""
    if obj is None:
        return NULL_TEXT
    return str(obj)


__all__ = [
    "CONTAINER_SHAPES",
    "NULL_TEXT",
    "ArrayValue",
    "Composite",
    "MapValue",
    "Null",
    "Primitive",
    "SequenceValue",
    "Text",
    "Value",
    "classify",
    "is_named_tuple",
    "plain_text",
]
