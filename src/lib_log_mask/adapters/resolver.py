"""Reflection-based field resolver.

Purpose
-------
Discover the data fields of arbitrary Python objects and the masking markers
declared on them, so the engine can render composites without knowing how
classes are introspected.

Contents
--------
* :class:`ReflectionFieldResolver` – concrete :class:`FieldResolverPort`.

System Role
-----------
Host-specific adapter. Supports dataclasses (``sensitive()`` metadata),
``typing.Annotated[..., Sensitive(...)]`` hints on any class, ``__slots__``,
and plain instance attributes. Per-type marker lookups are cached behind a
lock so one resolver can serve concurrent render calls.

Field order
-----------
Dataclasses follow :func:`dataclasses.fields` (base class fields first). Other
objects list ``__slots__`` from the most-base class down, then instance
attributes in insertion order. Dunder names are never reported.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import types
import typing
from collections.abc import Mapping
from threading import RLock
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from lib_log_mask.application.ports.resolver import FieldResolverPort
from lib_log_mask.domain.descriptors import INACCESSIBLE, METADATA_KEY, PLAIN, Field, FieldDescriptor, Sensitive
from lib_log_mask.domain.values import is_named_tuple

logger = logging.getLogger(__name__)

_UNION_ORIGINS = (Union, types.UnionType)


def _marker_from_hint(hint: Any) -> Sensitive | None:
    """Return the :class:`Sensitive` marker carried by ``hint``, if any.

    Examples
    --------
    >>> from typing import Annotated, Optional
    >>> _marker_from_hint(Optional[Annotated[str, Sensitive()]]) is not None
    True
    >>> _marker_from_hint(int) is None
    True
    """
    origin = get_origin(hint)
    if origin is Annotated:
        for meta in getattr(hint, "__metadata__", ()):
            if isinstance(meta, Sensitive):
                return meta
        return None
    if origin in _UNION_ORIGINS:
        for arg in get_args(hint):
            marker = _marker_from_hint(arg)
            if marker is not None:
                return marker
    return None


def _class_hints(cls: type) -> dict[str, Any]:
    """Return annotations of ``cls`` and its bases, keeping ``Annotated`` extras."""
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except Exception as exc:
        logger.debug("Type hints of %s could not be evaluated (%s); evaluating per class", cls.__qualname__, type(exc).__name__)
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        hints.update(_own_annotations(klass))
    return hints


def _own_annotations(klass: type) -> dict[str, Any]:
    """Return the evaluated annotations declared directly on ``klass``.

    When the class as a whole cannot be evaluated, each annotation is retried
    on its own so one unresolvable name does not hide the markers next to it.
    """
    try:
        return dict(inspect.get_annotations(klass, eval_str=True))
    except Exception:
        pass
    try:
        raw = inspect.get_annotations(klass)
    except Exception:
        return {}
    evaluated: dict[str, Any] = {}
    for name, hint in raw.items():
        if not isinstance(hint, str):
            evaluated[name] = hint
            continue
        single = type(klass.__name__, (), {"__annotations__": {name: hint}, "__module__": klass.__module__})
        try:
            evaluated[name] = inspect.get_annotations(single, eval_str=True)[name]
        except Exception:
            continue
    return evaluated


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _is_data_name(name: str) -> bool:
    return not name.startswith("__")


class ReflectionFieldResolver(FieldResolverPort):
    """Resolve fields and sensitivity markers through runtime introspection.

    Parameters
    ----------
    cache:
        When ``True`` (default) marker lookups are computed once per type.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> from lib_log_mask.domain import sensitive
    >>> @dataclass
    ... class Card:
    ...     holder: str
    ...     number: str = sensitive(strategy="last_four")
    >>> [(f.name, f.descriptor.sensitive) for f in ReflectionFieldResolver().resolve_fields(Card("ann", "4111"))]
    [('holder', False), ('number', True)]
    """

    def __init__(self, *, cache: bool = True) -> None:
        self._cache_enabled = cache
        self._cache: dict[type, Mapping[str, FieldDescriptor]] = {}
        self._lock = RLock()

    def resolve_fields(self, obj: Any) -> list[Field]:
        """Return the ordered data fields of ``obj`` with their descriptors."""
        descriptors = self.descriptors_for(type(obj))
        fields: list[Field] = []
        for name, value in self._iter_values(obj):
            fields.append(Field(name=name, descriptor=descriptors.get(name, PLAIN), value=value))
        return fields

    def has_sensitive_fields(self, cls: type) -> bool:
        """Return ``True`` when ``cls`` declares at least one sensitive field."""
        return any(descriptor.sensitive for descriptor in self.descriptors_for(cls).values())

    def descriptors_for(self, cls: type) -> Mapping[str, FieldDescriptor]:
        """Return the sensitive-field descriptors declared on ``cls``."""
        if not self._cache_enabled:
            return self._build_descriptors(cls)
        with self._lock:
            cached = self._cache.get(cls)
            if cached is None:
                cached = self._build_descriptors(cls)
                self._cache[cls] = cached
            return cached

    def clear_cache(self) -> None:
        """Forget every cached per-type lookup."""
        with self._lock:
            self._cache.clear()

    @staticmethod
    def _build_descriptors(cls: type) -> Mapping[str, FieldDescriptor]:
        descriptors: dict[str, FieldDescriptor] = {}
        for name, hint in _class_hints(cls).items():
            if get_origin(hint) is ClassVar:
                continue
            marker = _marker_from_hint(hint)
            if marker is not None:
                descriptors[name] = marker.descriptor()
        if dataclasses.is_dataclass(cls):
            for field_def in dataclasses.fields(cls):
                marker = field_def.metadata.get(METADATA_KEY)
                if isinstance(marker, Sensitive):
                    descriptors[field_def.name] = marker.descriptor()
        return types.MappingProxyType(descriptors)

    @staticmethod
    def _iter_values(obj: Any) -> typing.Iterator[tuple[str, Any]]:
        if dataclasses.is_dataclass(obj):
            for field_def in dataclasses.fields(obj):
                yield field_def.name, _read(obj, field_def.name)
            return
        if is_named_tuple(obj):
            yield from zip(type(obj)._fields, obj)
            return
        seen: set[str] = set()
        for name in _slot_names(type(obj)):
            try:
                value = getattr(obj, name)
            except AttributeError:
                continue
            except Exception:
                value = INACCESSIBLE
            seen.add(name)
            yield name, value
        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict):
            for name, value in list(instance_dict.items()):
                if name in seen or not _is_data_name(name):
                    continue
                yield name, value


def _read(obj: Any, name: str) -> Any:
    try:
        return getattr(obj, name)
    except Exception as exc:
        logger.debug("Field %s.%s is inaccessible (%s)", type(obj).__name__, name, type(exc).__name__)
        return INACCESSIBLE


__all__ = ["ReflectionFieldResolver"]
