"""Recursive masking engine turning arbitrary values into masked text.

Purpose
-------
Walk a (possibly nested, possibly self-referential) value graph and render it
as text in which every sensitive field is masked while all other structure is
preserved.

Contents
--------
* :class:`MaskingEngine` – the public engine with its total ``render`` method.
* :class:`_Traversal` – per-call walker owning the cycle guard.
* Rendering constants (:data:`CIRCULAR_MARKER`, :data:`INACCESSIBLE_TEXT`).

System Role
-----------
Core application use case. Field discovery and custom masker lookup are
injected through ports so the engine carries no introspection logic and no
state between calls; concurrent ``render`` calls need no locking.

Rendering rules
---------------
* ``None`` → ``null``; scalars and strings → their text.
* sequences and fixed arrays → ``[a, b]``; maps → ``{k=v}``.
* composites → ``TypeName{field=value, ...}`` in resolver order. Containers
  whose type declares sensitive fields are rendered as composites too.
* sensitive fields are stringified and masked, never recursed into.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_mask.application.ports.masker import MaskerLookupPort
from lib_log_mask.application.ports.resolver import FieldResolverPort
from lib_log_mask.domain.descriptors import Field
from lib_log_mask.domain.strategies import MaskStrategy, apply_strategy
from lib_log_mask.domain.values import (
    NULL_TEXT,
    ArrayValue,
    Composite,
    MapValue,
    Null,
    Primitive,
    SequenceValue,
    Text,
    classify,
    plain_text,
)

from .custom_masking import apply_custom_masker

logger = logging.getLogger(__name__)

CIRCULAR_MARKER = "<circular reference>"
INACCESSIBLE_TEXT = "inaccessible"
_SEPARATOR = ", "


class MaskingEngine:
    """Render values as text with sensitive fields masked.

    Parameters
    ----------
    resolver:
        :class:`FieldResolverPort` discovering the fields of composites.
    maskers:
        Optional :class:`MaskerLookupPort` resolving custom masker handles;
        without it only class, instance, and callable handles work.
    circular_marker:
        Text emitted where a value re-enters itself.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> from lib_log_mask.adapters.resolver import ReflectionFieldResolver
    >>> from lib_log_mask.domain import sensitive
    >>> @dataclass
    ... class Login:
    ...     user: str
    ...     password: str = sensitive()
    >>> engine = MaskingEngine(resolver=ReflectionFieldResolver())
    >>> engine.render(Login("john", "secret123"))
    'Login{user=john, password=*********}'
    >>> engine.render([1, None, {"k": "v"}])
    '[1, null, {k=v}]'
    """

    def __init__(
        self,
        *,
        resolver: FieldResolverPort,
        maskers: MaskerLookupPort | None = None,
        circular_marker: str = CIRCULAR_MARKER,
    ) -> None:
        if not circular_marker:
            raise ValueError("circular_marker must not be empty")
        self._resolver = resolver
        self._maskers = maskers
        self._circular_marker = circular_marker

    @property
    def resolver(self) -> FieldResolverPort:
        return self._resolver

    @property
    def circular_marker(self) -> str:
        return self._circular_marker

    def render(self, value: Any) -> str:
        """Return the masked text form of ``value``; never raises."""
        try:
            return _Traversal(self).render(value)
        except Exception as exc:
            type_name = type(value).__name__
            logger.warning("Rendering %s failed (%s); emitting placeholder", type_name, type(exc).__name__)
            return f"<unrenderable {type_name}>"

    def mask_field(self, field: Field) -> str:
        """Return the masked text of a sensitive ``field``.

        The value is stringified first, so nested structures are masked as
        their printed form. ``None`` stays ``null``.
        """
        value = field.value
        if value is None:
            return NULL_TEXT
        text = str(value)
        descriptor = field.descriptor
        if descriptor.strategy is MaskStrategy.CUSTOM:
            return apply_custom_masker(descriptor, text, self._maskers, field_name=field.name)
        return apply_strategy(descriptor.strategy, text, descriptor.mask_char) or ""


class _Traversal:
    """Single render pass tracking the identities on the active path."""

    __slots__ = ("_engine", "_active")

    def __init__(self, engine: MaskingEngine) -> None:
        self._engine = engine
        self._active: set[int] = set()

    def render(self, obj: Any) -> str:
        shape = classify(obj)
        if isinstance(shape, (SequenceValue, MapValue, ArrayValue)) and self._engine.resolver.has_sensitive_fields(type(obj)):
            shape = Composite(type_name=type(obj).__name__, source=obj)
        if isinstance(shape, Null):
            return NULL_TEXT
        if isinstance(shape, (Primitive, Text)):
            return shape.text
        key = id(obj)
        if key in self._active:
            return self._engine.circular_marker
        self._active.add(key)
        try:
            if isinstance(shape, (SequenceValue, ArrayValue)):
                return "[" + _SEPARATOR.join(self.render(item) for item in shape.items) + "]"
            if isinstance(shape, MapValue):
                pairs = (f"{plain_text(entry_key)}={self.render(item)}" for entry_key, item in shape.entries)
                return "{" + _SEPARATOR.join(pairs) + "}"
            if isinstance(shape, Composite):
                return self._render_composite(shape)
            raise TypeError(f"Unhandled value shape: {type(shape).__name__}")
        finally:
            self._active.discard(key)

    def _render_composite(self, shape: Composite) -> str:
        fields = self._engine.resolver.resolve_fields(shape.source)
        body = _SEPARATOR.join(f"{field.name}={self._render_field(field, shape.type_name)}" for field in fields)
        return f"{shape.type_name}{{{body}}}"

    def _render_field(self, field: Field, owner: str) -> str:
        if not field.accessible:
            return INACCESSIBLE_TEXT
        try:
            if field.descriptor.sensitive:
                return self._engine.mask_field(field)
            return self.render(field.value)
        except Exception as exc:
            logger.debug("Field %s.%s could not be rendered (%s)", owner, field.name, type(exc).__name__)
            return INACCESSIBLE_TEXT


__all__ = ["CIRCULAR_MARKER", "INACCESSIBLE_TEXT", "MaskingEngine"]
