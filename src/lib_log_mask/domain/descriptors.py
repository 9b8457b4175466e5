"""Field descriptors and the declarative ``Sensitive`` marker.

Purpose
-------
Describe, per data field, whether it must be masked and how. Producers mark
fields with :class:`Sensitive` (inside ``typing.Annotated``) or with the
:func:`sensitive` dataclass field helper; resolvers turn those markers into
immutable :class:`FieldDescriptor` values the engine consumes.

Contents
--------
* :class:`FieldDescriptor` – resolved, immutable masking configuration.
* :class:`Field` – one named field of a composite value, ready to render.
* :class:`Sensitive` / :func:`sensitive` – declaration helpers.
* :data:`PLAIN` – descriptor shared by every unmarked field.
* :data:`INACCESSIBLE` – sentinel for fields that could not be read.

System Role
-----------
Domain layer. The engine never inspects classes itself; it only ever sees the
values defined here.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from .strategies import DEFAULT_MASK_CHAR, MaskStrategy, validate_mask_char

METADATA_KEY = "lib_log_mask"
"""Key under which :func:`sensitive` stores its marker in dataclass metadata."""


def _coerce_strategy(strategy: MaskStrategy | str) -> MaskStrategy:
    if isinstance(strategy, MaskStrategy):
        return strategy
    return MaskStrategy.from_name(strategy)


@dataclass(slots=True, frozen=True)
class FieldDescriptor:
    """Resolved masking configuration for a single field.

    Attributes
    ----------
    sensitive:
        ``True`` when the field's text must never appear unmasked.
    strategy:
        :class:`MaskStrategy` applied to the stringified value.
    mask_char:
        Single character used as replacement.
    custom_masker:
        Handle used when ``strategy`` is :attr:`MaskStrategy.CUSTOM`: a masker
        class, a masker instance, a ``(text, mask_char)`` callable, or the name
        of a masker registered with a ``MaskerRegistry``.
    """

    sensitive: bool = False
    strategy: MaskStrategy = MaskStrategy.FULL
    mask_char: str = DEFAULT_MASK_CHAR
    custom_masker: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", _coerce_strategy(self.strategy))
        validate_mask_char(self.mask_char)


PLAIN = FieldDescriptor()


class _Inaccessible:
    """Sentinel type marking a field whose value could not be read."""

    _instance: "_Inaccessible | None" = None

    def __new__(cls) -> "_Inaccessible":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INACCESSIBLE"


INACCESSIBLE = _Inaccessible()


@dataclass(slots=True, frozen=True)
class Field:
    """One named field of a composite, paired with its descriptor and value."""

    name: str
    descriptor: FieldDescriptor
    value: Any

    @property
    def accessible(self) -> bool:
        return self.value is not INACCESSIBLE


@dataclass(slots=True, frozen=True)
class Sensitive:
    """Declarative marker flagging a field as sensitive.

    Use it inside ``typing.Annotated`` on a class annotation or pass the same
    arguments to :func:`sensitive` for dataclass fields.

    Examples
    --------
    >>> from typing import Annotated
    >>> class Card:
    ...     number: Annotated[str, Sensitive(strategy=MaskStrategy.LAST_FOUR)]
    >>> Sensitive(strategy="last_four").descriptor().strategy
    <MaskStrategy.LAST_FOUR: 'last_four'>
    """

    strategy: MaskStrategy = MaskStrategy.FULL
    mask_char: str = DEFAULT_MASK_CHAR
    custom_masker: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", _coerce_strategy(self.strategy))
        validate_mask_char(self.mask_char)

    def descriptor(self) -> FieldDescriptor:
        """Return the :class:`FieldDescriptor` this marker declares."""
        return FieldDescriptor(
            sensitive=True,
            strategy=self.strategy,
            mask_char=self.mask_char,
            custom_masker=self.custom_masker,
        )


def sensitive(
    strategy: MaskStrategy | str = MaskStrategy.FULL,
    mask_char: str = DEFAULT_MASK_CHAR,
    custom_masker: Any = None,
    *,
    metadata: Mapping[str, Any] | None = None,
    **field_kwargs: Any,
) -> Any:
    """Return a :func:`dataclasses.field` carrying a :class:`Sensitive` marker.

    Remaining keyword arguments (``default``, ``default_factory``, ``repr`` ...)
    are forwarded to :func:`dataclasses.field` unchanged.

    Examples
    --------
    >>> from dataclasses import dataclass, fields
    >>> @dataclass
    ... class Login:
    ...     user: str
    ...     password: str = sensitive()
    >>> fields(Login)[1].metadata[METADATA_KEY]
    Sensitive(strategy=<MaskStrategy.FULL: 'full'>, mask_char='*', custom_masker=None)
    """
    marker = Sensitive(strategy=strategy, mask_char=mask_char, custom_masker=custom_masker)
    merged = dict(metadata or {})
    merged[METADATA_KEY] = marker
    return dataclasses.field(metadata=merged, **field_kwargs)


__all__ = [
    "INACCESSIBLE",
    "METADATA_KEY",
    "PLAIN",
    "Field",
    "FieldDescriptor",
    "Sensitive",
    "sensitive",
]
