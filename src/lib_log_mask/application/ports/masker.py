"""Ports for custom maskers and their lookup.

Purpose
-------
Define the extension contract callers implement to override the built-in
strategies for individual fields, plus the lookup capability the engine uses
to turn a field's masker handle into something callable.

Contents
--------
* :class:`DataMasker` – the custom masker protocol.
* :class:`MaskerLookupPort` – resolves handles (classes, instances, callables,
  registered names) into a ``(text, mask_char) -> str`` callable.
* :class:`MaskerResolutionError` – raised when a handle cannot be resolved.

System Role
-----------
Application boundary. Failures raised through these contracts never reach the
caller of the engine: the engine falls back to full masking instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

MaskFunction = Callable[[str, str], str]


class MaskerResolutionError(LookupError):
    """Raised when a custom masker handle cannot be turned into a masker."""


@runtime_checkable
class DataMasker(Protocol):
    """Custom masking logic for a single field."""

    def mask(self, text: str, mask_char: str) -> str:
        """Return the masked form of ``text`` using ``mask_char``."""


@runtime_checkable
class MaskerLookupPort(Protocol):
    """Resolve custom masker handles."""

    def resolve(self, handle: Any) -> MaskFunction:
        """Return a callable for ``handle`` or raise :class:`MaskerResolutionError`."""


__all__ = ["DataMasker", "MaskFunction", "MaskerLookupPort", "MaskerResolutionError"]
