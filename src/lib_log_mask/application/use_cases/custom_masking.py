"""Invocation of custom maskers with a guaranteed full-masking fallback.

Purpose
-------
Resolve the masker referenced by a field descriptor, invoke it, and recover
from every failure by masking the text completely.

Contents
--------
* :func:`resolve_handle` – turn a class, instance, or callable into a mask
  function.
* :func:`apply_custom_masker` – run a custom masker and fall back on failure.

System Role
-----------
Application layer helper used by :class:`~lib_log_mask.application.use_cases.render.MaskingEngine`.
The fallback guarantees sensitive text never leaks through an error path.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_mask.application.ports.masker import MaskerLookupPort, MaskerResolutionError, MaskFunction
from lib_log_mask.domain.descriptors import FieldDescriptor
from lib_log_mask.domain.strategies import mask_full

logger = logging.getLogger(__name__)


def describe_handle(handle: Any) -> str:
    """Return a log-safe label for a masker handle."""
    if isinstance(handle, str):
        return handle
    if isinstance(handle, type):
        return handle.__qualname__
    name = getattr(handle, "__qualname__", None)
    if isinstance(name, str):
        return name
    return type(handle).__qualname__


def resolve_handle(handle: Any) -> MaskFunction:
    """Return a ``(text, mask_char) -> str`` callable for ``handle``.

    Classes are instantiated without arguments; objects exposing a callable
    ``mask`` attribute contribute that method; other callables are used as is.

    Examples
    --------
    >>> class Hash:
    ...     def mask(self, text, mask_char):
    ...         return "#" * 3
    >>> resolve_handle(Hash)("secret", "*")
    '###'
    >>> resolve_handle(None)
    Traceback (most recent call last):
    ...
    lib_log_mask.application.ports.masker.MaskerResolutionError: no custom masker configured
    """
    if handle is None:
        raise MaskerResolutionError("no custom masker configured")
    if isinstance(handle, str):
        raise MaskerResolutionError(f"named masker {handle!r} requires a masker registry")
    target = handle
    if isinstance(handle, type):
        try:
            target = handle()
        except Exception as exc:
            raise MaskerResolutionError(f"cannot instantiate masker {handle.__qualname__}") from exc
    method = getattr(target, "mask", None)
    if callable(method):
        return method
    if callable(target) and not isinstance(handle, type):
        return target
    raise MaskerResolutionError(f"{describe_handle(handle)} does not implement mask(text, mask_char)")


def apply_custom_masker(
    descriptor: FieldDescriptor,
    text: str,
    lookup: MaskerLookupPort | None = None,
    *,
    field_name: str = "?",
) -> str:
    """Mask ``text`` with the descriptor's custom masker.

    Any failure (unresolvable handle, constructor error, exception raised by
    the masker, non-string result) degrades to full masking with the
    descriptor's ``mask_char``.
    """
    handle = descriptor.custom_masker
    try:
        masker = lookup.resolve(handle) if lookup is not None else resolve_handle(handle)
        result = masker(text, descriptor.mask_char)
        if not isinstance(result, str):
            raise TypeError(f"masker returned {type(result).__name__}, expected str")
        return result
    except Exception as exc:
        logger.warning(
            "Custom masker %s failed for field %r (%s); falling back to full masking",
            describe_handle(handle),
            field_name,
            type(exc).__name__,
        )
        return mask_full(text, descriptor.mask_char) or ""


__all__ = ["apply_custom_masker", "describe_handle", "resolve_handle"]
