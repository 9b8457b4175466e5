"""Masking strategies applied to the text of sensitive fields.

Purpose
-------
Provide the pure, total text transformations used whenever a sensitive value
must be obscured before it reaches a log line.

Contents
--------
* :class:`MaskStrategy` – enumeration of the built-in strategies.
* :func:`mask_full`, :func:`mask_first_last`, :func:`mask_last_four` – the
  strategy implementations.
* :func:`apply_strategy` – dispatch helper used by the rendering engine.
* :func:`validate_mask_char` – guard used by descriptor declarations.

System Role
-----------
Innermost domain layer. Nothing here performs I/O or depends on the engine,
so the functions can be reused by adapters (e.g. the CLI) directly.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_MASK_CHAR = "*"


class MaskStrategy(Enum):
    """Enumerated masking strategies selectable per field."""

    FULL = "full"
    FIRST_LAST = "first_last"
    LAST_FOUR = "last_four"
    CUSTOM = "custom"

    @classmethod
    def from_name(cls, name: str) -> "MaskStrategy":
        """Return the strategy matching ``name`` (case-insensitive).

        Examples
        --------
        >>> MaskStrategy.from_name("First-Last")
        <MaskStrategy.FIRST_LAST: 'first_last'>
        """
        normalized = name.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown mask strategy: {name!r}") from exc


def validate_mask_char(mask_char: str) -> str:
    """Return ``mask_char`` when it is exactly one character."""
    if not isinstance(mask_char, str) or len(mask_char) != 1:
        raise ValueError(f"mask_char must be a single character, got {mask_char!r}")
    return mask_char


def mask_full(text: str | None, mask_char: str = DEFAULT_MASK_CHAR) -> str | None:
    """Replace every character of ``text`` with ``mask_char``.

    Examples
    --------
    >>> mask_full("secret123")
    '*********'
    >>> mask_full("")
    ''
    """
    if not text:
        return text
    return mask_char * len(text)


def mask_first_last(text: str | None, mask_char: str = DEFAULT_MASK_CHAR) -> str | None:
    """Keep the first and last character of ``text`` and mask the interior.

    Examples
    --------
    >>> mask_first_last("john@example.com")
    'j**************m'
    >>> mask_first_last("ab")
    'ab'
    """
    if not text or len(text) <= 2:
        return text
    return text[0] + mask_char * (len(text) - 2) + text[-1]


def mask_last_four(text: str | None, mask_char: str = DEFAULT_MASK_CHAR) -> str | None:
    """Keep the last four characters of ``text`` and mask everything before.

    Examples
    --------
    >>> mask_last_four("1234567890")
    '******7890'
    >>> mask_last_four("1234")
    '1234'
    """
    if not text or len(text) <= 4:
        return text
    return mask_char * (len(text) - 4) + text[-4:]


_BUILTIN = {
    MaskStrategy.FULL: mask_full,
    MaskStrategy.FIRST_LAST: mask_first_last,
    MaskStrategy.LAST_FOUR: mask_last_four,
}


def apply_strategy(strategy: MaskStrategy, text: str | None, mask_char: str = DEFAULT_MASK_CHAR) -> str | None:
    """Apply a built-in ``strategy`` to ``text``.

    ``MaskStrategy.CUSTOM`` is resolved by the rendering engine because it
    needs the field's masker handle; asking for it here is a programming error.
    """
    try:
        func = _BUILTIN[strategy]
    except KeyError as exc:
        raise ValueError(f"{strategy} has no built-in implementation") from exc
    return func(text, mask_char)


__all__ = [
    "DEFAULT_MASK_CHAR",
    "MaskStrategy",
    "apply_strategy",
    "mask_first_last",
    "mask_full",
    "mask_last_four",
    "validate_mask_char",
]
