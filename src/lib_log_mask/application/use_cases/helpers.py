"""Caller-facing helpers wrapping the masking engine.

Purpose
-------
Offer the small API call sites use when logging: mask one value, mask several
values, or mask the arguments of a formatted message. The helper also carries
the externally decided on/off switch.

System Role
-----------
Application use case assembled by :func:`lib_log_mask.runtime.build_runtime`.
The helper is an ordinary object handed to call sites; there is no
process-wide instance.
"""

from __future__ import annotations

from typing import Any

from lib_log_mask.domain.values import plain_text

from .message import format_message, mask_message
from .render import MaskingEngine


class MaskingHelper:
    """Mask values for log statements, honouring an enable/disable decision.

    When ``enabled`` is ``False`` the helper returns the library-default text
    (``str(value)``, ``"null"`` for ``None``) without consulting the engine.

    Examples
    --------
    >>> from lib_log_mask.adapters.resolver import ReflectionFieldResolver
    >>> helper = MaskingHelper(MaskingEngine(resolver=ReflectionFieldResolver()))
    >>> helper.mask_all(None, 1, "x")
    ['null', '1', 'x']
    """

    def __init__(self, engine: MaskingEngine, *, enabled: bool = True) -> None:
        self._engine = engine
        self._enabled = bool(enabled)

    @property
    def engine(self) -> MaskingEngine:
        return self._engine

    @property
    def enabled(self) -> bool:
        return self._enabled

    def mask(self, value: Any) -> str:
        """Return the masked text of ``value``."""
        if not self._enabled:
            return _unmasked(value)
        return self._engine.render(value)

    def mask_all(self, *values: Any) -> list[str]:
        """Return the masked text of each value, in argument order."""
        return [self.mask(value) for value in values]

    def mask_message(self, template: Any, *args: Any) -> str:
        """Format ``template % args`` and mask arguments carrying sensitive fields."""
        if not self._enabled:
            return format_message(template, args)
        return mask_message(self._engine, template, args)


def _unmasked(value: Any) -> str:
    try:
        return plain_text(value)
    except Exception:
        return f"<unrenderable {type(value).__name__}>"


__all__ = ["MaskingHelper"]
