"""Bridge that masks structured arguments inside formatted log messages.

Purpose
-------
Given a ``%``-style message template and its positional arguments, format the
message the way :class:`logging.LogRecord` does and swap the plain text of
every argument that carries sensitive fields for its masked rendering.

System Role
-----------
Application use case consumed by :class:`~lib_log_mask.application.use_cases.helpers.MaskingHelper`.
The substitution is textual: when an argument's ``str()`` is not a literal
substring of the formatted message nothing is replaced for that argument.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .render import MaskingEngine

logger = logging.getLogger(__name__)


def format_message(template: Any, args: Sequence[Any]) -> str:
    """Return ``template`` formatted with ``args`` like :mod:`logging` does.

    A single non-empty mapping argument is used as the mapping operand.
    Any formatting error, including one raised by an argument's ``__str__``,
    leaves the template unformatted.

    Examples
    --------
    >>> format_message("user=%s id=%d", ("ann", 7))
    'user=ann id=7'
    >>> format_message("%(name)s", ({"name": "bob"},))
    'bob'
    >>> format_message("broken %d", ("x",))
    'broken %d'
    """
    try:
        text = str(template)
    except Exception as exc:
        logger.debug("Message template of type %s has no text form (%s)", type(template).__name__, type(exc).__name__)
        return f"<unrenderable {type(template).__name__}>"
    if not args:
        return text
    operand: Any = tuple(args)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        operand = args[0]
    try:
        return text % operand
    except Exception as exc:
        logger.debug("Message template could not be formatted with %d argument(s) (%s)", len(args), type(exc).__name__)
        return text


def mask_message(engine: MaskingEngine, template: Any, args: Sequence[Any]) -> str:
    """Return the formatted message with sensitive arguments masked."""
    message = format_message(template, args)
    for arg in args:
        if arg is None:
            continue
        try:
            if not engine.resolver.has_sensitive_fields(type(arg)):
                continue
            original = str(arg)
        except Exception as exc:
            logger.debug("Skipping argument of type %s (%s)", type(arg).__name__, type(exc).__name__)
            continue
        if original and original in message:
            message = message.replace(original, engine.render(arg))
    return message


__all__ = ["format_message", "mask_message"]
