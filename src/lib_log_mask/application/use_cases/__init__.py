"""Use cases built on top of the masking ports."""

from __future__ import annotations

from .custom_masking import apply_custom_masker, resolve_handle
from .helpers import MaskingHelper
from .message import format_message, mask_message
from .render import CIRCULAR_MARKER, INACCESSIBLE_TEXT, MaskingEngine

__all__ = [
    "CIRCULAR_MARKER",
    "INACCESSIBLE_TEXT",
    "MaskingEngine",
    "MaskingHelper",
    "apply_custom_masker",
    "format_message",
    "mask_message",
    "resolve_handle",
]
