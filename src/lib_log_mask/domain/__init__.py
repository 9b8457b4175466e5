"""Domain values, descriptors, and strategies used by the masking engine."""

from __future__ import annotations

from .descriptors import INACCESSIBLE, PLAIN, Field, FieldDescriptor, Sensitive, sensitive
from .strategies import DEFAULT_MASK_CHAR, MaskStrategy, apply_strategy, mask_first_last, mask_full, mask_last_four
from .values import ArrayValue, Composite, MapValue, Null, Primitive, SequenceValue, Text, Value, classify

__all__ = [
    "DEFAULT_MASK_CHAR",
    "INACCESSIBLE",
    "PLAIN",
    "ArrayValue",
    "Composite",
    "Field",
    "FieldDescriptor",
    "MapValue",
    "MaskStrategy",
    "Null",
    "Primitive",
    "Sensitive",
    "SequenceValue",
    "Text",
    "Value",
    "apply_strategy",
    "classify",
    "mask_first_last",
    "mask_full",
    "mask_last_four",
    "sensitive",
]
