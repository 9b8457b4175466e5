"""Mask sensitive fields of structured values before they are logged.

Mark fields with :func:`sensitive` (dataclasses) or
``Annotated[..., Sensitive(...)]`` (any class), build a runtime once, and hand
its helper to call sites::

    runtime = build_runtime()
    log.info("user: %s", runtime.mask(user))

The engine itself (:class:`MaskingEngine`) is usable directly when a custom
field resolver or masker registry is required.
"""

from __future__ import annotations

from .adapters import MaskerRegistry, ReflectionFieldResolver
from .application.ports import DataMasker, FieldResolverPort, MaskerResolutionError
from .application.use_cases import CIRCULAR_MARKER, INACCESSIBLE_TEXT, MaskingEngine, MaskingHelper
from .domain import Field, FieldDescriptor, MaskStrategy, Sensitive, sensitive
from .runtime import MaskingRuntime, RuntimeConfig, build_runtime

__all__ = [
    "CIRCULAR_MARKER",
    "INACCESSIBLE_TEXT",
    "DataMasker",
    "Field",
    "FieldDescriptor",
    "FieldResolverPort",
    "MaskStrategy",
    "MaskerRegistry",
    "MaskerResolutionError",
    "MaskingEngine",
    "MaskingHelper",
    "MaskingRuntime",
    "ReflectionFieldResolver",
    "RuntimeConfig",
    "Sensitive",
    "build_runtime",
    "sensitive",
]
