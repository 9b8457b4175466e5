"""Protocols the masking engine depends on."""

from __future__ import annotations

from .console import ConsolePort
from .masker import DataMasker, MaskerLookupPort, MaskerResolutionError, MaskFunction
from .resolver import FieldResolverPort

__all__ = [
    "ConsolePort",
    "DataMasker",
    "FieldResolverPort",
    "MaskFunction",
    "MaskerLookupPort",
    "MaskerResolutionError",
]
