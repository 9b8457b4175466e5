"""Adapters implementing the masking ports."""

from __future__ import annotations

from .console import RichConsoleAdapter
from .masker_registry import MaskerRegistry
from .resolver import ReflectionFieldResolver

__all__ = ["MaskerRegistry", "ReflectionFieldResolver", "RichConsoleAdapter"]
