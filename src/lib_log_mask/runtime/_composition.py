"""Runtime composition wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into the collaborators a call site needs:
resolver, masker registry, engine, and helper.

System Role
-----------
Composition root. Each call builds fresh collaborators; nothing is installed
globally, so callers pass the returned runtime (or its helper) explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lib_log_mask.adapters import MaskerRegistry, ReflectionFieldResolver
from lib_log_mask.application.use_cases import MaskingEngine, MaskingHelper

from ._settings import RuntimeSettings


@dataclass(slots=True, frozen=True)
class MaskingRuntime:
    """Aggregate of live collaborators created by :func:`compose_runtime`."""

    settings: RuntimeSettings
    resolver: ReflectionFieldResolver
    maskers: MaskerRegistry
    engine: MaskingEngine
    helper: MaskingHelper

    @property
    def enabled(self) -> bool:
        return self.helper.enabled

    def mask(self, value: Any) -> str:
        """Shortcut for :meth:`MaskingHelper.mask`."""
        return self.helper.mask(value)

    def mask_all(self, *values: Any) -> list[str]:
        """Shortcut for :meth:`MaskingHelper.mask_all`."""
        return self.helper.mask_all(*values)

    def mask_message(self, template: Any, *args: Any) -> str:
        """Shortcut for :meth:`MaskingHelper.mask_message`."""
        return self.helper.mask_message(template, *args)


def compose_runtime(settings: RuntimeSettings) -> MaskingRuntime:
    """Assemble the masking runtime from resolved settings."""
    resolver = ReflectionFieldResolver(cache=settings.cache_descriptors)
    maskers = MaskerRegistry(settings.maskers)
    engine = MaskingEngine(resolver=resolver, maskers=maskers, circular_marker=settings.circular_marker)
    helper = MaskingHelper(engine, enabled=settings.enabled)
    return MaskingRuntime(settings=settings, resolver=resolver, maskers=maskers, engine=engine, helper=helper)


__all__ = ["MaskingRuntime", "compose_runtime"]
