"""Runtime configuration inputs and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from lib_log_mask.application.use_cases.render import CIRCULAR_MARKER
from lib_log_mask.config import parse_bool

ENV_ENABLED = "LOG_MASK_ENABLED"
ENV_CACHE_DESCRIPTORS = "LOG_MASK_CACHE_DESCRIPTORS"
ENV_CIRCULAR_MARKER = "LOG_MASK_CIRCULAR_MARKER"


@dataclass(slots=True, frozen=True)
class RuntimeConfig:
    """Caller-supplied configuration for :func:`lib_log_mask.runtime.build_runtime`.

    Attributes
    ----------
    enabled:
        External decision whether call sites mask at all.
    cache_descriptors:
        Cache per-type marker lookups inside the resolver.
    circular_marker:
        Text emitted where a value graph refers back to itself.
    maskers:
        Custom maskers to register by name.
    """

    enabled: bool = True
    cache_descriptors: bool = True
    circular_marker: str = CIRCULAR_MARKER
    maskers: Mapping[str, Any] | None = None


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Resolved settings after applying environment overrides."""

    enabled: bool
    cache_descriptors: bool
    circular_marker: str
    maskers: Mapping[str, Any] = field(default_factory=dict)


def build_runtime_settings(config: RuntimeConfig, *, environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Merge ``config`` with ``LOG_MASK_*`` environment overrides.

    Environment values take precedence over the config so operators can switch
    masking without code changes.

    Examples
    --------
    >>> build_runtime_settings(RuntimeConfig(), environ={"LOG_MASK_ENABLED": "no"}).enabled
    False
    """
    env = os.environ if environ is None else environ

    enabled = config.enabled
    raw_enabled = env.get(ENV_ENABLED)
    if raw_enabled is not None and raw_enabled.strip():
        enabled = parse_bool(ENV_ENABLED, raw_enabled)

    cache_descriptors = config.cache_descriptors
    raw_cache = env.get(ENV_CACHE_DESCRIPTORS)
    if raw_cache is not None and raw_cache.strip():
        cache_descriptors = parse_bool(ENV_CACHE_DESCRIPTORS, raw_cache)

    circular_marker = config.circular_marker
    raw_marker = env.get(ENV_CIRCULAR_MARKER)
    if raw_marker is not None:
        circular_marker = raw_marker
    if not circular_marker or not circular_marker.strip():
        raise ValueError(f"{ENV_CIRCULAR_MARKER} must not be empty")

    return RuntimeSettings(
        enabled=enabled,
        cache_descriptors=cache_descriptors,
        circular_marker=circular_marker,
        maskers=MappingProxyType(dict(config.maskers or {})),
    )


__all__ = [
    "ENV_CACHE_DESCRIPTORS",
    "ENV_CIRCULAR_MARKER",
    "ENV_ENABLED",
    "RuntimeConfig",
    "RuntimeSettings",
    "build_runtime_settings",
]
