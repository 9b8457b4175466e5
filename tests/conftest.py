from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_mask.adapters.masker_registry import MaskerRegistry
from lib_log_mask.adapters.resolver import ReflectionFieldResolver
from lib_log_mask.application.use_cases.render import MaskingEngine


@pytest.fixture
def resolver() -> ReflectionFieldResolver:
    return ReflectionFieldResolver()


@pytest.fixture
def registry() -> MaskerRegistry:
    return MaskerRegistry()


@pytest.fixture
def engine(resolver: ReflectionFieldResolver, registry: MaskerRegistry) -> MaskingEngine:
    return MaskingEngine(resolver=resolver, maskers=registry)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200)
