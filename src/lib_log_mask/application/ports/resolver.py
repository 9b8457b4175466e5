"""Port describing field discovery for composite values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from lib_log_mask.domain.descriptors import Field


@runtime_checkable
class FieldResolverPort(Protocol):
    """Discover the data fields of structured objects.

    Implementations must be deterministic: the same object yields the same
    fields in the same order (declaration order, base classes first). Fields
    whose value cannot be read carry :data:`~lib_log_mask.domain.INACCESSIBLE`.
    """

    def resolve_fields(self, obj: Any) -> Sequence[Field]:
        """Return the ordered fields of ``obj``."""

    def has_sensitive_fields(self, cls: type) -> bool:
        """Return ``True`` when instances of ``cls`` carry a sensitive field."""


__all__ = ["FieldResolverPort"]
