"""Named registry of custom maskers.

Purpose
-------
Give applications one place to register custom maskers under a name so field
declarations can refer to them as ``Sensitive(strategy="custom",
custom_masker="iban")`` instead of importing the implementation.

Contents
--------
* :class:`MaskerRegistry` – concrete :class:`MaskerLookupPort`.

System Role
-----------
Adapter owned by the caller and injected into the engine. Reads are frequent
and writes rare; a lock keeps registration safe while renders are running.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import RLock
from typing import Any

from lib_log_mask.application.ports.masker import MaskerLookupPort, MaskerResolutionError, MaskFunction
from lib_log_mask.application.use_cases.custom_masking import resolve_handle


def _normalise(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("masker name must be a non-empty string")
    return name.strip().lower()


def _check_masker(masker: Any) -> None:
    if masker is None or isinstance(masker, str):
        raise TypeError("masker must be a class, an object with mask(), or a callable")
    if isinstance(masker, type) or callable(masker) or callable(getattr(masker, "mask", None)):
        return
    raise TypeError(f"{type(masker).__name__} does not implement mask(text, mask_char)")


class MaskerRegistry(MaskerLookupPort):
    """Register and resolve custom maskers by name.

    Parameters
    ----------
    maskers:
        Optional initial ``name → masker`` mapping.

    Examples
    --------
    >>> registry = MaskerRegistry({"stars": lambda text, char: char * 3})
    >>> registry.resolve("STARS")("secret", "*")
    '***'
    >>> "stars" in registry
    True
    """

    def __init__(self, maskers: Mapping[str, Any] | None = None) -> None:
        self._maskers: dict[str, Any] = {}
        self._lock = RLock()
        for name, masker in (maskers or {}).items():
            self.register(name, masker)

    def register(self, name: str, masker: Any, *, replace: bool = False) -> None:
        """Register ``masker`` under ``name``."""
        key = _normalise(name)
        _check_masker(masker)
        with self._lock:
            if key in self._maskers and not replace:
                raise ValueError(f"A masker named {key!r} is already registered")
            self._maskers[key] = masker

    def unregister(self, name: str) -> None:
        """Remove the masker registered under ``name``."""
        key = _normalise(name)
        with self._lock:
            try:
                del self._maskers[key]
            except KeyError as exc:
                raise KeyError(f"No masker registered under {name!r}") from exc

    def names(self) -> tuple[str, ...]:
        """Return the registered names in registration order."""
        with self._lock:
            return tuple(self._maskers)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        with self._lock:
            return name.strip().lower() in self._maskers

    def __len__(self) -> int:
        with self._lock:
            return len(self._maskers)

    def resolve(self, handle: Any) -> MaskFunction:
        """Return the mask function for ``handle`` (a name or a masker)."""
        if isinstance(handle, str):
            if not handle.strip():
                raise MaskerResolutionError("empty masker name")
            with self._lock:
                masker = self._maskers.get(handle.strip().lower())
            if masker is None:
                raise MaskerResolutionError(f"No masker registered under {handle!r}")
            handle = masker
        return resolve_handle(handle)


__all__ = ["MaskerRegistry"]
