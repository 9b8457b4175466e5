"""Runtime façade assembling a ready-to-use masking stack.

Purpose
-------
Expose one entry point, :func:`build_runtime`, that host applications call at
startup to obtain the engine and helper they hand to their logging call
sites.

Contents
--------
* :class:`RuntimeConfig` – caller-supplied options.
* :class:`MaskingRuntime` – the composed collaborators.
* :func:`build_runtime` – resolve settings (config + environment) and compose.

System Role
-----------
Outer shell of the clean-architecture stack. Unlike a process-wide singleton
the returned runtime is an ordinary value: build it once and pass it on.
"""

from __future__ import annotations

from typing import Mapping

from ._composition import MaskingRuntime, compose_runtime
from ._settings import RuntimeConfig, RuntimeSettings, build_runtime_settings


def build_runtime(config: RuntimeConfig | None = None, *, environ: Mapping[str, str] | None = None) -> MaskingRuntime:
    """Compose the masking runtime according to ``config`` and the environment.

    Inputs
    ------
    config:
        Options from the host application; defaults to :class:`RuntimeConfig`.
    environ:
        Mapping consulted for ``LOG_MASK_*`` overrides; defaults to
        :data:`os.environ`.

    Raises
    ------
    ValueError
        When an environment override cannot be parsed or a configured masker
        name is empty or duplicated.
    TypeError
        When a configured masker does not implement the masker protocol.

    Examples
    --------
    >>> runtime = build_runtime(environ={})
    >>> runtime.mask({"id": 7})
    '{id=7}'
    """
    settings = build_runtime_settings(config or RuntimeConfig(), environ=environ)
    return compose_runtime(settings)


__all__ = [
    "MaskingRuntime",
    "RuntimeConfig",
    "RuntimeSettings",
    "build_runtime",
]
