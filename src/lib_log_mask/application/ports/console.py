"""Console port describing how masked renderings are shown to humans.

Purpose
-------
Let the CLI print rendered values without depending on a particular terminal
library.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method supporting optional colour control.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Render one labelled, already-masked line to a console."""

    def emit(self, label: str, rendered: str, *, colorize: bool) -> None:
        """Print ``rendered`` under ``label`` with optional colour."""


__all__ = ["ConsolePort"]
