"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print masked renderings for humans (CLI demos, diagnostics) with a coloured
label and a highlighted payload.

Contents
--------
* :data:`_DEFAULT_STYLES` - default styles for the label and payload.
* :class:`RichConsoleAdapter` - adapter used by the CLI.

System Role
-----------
Outer adapter. Renderings are printed as :class:`rich.text.Text` so masked
payloads containing ``[`` are never interpreted as Rich markup.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.text import Text

from lib_log_mask.application.ports.console import ConsolePort

#: Default Rich styles keyed by line segment.
_DEFAULT_STYLES: Mapping[str, str] = {
    "label": "bold cyan",
    "rendered": "yellow",
}


class RichConsoleAdapter(ConsolePort):
    """Render labelled masked values using Rich."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[str, str] | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_DEFAULT_STYLES)
        if styles:
            unknown = set(styles) - set(_DEFAULT_STYLES)
            if unknown:
                raise ValueError(f"Unknown console style keys: {', '.join(sorted(unknown))}")
            merged.update(styles)
        self._styles = merged

    def emit(self, label: str, rendered: str, *, colorize: bool) -> None:
        """Print ``label: rendered`` with optional colour.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleAdapter(console=console).emit("user", "User{password=***}", colorize=False)
        >>> console.export_text().strip()
        'user: User{password=***}'
        """
        use_color = colorize and not self._no_color
        line = Text()
        line.append(f"{label}: ", style=self._styles["label"] if use_color else "")
        line.append(rendered, style=self._styles["rendered"] if use_color else "")
        self._console.print(line, highlight=False, soft_wrap=True)


__all__ = ["RichConsoleAdapter"]
