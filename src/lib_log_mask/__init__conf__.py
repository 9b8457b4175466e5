"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_mask"
title = "Mask sensitive fields of structured values before they reach log output"
version = "0.1.0"
author = "lib_log_mask maintainers"
shell_command = "lib_log_mask"

_FIELDS = (
    ("name", name),
    ("title", title),
    ("version", version),
    ("author", author),
    ("shell_command", shell_command),
)


def info_text() -> str:
    """Return the metadata banner, ending with a newline.

    Examples
    --------
    >>> info_text().splitlines()[0]
    'Info for lib_log_mask:'
    """
    width = max(len(label) for label, _ in _FIELDS)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label:<{width}} = {value}" for label, value in _FIELDS)
    return "\n".join(lines) + "\n"


def print_info(*, writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to stdout)."""
    text = info_text()
    if writer is None:
        print(text, end="")
        return
    writer(text)
