"""Module entry point so ``python -m lib_log_mask`` runs the CLI."""

from __future__ import annotations

from .cli import cli, main

__all__ = ["cli", "main"]

if __name__ == "__main__":
    raise SystemExit(main())
