"""Click command-line interface for lib_log_mask.

Purpose
-------
Let operators inspect the package metadata, try the built-in strategies on a
piece of text, and preview how the engine renders a sample value graph.

Contents
--------
* :func:`cli` - Click group with ``--traceback`` and ``--use-dotenv`` options.
* :func:`cli_info`, :func:`cli_mask`, :func:`cli_demo` - subcommands.
* :func:`main` - entry point running the group through
  :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. Commands only compose public API pieces (strategies,
runtime, console adapter); they add no masking behaviour of their own.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as mask_config
from .adapters.console import RichConsoleAdapter
from .demo import run_demo
from .domain.strategies import DEFAULT_MASK_CHAR, MaskStrategy, apply_strategy, validate_mask_char
from .runtime import build_runtime

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_STRATEGY_CHOICES = [strategy.value for strategy in MaskStrategy if strategy is not MaskStrategy.CUSTOM]


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""
    captured: list[str] = []
    __init__conf__.print_info(writer=captured.append)
    return "".join(captured)


@click.group(
    invoke_without_command=True,
    context_settings=CLICK_CONTEXT_SETTINGS,
    help=__init__conf__.title,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (also via {mask_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner by default."""
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if mask_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(mask_config.DOTENV_ENV_VAR)):
        mask_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    click.echo(summary_info(), nl=False)


@cli.command("mask", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(_STRATEGY_CHOICES, case_sensitive=False),
    default=MaskStrategy.FULL.value,
    show_default=True,
    help="Masking strategy applied to TEXT.",
)
@click.option("--mask-char", "-c", default=DEFAULT_MASK_CHAR, show_default=True, help="Single replacement character.")
def cli_mask(text: str, strategy: str, mask_char: str) -> None:
    """Print TEXT masked with one of the built-in strategies."""
    try:
        validate_mask_char(mask_char)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--mask-char") from exc
    click.echo(apply_strategy(MaskStrategy.from_name(strategy), text, mask_char))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--color/--no-color", default=True, help="Colourise the labels and renderings.")
def cli_demo(color: bool) -> None:
    """Render the built-in sample values through the masking runtime."""
    runtime = build_runtime()
    console = RichConsoleAdapter(force_color=color, no_color=not color)
    if not runtime.enabled:
        click.echo("masking disabled: values are shown unmasked", err=True)
    count = run_demo(runtime.mask, console, colorize=color)
    click.echo(f"rendered {count} samples")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
