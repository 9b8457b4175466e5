"""CLI behaviour coverage for the click entry points."""

from __future__ import annotations

import re
import sys

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_mask import __init__conf__
from lib_log_mask import cli as cli_mod
from lib_log_mask.cli import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, env: dict[str, str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    original_argv = sys.argv
    sys.argv = [__init__conf__.shell_command]
    try:
        result = runner.invoke(
            cli_mod.cli,
            args or [],
            prog_name=__init__conf__.shell_command,
            env=env,
        )
    finally:
        sys.argv = original_argv
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()
    assert stdout.startswith("Info for lib_log_mask:")


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == f"{__init__conf__.shell_command} version {__init__conf__.version}"


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_traceback_option_enables_tracebacks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    exit_code, _stdout, _exception = run_cli(["--traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.parametrize(
    "args, expected",
    [
        (["mask", "secret123"], "*********"),
        (["mask", "john@example.com", "--strategy", "first_last"], "j**************m"),
        (["mask", "1234567890", "-s", "LAST_FOUR", "-c", "#"], "######7890"),
        (["mask", "ab", "-s", "first_last"], "ab"),
    ],
)
def test_cli_mask_command(args: list[str], expected: str) -> None:
    exit_code, stdout, _ = run_cli(args)

    assert exit_code == 0
    assert stdout == expected + "\n"


def test_cli_mask_rejects_wide_mask_char() -> None:
    exit_code, stdout, _ = run_cli(["mask", "abc", "--mask-char", "**"])

    assert exit_code == 2
    assert "single character" in stdout


def test_cli_mask_rejects_custom_strategy() -> None:
    exit_code, _stdout, _ = run_cli(["mask", "abc", "--strategy", "custom"])

    assert exit_code == 2


def test_cli_demo_renders_samples() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color"], env={"LOG_MASK_ENABLED": "1"})

    assert exit_code == 0
    plain_output = strip_ansi(stdout)
    assert "user: User{username=john, password=*********, email=j**************m" in plain_output
    assert "empty: {}" in plain_output
    assert "<circular reference>" in plain_output
    assert "secret123" not in plain_output
    assert "rendered 6 samples" in plain_output


def test_cli_demo_warns_when_masking_disabled() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, ["demo", "--no-color"], env={"LOG_MASK_ENABLED": "0"})

    assert result.exit_code == 0
    assert "masking disabled" in result.output


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, object] = {}

    def fake_run_cli(command, argv=None, *, prog_name=None, **_kwargs):  # noqa: ANN001
        recorded.update(command=command, argv=argv, prog_name=prog_name)
        lib_cli_exit_tools.config.traceback = True
        lib_cli_exit_tools.config.traceback_force_color = True
        return 0

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--traceback", "info"]) == 0
    assert recorded == {"command": cli_mod.cli, "argv": ["--traceback", "info"], "prog_name": "lib_log_mask"}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_can_keep_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)

    def fake_run_cli(command, argv=None, *, prog_name=None, **_kwargs):  # noqa: ANN001
        lib_cli_exit_tools.config.traceback = True
        return 0

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    cli_mod.main(["info"], restore_traceback=False)
    assert lib_cli_exit_tools.config.traceback is True
