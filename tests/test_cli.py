# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the hooksmith commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import PRE_COMMIT_CONFIG, ConfigWriter
from hooksmith.cli.app import app
from hooksmith.constants import TOOL_ERROR_EXIT_CODE


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, workspace: Path, *args: str, user_input: str | None = None):
    return runner.invoke(app, ["--workspace", str(workspace), "--no-emoji", *args], input=user_input)


def test_install_list_remove(runner: CliRunner, workspace: Path, write_config: ConfigWriter) -> None:
    write_config(PRE_COMMIT_CONFIG)

    installed = _invoke(runner, workspace, "install", "pre-commit")
    assert installed.exit_code == 0, installed.output
    assert "Installed pre-commit hook" in installed.output
    assert "✅" not in installed.output

    listed = _invoke(runner, workspace, "list")
    assert listed.exit_code == 0
    assert listed.output.splitlines().count("pre-commit") == 1

    removed = _invoke(runner, workspace, "remove", "pre-commit")
    assert removed.exit_code == 0
    assert not (workspace / ".git" / "hooks" / "pre-commit").exists()


def test_unsupported_hook_exits_with_tool_error(
    runner: CliRunner,
    workspace: Path,
    write_config: ConfigWriter,
) -> None:
    write_config(PRE_COMMIT_CONFIG)

    result = _invoke(runner, workspace, "install", "pre-lunch")

    assert result.exit_code == TOOL_ERROR_EXIT_CODE
    assert "Unsupported hook 'pre-lunch'" in result.output


def test_force_installs_unsupported_hook_after_confirmation(
    runner: CliRunner,
    workspace: Path,
    write_config: ConfigWriter,
) -> None:
    write_config(PRE_COMMIT_CONFIG)

    result = runner.invoke(
        app,
        ["--workspace", str(workspace), "--no-emoji", "--force", "install", "pre-lunch"],
        input="y\n",
    )

    assert result.exit_code == 0, result.output
    assert (workspace / ".git" / "hooks" / "pre-lunch").exists()


def test_remove_missing_hook(runner: CliRunner, workspace: Path) -> None:
    result = _invoke(runner, workspace, "remove", "pre-commit")

    assert result.exit_code == TOOL_ERROR_EXIT_CODE
    assert "not installed" in result.output


def test_remove_refuses_paths_outside_hooks_directory(
    runner: CliRunner,
    workspace: Path,
    write_config: ConfigWriter,
) -> None:
    config = write_config(PRE_COMMIT_CONFIG)

    result = _invoke(runner, workspace, "remove", "../../.githooks")

    assert result.exit_code == TOOL_ERROR_EXIT_CODE
    assert config.is_file()


def test_command_help_lists_arguments_then_sorted_options(runner: CliRunner) -> None:
    install_help = runner.invoke(app, ["install", "--help"]).output
    configure_help = runner.invoke(app, ["configure", "--help"]).output
    configure_options = configure_help[configure_help.index("Options") :]

    assert install_help.index("Arguments") < install_help.index("Options")
    assert "HOOK" in install_help
    assert configure_options.index("--help") < configure_options.index("--init") < configure_options.index("--test")


def test_unknown_command_is_usage_error(runner: CliRunner, workspace: Path) -> None:
    result = _invoke(runner, workspace, "frobnicate")

    assert result.exit_code == 2


def test_missing_workspace(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "list")

    assert result.exit_code == TOOL_ERROR_EXIT_CODE
    assert "Not a git repository" in result.output


def test_autoinstall_and_clean(runner: CliRunner, workspace: Path, write_config: ConfigWriter) -> None:
    write_config(
        "def configure(triggers):\n"
        "    triggers.register('pre-commit', print)\n"
        "    triggers.register('post-merge', print)\n"
    )

    installed = _invoke(runner, workspace, "autoinstall", user_input="y\n")
    assert installed.exit_code == 0, installed.output
    assert sorted(path.name for path in (workspace / ".git" / "hooks").iterdir()) == ["post-merge", "pre-commit"]

    declined = _invoke(runner, workspace, "clean", user_input="n\n")
    assert declined.exit_code == 0
    assert len(list((workspace / ".git" / "hooks").iterdir())) == 2

    cleaned = _invoke(runner, workspace, "clean", user_input="y\n")
    assert cleaned.exit_code == 0
    assert list((workspace / ".git" / "hooks").iterdir()) == []


def test_configure_init_and_test(runner: CliRunner, workspace: Path) -> None:
    created = _invoke(runner, workspace, "configure", "--init")
    assert created.exit_code == 0, created.output
    assert (workspace / ".githooks").is_file()

    again = _invoke(runner, workspace, "configure", "--init")
    assert again.exit_code == TOOL_ERROR_EXIT_CODE

    tested = _invoke(runner, workspace, "configure", "--test")
    assert tested.exit_code == 0, tested.output
    assert "pre-commit" in tested.output
    assert "commit-msg" in tested.output
    assert "loaded successfully" in tested.output


def test_configure_reports_broken_configuration(
    runner: CliRunner,
    workspace: Path,
    write_config: ConfigWriter,
) -> None:
    write_config("def configure(triggers):\n    raise RuntimeError('typo')\n")

    result = _invoke(runner, workspace, "configure", "--test")

    assert result.exit_code == TOOL_ERROR_EXIT_CODE
    assert "typo" in result.output


def test_config_option_overrides_default(
    runner: CliRunner,
    workspace: Path,
    tmp_path: Path,
) -> None:
    custom = tmp_path / "custom-hooks"
    custom.write_text(PRE_COMMIT_CONFIG, encoding="utf-8")

    result = _invoke(runner, workspace, "--config", str(custom), "install", "pre-commit")

    assert result.exit_code == 0, result.output
    assert str(custom.resolve()) in (workspace / ".git" / "hooks" / "pre-commit").read_text(encoding="utf-8")
