# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands that install, remove, list, and clean git hooks."""

from __future__ import annotations

from operator import methodcaller
from typing import Annotated

import typer

from ...options import get_options
from ...services import emit_install_summary, open_session, run_operation
from ...shared import CLIError

HOOK_ARGUMENT = Annotated[str, typer.Argument(help="Git hook name, for example pre-commit.")]


def install_command(ctx: typer.Context, hook: HOOK_ARGUMENT) -> None:
    """Compile and install a single hook into .git/hooks.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = get_options(ctx)
    try:
        session = open_session(options)
        result = run_operation(session, methodcaller("install", hook, force=options.force))
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary([result], logger=session.logger)
    raise typer.Exit(code=0)


def autoinstall_command(ctx: typer.Context) -> None:
    """Install every supported hook that has actions in the configuration.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = get_options(ctx)
    try:
        session = open_session(options)
        results = run_operation(session, methodcaller("autoinstall", force=options.force))
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(results, logger=session.logger)
    raise typer.Exit(code=0)


def remove_command(ctx: typer.Context, hook: HOOK_ARGUMENT) -> None:
    """Delete an installed hook.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    try:
        session = open_session(get_options(ctx))
        run_operation(session, methodcaller("remove", hook))
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0)


def list_command(ctx: typer.Context) -> None:
    """List every entry of the hooks directory.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    try:
        session = open_session(get_options(ctx))
        entries = run_operation(session, methodcaller("list"))
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    if not entries:
        session.logger.info(f"No hooks installed in {session.installer.paths.hooks_dir}")
    for entry in entries:
        session.logger.echo(entry)
    raise typer.Exit(code=0)


def clean_command(ctx: typer.Context) -> None:
    """Remove every installed hook after confirmation.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    try:
        session = open_session(get_options(ctx))
        run_operation(session, methodcaller("clean"))
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0)


__all__ = [
    "autoinstall_command",
    "clean_command",
    "install_command",
    "list_command",
    "remove_command",
]
