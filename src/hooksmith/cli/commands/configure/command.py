# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for creating and validating the workspace hook configuration."""

from __future__ import annotations

from operator import methodcaller
from typing import Annotated

import typer

from ...options import get_options
from ...services import emit_pending_hooks, open_session, run_operation
from ...shared import CLIError

INIT_OPTION = Annotated[
    bool,
    typer.Option("--init", help="Write an example configuration (use --force to overwrite)."),
]
TEST_OPTION = Annotated[
    bool,
    typer.Option("--test", help="Load the configuration without side effects and list pending hooks."),
]


def configure_command(
    ctx: typer.Context,
    init: INIT_OPTION = False,
    test: TEST_OPTION = False,
) -> None:
    """Create, validate, or describe the workspace hook configuration.

    Without flags the configuration path is shown together with its pending
    hooks when the file exists.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = get_options(ctx)
    try:
        session = open_session(options)
        config_path = session.installer.paths.config_path
        if init:
            run_operation(session, methodcaller("init_config", force=options.force))
        if test:
            pending = run_operation(session, methodcaller("test_config"))
            emit_pending_hooks(pending, session)
            session.logger.ok(f"Configuration {config_path} loaded successfully")
        elif not init:
            session.logger.echo(f"Configuration: {config_path}")
            if config_path.is_file():
                emit_pending_hooks(run_operation(session, methodcaller("test_config")), session)
            else:
                session.logger.warn("Configuration file does not exist (run 'hooksmith configure --init')")
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0)


__all__ = ["configure_command"]
