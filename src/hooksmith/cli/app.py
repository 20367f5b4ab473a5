# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and global options."""

from __future__ import annotations

import typer

from .commands import register_commands
from .options import CONFIG_OPTION, EMOJI_OPTION, FORCE_OPTION, WORKSPACE_OPTION, HookCLIOptions
from .typer_ext import create_typer

app = create_typer(help="Install and manage git hooks driven by a workspace .githooks file.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    workspace: WORKSPACE_OPTION = None,
    config: CONFIG_OPTION = None,
    force: FORCE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Store global options for the selected command."""

    ctx.obj = HookCLIOptions.from_cli(workspace, config, force=force, emoji=emoji)


register_commands(app)

__all__ = ["app"]
