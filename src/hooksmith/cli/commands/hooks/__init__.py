# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Git hook management CLI command package."""

from __future__ import annotations

import typer

from .command import autoinstall_command, clean_command, install_command, list_command, remove_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register hook management commands on the Typer application.

    Args:
        app: Typer application receiving the commands.
    """

    app.command(name="install", help="Compile and install a hook.")(install_command)
    app.command(name="remove", help="Delete an installed hook.")(remove_command)
    app.command(name="autoinstall", help="Install every hook registered in the configuration.")(
        autoinstall_command
    )
    app.command(name="list", help="List installed hooks.")(list_command)
    app.command(name="clean", help="Remove all installed hooks.")(clean_command)
