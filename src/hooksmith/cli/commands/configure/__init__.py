# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration CLI command package."""

from __future__ import annotations

import typer

from .command import configure_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the configure command on the Typer application."""

    app.command(name="configure", help="Create or validate the hook configuration.")(configure_command)
