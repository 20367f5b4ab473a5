# SPDX-License-Identifier: MIT
"""Global CLI options shared by every hooksmith command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..constants import CONFIG_ENV, WORKSPACE_ENV

WORKSPACE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--workspace",
        "-w",
        envvar=WORKSPACE_ENV,
        help="Workspace root (defaults to the nearest directory containing .git).",
    ),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        envvar=CONFIG_ENV,
        help="Hook configuration file (defaults to <workspace>/.githooks).",
    ),
]
FORCE_OPTION = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Overwrite existing hooks, allow unsupported hook names, and create missing directories.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output (also disabled by workspace settings)."),
]


@dataclass(frozen=True, slots=True)
class HookCLIOptions:
    """Capture the global options parsed by the application callback."""

    workspace: Path | None = None
    config: Path | None = None
    force: bool = False
    emoji: bool = True

    @classmethod
    def from_cli(
        cls,
        workspace: Path | None,
        config: Path | None,
        *,
        force: bool,
        emoji: bool,
    ) -> HookCLIOptions:
        """Return options parsed from CLI arguments with paths made absolute."""

        return cls(
            workspace=workspace.expanduser().resolve() if workspace is not None else None,
            config=config.expanduser().resolve() if config is not None else None,
            force=force,
            emoji=emoji,
        )


def get_options(ctx: typer.Context) -> HookCLIOptions:
    """Return the global options stored on the root context."""

    options = ctx.find_root().obj
    if isinstance(options, HookCLIOptions):
        return options
    return HookCLIOptions()


__all__ = [
    "CONFIG_OPTION",
    "EMOJI_OPTION",
    "FORCE_OPTION",
    "HookCLIOptions",
    "WORKSPACE_OPTION",
    "get_options",
]
