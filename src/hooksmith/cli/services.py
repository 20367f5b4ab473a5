# SPDX-License-Identifier: MIT
"""Helper services binding CLI options to the hook installer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import typer

from ..errors import HooksmithError
from ..hooks import HookInstallResult, InstallStatus, partition_supported
from ..installer import HookInstaller
from ..settings import HookSettings, load_settings
from ..workspace import find_workspace_root, resolve_workspace
from .options import HookCLIOptions
from .shared import CLIError, CLILogger, build_cli_logger

ResultT = TypeVar("ResultT")


@dataclass(slots=True)
class CommandSession:
    """Installer and logger prepared for one CLI invocation."""

    installer: HookInstaller
    logger: CLILogger
    options: HookCLIOptions

    @property
    def settings(self) -> HookSettings:
        """Return the workspace settings in effect."""

        return self.installer.settings


def confirm(message: str) -> bool:
    """Ask ``message`` as a yes/no question, defaulting to no."""

    return typer.confirm(message, default=False)


def open_session(options: HookCLIOptions) -> CommandSession:
    """Resolve the workspace for ``options`` and build the installer.

    Args:
        options: Global CLI options.

    Returns:
        CommandSession: Installer bound to the resolved workspace and a logger.

    Raises:
        CLIError: Raised when the workspace or its settings cannot be resolved.
    """

    fallback_logger = build_cli_logger(emoji=options.emoji)
    try:
        root = options.workspace or find_workspace_root(Path.cwd())
        settings = load_settings(root)
        paths = resolve_workspace(root, config=options.config, settings=settings)
    except HooksmithError as exc:
        fallback_logger.fail(str(exc))
        raise CLIError(str(exc)) from exc

    if not options.emoji and settings.emoji:
        settings = settings.model_copy(update={"emoji": options.emoji})
    installer = HookInstaller(paths, confirm=confirm, settings=settings)
    return CommandSession(installer=installer, logger=build_cli_logger(emoji=settings.emoji), options=options)


def run_operation(session: CommandSession, operation: Callable[[HookInstaller], ResultT]) -> ResultT:
    """Run ``operation`` against the session installer, converting tool errors.

    Raises:
        CLIError: Raised when the operation fails with a :class:`HooksmithError`.
    """

    try:
        return operation(session.installer)
    except HooksmithError as exc:
        session.logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_install_summary(results: list[HookInstallResult], *, logger: CLILogger) -> None:
    """Log which hooks were declined during installation."""

    declined = [result.hook for result in results if result.status is InstallStatus.DECLINED]
    if declined:
        logger.warn(f"Not installed (declined): {', '.join(declined)}")


def emit_pending_hooks(pending: tuple[str, ...], session: CommandSession) -> None:
    """Print pending hooks and flag names hooksmith cannot install."""

    logger = session.logger
    if not pending:
        logger.warn(f"{session.installer.paths.config_path} registers no hook actions")
        return
    logger.heading("Pending hooks:")
    for hook in pending:
        logger.echo(f"  {hook}")
    _, unsupported = partition_supported(pending, session.settings.extra_hooks)
    if unsupported:
        logger.warn(f"Unsupported hooks will be skipped by autoinstall: {', '.join(unsupported)}")


__all__ = [
    "CommandSession",
    "confirm",
    "emit_install_summary",
    "emit_pending_hooks",
    "open_session",
    "run_operation",
]
