# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by hook installation and compilation services."""

from __future__ import annotations

from pathlib import Path
from typing import Final


class HooksmithError(RuntimeError):
    """Base class for failures that terminate the current hooksmith command."""


class WorkspaceNotFound(HooksmithError):
    """Raised when no git directory can be located for the workspace."""

    def __init__(self, start: Path) -> None:
        """Initialise the error with the directory where discovery started.

        Args:
            start: Directory inspected (and searched upwards from) for ``.git``.
        """

        super().__init__(f"Not a git repository (no .git found at or above {start})")
        self.start = start


class HooksDirMissing(HooksmithError):
    """Raised when the git hooks directory is absent and creation was not requested."""

    def __init__(self, hooks_dir: Path) -> None:
        """Initialise the error with the missing hooks directory.

        Args:
            hooks_dir: Expected location of the git hooks directory.
        """

        super().__init__(f"Hooks directory {hooks_dir} does not exist (use --force to create it)")
        self.hooks_dir = hooks_dir


class ConfigNotFound(HooksmithError):
    """Raised when the workspace hook configuration file is missing."""

    def __init__(self, path: Path) -> None:
        """Initialise the error with the configuration path that was checked.

        Args:
            path: Absolute path of the expected configuration file.
        """

        super().__init__(f"Hook configuration not found: {path} (run 'hooksmith configure --init')")
        self.path = path


class ConfigLoadError(HooksmithError):
    """Raised when the workspace hook configuration cannot be evaluated."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error with the failing path and a short reason.

        Args:
            path: Configuration file that failed to load.
            reason: Human-readable explanation of the failure.
        """

        super().__init__(f"Failed to load hook configuration {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigAlreadyExists(HooksmithError):
    """Raised when ``configure --init`` would overwrite an existing configuration."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Hook configuration already exists: {path} (use --force to overwrite)")
        self.path = path


class SettingsError(HooksmithError):
    """Raised when ``[tool.hooksmith]`` settings are malformed."""


class UnsupportedHook(HooksmithError):
    """Raised when installing a hook name outside the supported vocabulary."""

    def __init__(self, hook: str, reason: str | None = None) -> None:
        detail = reason or "use --force to install it anyway"
        super().__init__(f"Unsupported hook '{hook}' ({detail})")
        self.hook = hook


class HookAlreadyExists(HooksmithError):
    """Raised when the target hook file already exists and force was not requested."""

    def __init__(self, hook: str, path: Path) -> None:
        super().__init__(f"Hook '{hook}' already exists at {path} (use --force to overwrite)")
        self.hook = hook
        self.path = path


class HookNotFound(HooksmithError):
    """Raised when removing a hook that is not installed."""

    def __init__(self, hook: str, path: Path) -> None:
        super().__init__(f"Hook '{hook}' is not installed ({path} does not exist)")
        self.hook = hook
        self.path = path


class MissingLibraryReference(HooksmithError):
    """Raised when a template lacks its reference to the trigger library."""

    def __init__(self, hook: str) -> None:
        super().__init__(f"Template for '{hook}' does not reference the trigger library")
        self.hook = hook


class MissingConfigReference(HooksmithError):
    """Raised when a template lacks its reference to the workspace configuration."""

    def __init__(self, hook: str) -> None:
        super().__init__(f"Template for '{hook}' does not reference the hook configuration")
        self.hook = hook


PERMISSION_HINT: Final[str] = "try again with elevated privileges (for example with sudo)"


class FilesystemPermission(HooksmithError):
    """Raised when writing or deleting a hook file is denied by the filesystem."""

    def __init__(self, path: Path, action: str) -> None:
        """Initialise the error with the denied path and attempted action.

        Args:
            path: Filesystem path the operation targeted.
            action: Verb describing the attempted operation (``write``, ``delete``...).
        """

        super().__init__(f"Permission denied while trying to {action} {path}; {PERMISSION_HINT}")
        self.path = path
        self.action = action


__all__ = [
    "ConfigAlreadyExists",
    "ConfigLoadError",
    "ConfigNotFound",
    "FilesystemPermission",
    "HookAlreadyExists",
    "HookNotFound",
    "HooksDirMissing",
    "HooksmithError",
    "MissingConfigReference",
    "MissingLibraryReference",
    "PERMISSION_HINT",
    "SettingsError",
    "UnsupportedHook",
    "WorkspaceNotFound",
]
