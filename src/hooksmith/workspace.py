# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the git directories and configuration path for a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .constants import GIT_DIR_NAME, HOOKS_DIR_NAME
from .errors import WorkspaceNotFound
from .settings import HookSettings

GITDIR_PREFIX: Final[str] = "gitdir:"
COMMONDIR_FILENAME: Final[str] = "commondir"


@dataclass(frozen=True, slots=True)
class WorkspacePaths:
    """Describe filesystem locations used during hook management."""

    root: Path
    git_dir: Path
    hooks_dir: Path
    config_path: Path

    def hook_path(self, hook: str) -> Path:
        """Return the installation path of ``hook``."""

        return self.hooks_dir / hook


def find_workspace_root(start: Path) -> Path:
    """Return the nearest directory at or above ``start`` that contains ``.git``.

    Raises:
        WorkspaceNotFound: Raised when no ancestor holds a git directory.
    """

    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / GIT_DIR_NAME).exists():
            return candidate
    raise WorkspaceNotFound(start)


def resolve_git_dir(root: Path) -> Path:
    """Return the git directory backing ``root``.

    ``.git`` is usually a directory; linked worktrees and submodules use a
    file holding a ``gitdir: <path>`` pointer instead.

    Args:
        root: Workspace root directory.

    Returns:
        Path: Absolute git directory.

    Raises:
        WorkspaceNotFound: Raised when ``.git`` is missing or its pointer is unusable.
    """

    dot_git = root / GIT_DIR_NAME
    if dot_git.is_dir():
        return dot_git
    if not dot_git.is_file():
        raise WorkspaceNotFound(root)
    content = dot_git.read_text(encoding="utf-8").strip()
    if not content.startswith(GITDIR_PREFIX):
        raise WorkspaceNotFound(root)
    target = Path(content[len(GITDIR_PREFIX) :].strip())
    git_dir = (target if target.is_absolute() else root / target).resolve()
    if not git_dir.is_dir():
        raise WorkspaceNotFound(root)
    return git_dir


def resolve_hooks_dir(git_dir: Path) -> Path:
    """Return the hooks directory for ``git_dir``, following ``commondir`` for worktrees."""

    commondir = git_dir / COMMONDIR_FILENAME
    if commondir.is_file():
        common = Path(commondir.read_text(encoding="utf-8").strip())
        base = (common if common.is_absolute() else git_dir / common).resolve()
        return base / HOOKS_DIR_NAME
    return git_dir / HOOKS_DIR_NAME


def resolve_workspace(
    root: Path | None = None,
    *,
    config: Path | None = None,
    settings: HookSettings | None = None,
) -> WorkspacePaths:
    """Compute the paths used by one hooksmith invocation.

    Args:
        root: Explicit workspace root. When ``None`` the current directory and
            its parents are searched for ``.git``.
        config: Explicit configuration path overriding the default name.
        settings: Workspace settings supplying the default configuration name.

    Returns:
        WorkspacePaths: Absolute workspace, git, hooks, and configuration paths.

    Raises:
        WorkspaceNotFound: Raised when the workspace has no git directory.
    """

    resolved_root = root.resolve() if root is not None else find_workspace_root(Path.cwd())
    git_dir = resolve_git_dir(resolved_root)
    active = settings or HookSettings()
    config_path = config.resolve() if config is not None else resolved_root / active.config_name
    return WorkspacePaths(
        root=resolved_root,
        git_dir=git_dir,
        hooks_dir=resolve_hooks_dir(git_dir),
        config_path=config_path,
    )


__all__ = [
    "WorkspacePaths",
    "find_workspace_root",
    "resolve_git_dir",
    "resolve_hooks_dir",
    "resolve_workspace",
]
