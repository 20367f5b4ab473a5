# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for workspace path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from hooksmith.errors import WorkspaceNotFound
from hooksmith.settings import HookSettings
from hooksmith.workspace import resolve_workspace


def test_explicit_root(workspace: Path) -> None:
    paths = resolve_workspace(workspace)

    assert paths.root == workspace.resolve()
    assert paths.git_dir == workspace.resolve() / ".git"
    assert paths.hooks_dir == workspace.resolve() / ".git" / "hooks"
    assert paths.config_path == workspace.resolve() / ".githooks"
    assert paths.hook_path("pre-commit") == paths.hooks_dir / "pre-commit"


def test_discovers_root_from_nested_directory(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = workspace / "src" / "pkg"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert resolve_workspace().root == workspace.resolve()


def test_missing_git_directory(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceNotFound):
        resolve_workspace(tmp_path)


def test_config_override_and_settings_name(workspace: Path, tmp_path: Path) -> None:
    custom = tmp_path / "hooks.py"

    assert resolve_workspace(workspace, config=custom).config_path == custom.resolve()
    named = resolve_workspace(workspace, settings=HookSettings(config_name="hooks.conf"))
    assert named.config_path == workspace.resolve() / "hooks.conf"


def test_worktree_gitdir_file_uses_common_hooks(tmp_path: Path) -> None:
    main_git = tmp_path / "main" / ".git"
    worktree_git = main_git / "worktrees" / "feature"
    worktree_git.mkdir(parents=True)
    (worktree_git / "commondir").write_text("../..\n", encoding="utf-8")
    checkout = tmp_path / "feature"
    checkout.mkdir()
    (checkout / ".git").write_text(f"gitdir: {worktree_git}\n", encoding="utf-8")

    paths = resolve_workspace(checkout)

    assert paths.git_dir == worktree_git.resolve()
    assert paths.hooks_dir == main_git.resolve() / "hooks"


def test_relative_gitdir_pointer(tmp_path: Path) -> None:
    module_git = tmp_path / ".git" / "modules" / "lib"
    module_git.mkdir(parents=True)
    checkout = tmp_path / "lib"
    checkout.mkdir()
    (checkout / ".git").write_text("gitdir: ../.git/modules/lib\n", encoding="utf-8")

    assert resolve_workspace(checkout).hooks_dir == module_git.resolve() / "hooks"


def test_broken_gitdir_pointer(tmp_path: Path) -> None:
    (tmp_path / ".git").write_text("not a pointer\n", encoding="utf-8")

    with pytest.raises(WorkspaceNotFound):
        resolve_workspace(tmp_path)
