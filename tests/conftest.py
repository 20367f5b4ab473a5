# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from hooksmith.installer import HookInstaller
from hooksmith.workspace import WorkspacePaths, resolve_workspace

ConfigWriter = Callable[[str], Path]


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return a workspace root holding an empty ``.git/hooks`` directory."""

    root = tmp_path / "repo"
    (root / ".git" / "hooks").mkdir(parents=True)
    return root


@pytest.fixture
def write_config(workspace: Path) -> ConfigWriter:
    """Return a helper writing ``.githooks`` into the workspace."""

    def _write(body: str) -> Path:
        path = workspace / ".githooks"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def paths(workspace: Path) -> WorkspacePaths:
    return resolve_workspace(workspace)


class ConfirmRecorder:
    """Confirmation callback answering with a fixed reply and recording prompts."""

    def __init__(self, reply: bool = True) -> None:
        self.reply = reply
        self.prompts: list[str] = []

    def __call__(self, message: str) -> bool:
        self.prompts.append(message)
        return self.reply


@pytest.fixture
def confirm() -> ConfirmRecorder:
    return ConfirmRecorder()


@pytest.fixture
def installer(paths: WorkspacePaths, confirm: ConfirmRecorder) -> HookInstaller:
    return HookInstaller(paths, confirm=confirm)


PRE_COMMIT_CONFIG = """
def configure(triggers):
    triggers.register("pre-commit", lambda invocation: None)
"""
