# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for ``[tool.hooksmith]`` settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from hooksmith.errors import SettingsError
from hooksmith.settings import HookSettings, load_settings


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == HookSettings()


def test_defaults_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.other]\nvalue = 1\n", encoding="utf-8")

    assert load_settings(tmp_path).config_name == ".githooks"


def test_reads_section_with_dashed_keys(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.hooksmith]\n"
        'config-name = "hooks.py"\n'
        'extra-hooks = ["p4-pre-submit", "p4-pre-submit"]\n'
        'interpreter = "/usr/bin/python3"\n'
        "emoji = false\n",
        encoding="utf-8",
    )

    settings = load_settings(tmp_path)

    assert settings.config_name == "hooks.py"
    assert settings.extra_hooks == ("p4-pre-submit",)
    assert settings.interpreter == "/usr/bin/python3"
    assert settings.emoji is False


@pytest.mark.parametrize(
    "body",
    [
        '[tool.hooksmith]\nunknown = 1\n',
        '[tool.hooksmith]\nconfig-name = "dir/hooks.py"\n',
        '[tool.hooksmith]\nextra-hooks = [".hidden"]\n',
        '[tool]\nhooksmith = 3\n',
        "[tool.hooksmith\n",
    ],
)
def test_invalid_settings(tmp_path: Path, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(body, encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(tmp_path)
