# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for evaluating workspace hook configurations."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from hooksmith.config_loader import load_config, load_pending_hooks
from hooksmith.errors import ConfigLoadError, ConfigNotFound
from hooksmith.triggers import TriggerRegistry


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / ".githooks"
    path.write_text(body, encoding="utf-8")
    return path


def test_load_config_populates_registry(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "def configure(triggers):\n"
        "    triggers.register('pre-push', lambda inv: None)\n"
        "    triggers.register('pre-commit', lambda inv: None)\n",
    )
    registry = TriggerRegistry()

    assert load_config(path, registry) is registry
    assert registry.pending_hooks() == ("pre-push", "pre-commit")


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFound):
        load_config(tmp_path / ".githooks", TriggerRegistry())


def test_load_config_wraps_import_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, "def configure(triggers)\n")

    with pytest.raises(ConfigLoadError, match="SyntaxError"):
        load_config(path, TriggerRegistry())


def test_load_config_requires_configure_callable(tmp_path: Path) -> None:
    path = _write(tmp_path, "configure = 'nope'\n")

    with pytest.raises(ConfigLoadError, match="configure"):
        load_config(path, TriggerRegistry())


def test_load_config_wraps_configure_failures(tmp_path: Path) -> None:
    path = _write(tmp_path, "def configure(triggers):\n    raise KeyError('boom')\n")

    with pytest.raises(ConfigLoadError) as excinfo:
        load_config(path, TriggerRegistry())

    assert isinstance(excinfo.value.__cause__, KeyError)


def test_load_config_does_not_leak_module(tmp_path: Path) -> None:
    path = _write(tmp_path, "def configure(triggers):\n    pass\n")
    before = set(sys.modules)

    load_config(path, TriggerRegistry())

    assert set(sys.modules) == before


def test_each_load_starts_from_a_fresh_registry(tmp_path: Path) -> None:
    path = _write(tmp_path, "def configure(triggers):\n    triggers.register('pre-commit', print)\n")

    assert load_pending_hooks(path) == ("pre-commit",)
    assert load_pending_hooks(path) == ("pre-commit",)


def test_ignore_flag_reaches_configuration(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "def configure(triggers):\n"
        "    if triggers.ignore:\n"
        "        triggers.register('post-merge', print)\n",
    )

    assert load_pending_hooks(path, ignore=True) == ("post-merge",)
    assert load_pending_hooks(path) == ()


def test_rewritten_configuration_is_reloaded_without_bytecode_cache(tmp_path: Path) -> None:
    path = _write(tmp_path, "def configure(triggers):\n    triggers.register('pre-push', print)\n")
    stamp = path.stat()
    assert load_pending_hooks(path) == ("pre-push",)

    path.write_text("def configure(triggers):\n    triggers.register('pre-rbse', print)\n", encoding="utf-8")
    os.utime(path, ns=(stamp.st_atime_ns, stamp.st_mtime_ns))

    assert load_pending_hooks(path) == ("pre-rbse",)
    assert not (tmp_path / "__pycache__").exists()
