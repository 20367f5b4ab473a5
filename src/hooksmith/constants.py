# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for hook installation and runtime dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import Final

PACKAGE_DIR: Final[Path] = Path(__file__).resolve().parent
TEMPLATE_DIR: Final[Path] = PACKAGE_DIR / "templates"
TRIGGER_LIBRARY_PATH: Final[Path] = PACKAGE_DIR / "triggers.py"

GIT_DIR_NAME: Final[str] = ".git"
HOOKS_DIR_NAME: Final[str] = "hooks"
DEFAULT_CONFIG_NAME: Final[str] = ".githooks"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

FALLBACK_TEMPLATE_NAME: Final[str] = "missing-hook"
CONFIG_EXAMPLE_TEMPLATE_NAME: Final[str] = "githooks.example"
CONFIG_ENTRYPOINT: Final[str] = "configure"

HOOK_FILE_MODE: Final[int] = 0o755

HOOK_FAILURE_EXIT_CODE: Final[int] = 1
TOOL_ERROR_EXIT_CODE: Final[int] = 3

WORKSPACE_ENV: Final[str] = "HOOKSMITH_WORKSPACE"
CONFIG_ENV: Final[str] = "HOOKSMITH_CONFIG"

__all__ = [
    "CONFIG_ENTRYPOINT",
    "CONFIG_ENV",
    "CONFIG_EXAMPLE_TEMPLATE_NAME",
    "DEFAULT_CONFIG_NAME",
    "FALLBACK_TEMPLATE_NAME",
    "GIT_DIR_NAME",
    "HOOKS_DIR_NAME",
    "HOOK_FAILURE_EXIT_CODE",
    "HOOK_FILE_MODE",
    "PACKAGE_DIR",
    "PYPROJECT_FILENAME",
    "TEMPLATE_DIR",
    "TOOL_ERROR_EXIT_CODE",
    "TRIGGER_LIBRARY_PATH",
    "WORKSPACE_ENV",
]
