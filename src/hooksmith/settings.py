# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Workspace settings read from ``[tool.hooksmith]`` in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_CONFIG_NAME, PYPROJECT_FILENAME
from .errors import SettingsError

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "hooksmith"


class HookSettings(BaseModel):
    """Per-workspace preferences for hook installation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_name: str = DEFAULT_CONFIG_NAME
    extra_hooks: tuple[str, ...] = Field(default_factory=tuple)
    interpreter: str | None = None
    emoji: bool = True

    @field_validator("config_name")
    @classmethod
    def _validate_config_name(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError("config_name must be a bare file name")
        return value

    @field_validator("extra_hooks")
    @classmethod
    def _validate_extra_hooks(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for hook in value:
            if not hook or "/" in hook or hook.startswith("."):
                raise ValueError(f"invalid hook name {hook!r}")
        return tuple(dict.fromkeys(value))


def load_settings(root: Path) -> HookSettings:
    """Return settings for the workspace at ``root``.

    Args:
        root: Workspace root that may contain ``pyproject.toml``.

    Returns:
        HookSettings: Parsed settings, or defaults when no section exists.

    Raises:
        SettingsError: Raised when the TOML is unreadable or the section is invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return HookSettings()
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"Unable to read {pyproject}: {exc}") from exc

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return HookSettings()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return HookSettings()
    if not isinstance(section, Mapping):
        raise SettingsError(f"[tool.hooksmith] in {pyproject} must be a table")
    return _build_settings(section, pyproject)


def _build_settings(section: Mapping[str, Any], source: Path) -> HookSettings:
    payload = {key.replace("-", "_"): value for key, value in section.items()}
    try:
        return HookSettings.model_validate(payload)
    except ValidationError as exc:
        raise SettingsError(f"Invalid [tool.hooksmith] settings in {source}: {exc}") from exc


__all__ = ["HookSettings", "load_settings"]
