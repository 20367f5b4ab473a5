# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rewrite hook templates into workspace-specific executable scripts.

Templates reference the trigger library and the workspace configuration with
relative string literals. Compilation swaps the first literal of each kind for
an absolute path, names the hook in the fallback template, and prepends an
interpreter line plus a banner. Nothing else in the template is touched.
"""

from __future__ import annotations

import re
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from .constants import DEFAULT_CONFIG_NAME, FALLBACK_TEMPLATE_NAME, TEMPLATE_DIR
from .errors import MissingConfigReference, MissingLibraryReference

LIBRARY_REFERENCE_RE: Final[re.Pattern[str]] = re.compile(r"""(["'])[^"'\n]*triggers\.py\1""")
CONFIG_REFERENCE_RE: Final[re.Pattern[str]] = re.compile(
    r"""(["'])[^"'\n]*""" + re.escape(DEFAULT_CONFIG_NAME) + r"""\1"""
)
FALLBACK_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(
    r"""(["'])""" + re.escape(FALLBACK_TEMPLATE_NAME) + r"""\1"""
)
BANNER_TEMPLATE: Final[str] = "# Compiled by hooksmith for {hook} at {timestamp}. Reinstall instead of editing."


def _literal(value: str) -> str:
    return repr(value)


def select_template(hook_name: str, template_dir: Path = TEMPLATE_DIR) -> tuple[Path, bool]:
    """Return the template to compile for ``hook_name`` and whether it is the fallback.

    Args:
        hook_name: Hook being installed.
        template_dir: Directory holding the shipped templates.

    Returns:
        tuple[Path, bool]: Template path and ``True`` when the generic
        fallback template was selected.
    """

    specific = template_dir / hook_name
    if hook_name != FALLBACK_TEMPLATE_NAME and specific.is_file():
        return specific, False
    return template_dir / FALLBACK_TEMPLATE_NAME, True


def compile_hook(
    hook_name: str,
    template_text: str,
    *,
    is_using_fallback: bool,
    library_path: Path,
    config_path: Path,
    interpreter: str | None = None,
    compiled_at: datetime | None = None,
) -> str:
    """Return ``template_text`` rewritten into an installable hook script.

    Args:
        hook_name: Hook the script is compiled for.
        template_text: Raw template source.
        is_using_fallback: Whether the template is the generic fallback whose
            placeholder hook name must be replaced.
        library_path: Absolute path of the trigger library.
        config_path: Absolute path of the workspace configuration.
        interpreter: Interpreter for the ``#!`` line; defaults to the running one.
        compiled_at: Timestamp for the banner; defaults to now (UTC).

    Returns:
        str: Compiled script text.

    Raises:
        MissingLibraryReference: Raised when the template never references the trigger library.
        MissingConfigReference: Raised when the template never references the configuration.
    """

    text, replaced = LIBRARY_REFERENCE_RE.subn(lambda _: _literal(str(library_path)), template_text, count=1)
    if not replaced:
        raise MissingLibraryReference(hook_name)

    text, replaced = CONFIG_REFERENCE_RE.subn(lambda _: _literal(str(config_path)), text, count=1)
    if not replaced:
        raise MissingConfigReference(hook_name)

    if is_using_fallback:
        text = FALLBACK_PLACEHOLDER_RE.sub(lambda _: _literal(hook_name), text)

    timestamp = (compiled_at or datetime.now(UTC)).isoformat(timespec="seconds")
    header = [
        f"#!{interpreter or sys.executable}",
        BANNER_TEMPLATE.format(hook=hook_name, timestamp=timestamp),
    ]
    return "\n".join(header) + "\n" + text


__all__ = [
    "BANNER_TEMPLATE",
    "CONFIG_REFERENCE_RE",
    "FALLBACK_PLACEHOLDER_RE",
    "LIBRARY_REFERENCE_RE",
    "compile_hook",
    "select_template",
]
