# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing the git hooks hooksmith can install."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

_DEFAULT_HOOKS: tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "post-index-change",
)


def available_hooks(extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Return the supported git hook names.

    Args:
        extra: Additional hook names enabled through workspace settings.

    Returns:
        tuple[str, ...]: Built-in hook identifiers followed by unseen extras.
    """

    additions = tuple(name for name in dict.fromkeys(extra) if name not in _DEFAULT_HOOKS)
    return _DEFAULT_HOOKS + additions


def is_plain_name(name: str) -> bool:
    """Return whether ``name`` can be used as a file name inside the hooks directory."""

    return name not in {"", ".", ".."} and Path(name).name == name


def is_supported(name: str, extra: Iterable[str] = ()) -> bool:
    """Return whether ``name`` identifies a supported hook.

    Args:
        name: Hook name supplied by the caller.
        extra: Additional hook names enabled through workspace settings.

    Returns:
        bool: ``True`` when the hook is recognised by the registry.
    """

    return name in _DEFAULT_HOOKS or name in set(extra)


def partition_supported(
    hooks: Iterable[str],
    extra: Iterable[str] = (),
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split ``hooks`` into supported and unsupported names, keeping their order.

    Args:
        hooks: Hook names to classify, typically the pending hooks of a configuration.
        extra: Additional hook names enabled through workspace settings.

    Returns:
        tuple[tuple[str, ...], tuple[str, ...]]: Supported names, then unsupported names.
    """

    extras = tuple(extra)
    supported: list[str] = []
    unsupported: list[str] = []
    for hook in dict.fromkeys(hooks):
        (supported if is_supported(hook, extras) else unsupported).append(hook)
    return tuple(supported), tuple(unsupported)


__all__ = ["available_hooks", "is_plain_name", "is_supported", "partition_supported"]
