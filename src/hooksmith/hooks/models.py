# SPDX-License-Identifier: MIT
"""Dataclasses describing hook installation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class InstallStatus(StrEnum):
    """Outcome of a single ``install`` request."""

    INSTALLED = "installed"
    REPLACED = "replaced"
    DECLINED = "declined"


class InvocationState(StrEnum):
    """Lifecycle of one installer invocation."""

    IDLE = "idle"
    WORKSPACE_RESOLVED = "workspace-resolved"
    EXECUTING = "executing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class HookInstallResult:
    """Outcome from attempting to install one git hook."""

    hook: str
    destination: Path
    status: InstallStatus
    used_fallback: bool = False

    @property
    def written(self) -> bool:
        """Return whether a hook file was written to disk."""

        return self.status is not InstallStatus.DECLINED


__all__ = ["HookInstallResult", "InstallStatus", "InvocationState"]
