# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Supported hook vocabulary and installation outcome models."""

from __future__ import annotations

from .models import HookInstallResult, InstallStatus, InvocationState
from .registry import available_hooks, is_plain_name, is_supported, partition_supported

__all__ = [
    "HookInstallResult",
    "InstallStatus",
    "InvocationState",
    "available_hooks",
    "is_plain_name",
    "is_supported",
    "partition_supported",
]
