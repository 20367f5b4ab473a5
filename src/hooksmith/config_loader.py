# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Evaluate workspace hook configurations against a trigger registry.

A configuration is a Python script (``.githooks`` by default) defining a
``configure(triggers)`` callable. Loading the script hands it the registry so
it can register actions; the module itself is discarded afterwards.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import CodeType
from typing import TYPE_CHECKING

from .constants import CONFIG_ENTRYPOINT
from .errors import ConfigLoadError, ConfigNotFound

if TYPE_CHECKING:
    from .triggers import TriggerRegistry

LOGGER = logging.getLogger(__name__)


class _UncachedSourceLoader(SourceFileLoader):
    """Compile the configuration from source on every load, bypassing ``__pycache__``."""

    def get_code(self, fullname: str) -> CodeType:
        path = self.get_filename(fullname)
        return self.source_to_code(self.get_data(path), path)


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8"), usedforsecurity=False).hexdigest()[:12]
    return f"_hooksmith_config_{digest}"


def load_config(path: Path, registry: TriggerRegistry) -> TriggerRegistry:
    """Evaluate the configuration at ``path`` and let it populate ``registry``.

    Args:
        path: Configuration script to evaluate.
        registry: Registry handed to the script's ``configure`` callable.

    Returns:
        TriggerRegistry: The same registry, now holding the script's registrations.

    Raises:
        ConfigNotFound: Raised when ``path`` is not a file.
        ConfigLoadError: Raised when the script fails to import, lacks a
            callable ``configure``, or raises while configuring.
    """

    path = path.resolve()
    if not path.is_file():
        raise ConfigNotFound(path)

    name = _module_name(path)
    loader = _UncachedSourceLoader(name, str(path))
    spec = importlib.util.spec_from_loader(name, loader)
    if spec is None:  # pragma: no cover - file loaders always yield a spec
        raise ConfigLoadError(path, "unable to build a module spec")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        try:
            loader.exec_module(module)
        except Exception as exc:
            raise ConfigLoadError(path, f"{type(exc).__name__}: {exc}") from exc

        configure = getattr(module, CONFIG_ENTRYPOINT, None)
        if not callable(configure):
            raise ConfigLoadError(path, f"missing callable '{CONFIG_ENTRYPOINT}(triggers)'")
        try:
            configure(registry)
        except Exception as exc:
            raise ConfigLoadError(path, f"{CONFIG_ENTRYPOINT}() raised {type(exc).__name__}: {exc}") from exc
    finally:
        sys.modules.pop(name, None)

    LOGGER.debug("loaded %s: pending=%s", path, registry.pending_hooks())
    return registry


def load_pending_hooks(path: Path, *, ignore: bool = False) -> tuple[str, ...]:
    """Return the hook names the configuration at ``path`` registers actions for.

    Args:
        path: Configuration script to evaluate.
        ignore: Whether to flag the registry as a validation-only load.

    Returns:
        tuple[str, ...]: Pending hook names in first-registration order.
    """

    from .triggers import TriggerRegistry

    return load_config(path, TriggerRegistry(ignore=ignore)).pending_hooks()


__all__ = ["load_config", "load_pending_hooks"]
