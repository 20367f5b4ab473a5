# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install, remove, list, and clean compiled git hooks for a workspace."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from .compiler import compile_hook, select_template
from .config_loader import load_pending_hooks
from .constants import CONFIG_EXAMPLE_TEMPLATE_NAME, HOOK_FILE_MODE, TEMPLATE_DIR, TRIGGER_LIBRARY_PATH
from .errors import (
    ConfigAlreadyExists,
    ConfigNotFound,
    FilesystemPermission,
    HookAlreadyExists,
    HookNotFound,
    HooksDirMissing,
    UnsupportedHook,
)
from .hooks import (
    HookInstallResult,
    InstallStatus,
    InvocationState,
    is_plain_name,
    is_supported,
    partition_supported,
)
from .logging import info, ok, warn
from .settings import HookSettings
from .workspace import WorkspacePaths

ConfirmCallback = Callable[[str], bool]


@contextmanager
def _permission_guard(path: Path, action: str) -> Iterator[None]:
    try:
        yield
    except PermissionError as exc:
        raise FilesystemPermission(path, action) from exc


class HookInstaller:
    """Apply hook management commands to one workspace's hooks directory."""

    def __init__(
        self,
        paths: WorkspacePaths,
        *,
        confirm: ConfirmCallback,
        settings: HookSettings | None = None,
        template_dir: Path = TEMPLATE_DIR,
        library_path: Path = TRIGGER_LIBRARY_PATH,
    ) -> None:
        """Bind the installer to resolved workspace paths.

        Args:
            paths: Workspace, hooks directory, and configuration locations.
            confirm: Callback asking the user a yes/no question.
            settings: Workspace settings; defaults are used when omitted.
            template_dir: Directory holding hook templates.
            library_path: Absolute trigger library path baked into compiled hooks.
        """

        self.paths = paths
        self.settings = settings or HookSettings()
        self.template_dir = template_dir
        self.library_path = library_path.resolve()
        self._confirm = confirm
        self.state = InvocationState.WORKSPACE_RESOLVED

    @property
    def _emoji(self) -> bool:
        return self.settings.emoji

    @contextmanager
    def _executing(self) -> Iterator[None]:
        self.state = InvocationState.EXECUTING
        try:
            yield
        except BaseException:
            self.state = InvocationState.FAILED
            raise
        self.state = InvocationState.DONE

    # Commands -------------------------------------------------------------------

    def install(self, hook_name: str, *, force: bool = False) -> HookInstallResult:
        """Compile and install ``hook_name`` into the hooks directory.

        Args:
            hook_name: Git hook to install.
            force: Install unsupported hooks, overwrite existing files, and
                create a missing hooks directory.

        Returns:
            HookInstallResult: Destination and outcome of the request.

        Raises:
            ConfigNotFound: Raised when the workspace configuration is missing.
            UnsupportedHook: Raised for unknown hook names without ``force``, and
                for names that are not plain file names even with it.
            HookAlreadyExists: Raised when the hook file exists without ``force``.
            HooksDirMissing: Raised when the hooks directory is absent without
                ``force``, before any prompt.
        """

        with self._executing():
            return self._install(hook_name, force=force)

    def autoinstall(self, *, force: bool = False) -> list[HookInstallResult]:
        """Install every supported hook with registered actions, stopping at the first failure.

        Args:
            force: Forwarded to each :meth:`install` call.

        Returns:
            list[HookInstallResult]: Outcomes in installation order.
        """

        with self._executing():
            pending = self._pending_hooks()
            supported, unsupported = partition_supported(pending, self.settings.extra_hooks)
            for hook in unsupported:
                warn(f"Skipping unsupported hook '{hook}' registered in {self.paths.config_path}", use_emoji=self._emoji)
            if not supported:
                info("No hooks with registered actions to install", use_emoji=self._emoji)
            results = [self._install(hook, force=force) for hook in supported]
            written = sum(1 for result in results if result.written)
            ok(f"Installed {written} of {len(supported)} pending hooks", use_emoji=self._emoji)
            return results

    def remove(self, hook_name: str) -> Path:
        """Delete the installed ``hook_name`` file.

        Raises:
            HookNotFound: Raised when the hook is not installed or the name
                does not denote a file inside the hooks directory.
        """

        with self._executing():
            destination = self.paths.hook_path(hook_name)
            if not is_plain_name(hook_name) or (not destination.exists() and not destination.is_symlink()):
                raise HookNotFound(hook_name, destination)
            self._delete(destination)
            ok(f"Removed {hook_name} hook", use_emoji=self._emoji)
            return destination

    def list(self) -> list[str]:
        """Return every entry of the hooks directory, sorted by name."""

        with self._executing():
            return self._listing()

    def clean(self) -> list[Path]:
        """Remove every entry of the hooks directory after one confirmation.

        Entries are deleted in listing order; a failure part-way leaves the
        earlier deletions in place.

        Returns:
            list[Path]: Paths removed, empty when declined or nothing was installed.
        """

        with self._executing():
            entries = self._listing()
            if not entries:
                info(f"No hooks installed in {self.paths.hooks_dir}", use_emoji=self._emoji)
                return []
            if not self._confirm(f"Remove {len(entries)} entries from {self.paths.hooks_dir}?"):
                warn("Clean cancelled", use_emoji=self._emoji)
                return []
            removed: list[Path] = []
            for entry in entries:
                path = self.paths.hooks_dir / entry
                self._delete(path)
                removed.append(path)
            ok(f"Removed {len(removed)} hooks", use_emoji=self._emoji)
            return removed

    def init_config(self, *, force: bool = False) -> Path:
        """Write the example configuration to the workspace configuration path.

        Raises:
            ConfigAlreadyExists: Raised when a configuration exists without ``force``.
        """

        with self._executing():
            target = self.paths.config_path
            if target.exists() and not force:
                raise ConfigAlreadyExists(target)
            example = (self.template_dir / CONFIG_EXAMPLE_TEMPLATE_NAME).read_text(encoding="utf-8")
            with _permission_guard(target, "write"):
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(example, encoding="utf-8")
            ok(f"Wrote hook configuration to {target}", use_emoji=self._emoji)
            return target

    def test_config(self) -> tuple[str, ...]:
        """Load the configuration as a validation-only pass and return its pending hooks."""

        with self._executing():
            return self._pending_hooks(ignore=True)

    # Internals ------------------------------------------------------------------

    def _pending_hooks(self, *, ignore: bool = False) -> tuple[str, ...]:
        config_path = self.paths.config_path
        if not config_path.is_file():
            raise ConfigNotFound(config_path)
        return load_pending_hooks(config_path, ignore=ignore)

    def _install(self, hook_name: str, *, force: bool) -> HookInstallResult:
        pending = self._pending_hooks()
        if not is_plain_name(hook_name):
            raise UnsupportedHook(hook_name, "hook names must be plain file names")
        if not force and not is_supported(hook_name, self.settings.extra_hooks):
            raise UnsupportedHook(hook_name)
        destination = self.paths.hook_path(hook_name)
        existed = destination.exists() or destination.is_symlink()
        if existed and not force:
            raise HookAlreadyExists(hook_name, destination)
        if hook_name not in pending:
            warn(f"No actions registered for {hook_name} in {self.paths.config_path}", use_emoji=self._emoji)

        if not force and not self.paths.hooks_dir.is_dir():
            raise HooksDirMissing(self.paths.hooks_dir)
        template, is_using_fallback = select_template(hook_name, self.template_dir)
        if is_using_fallback and not self._confirm(
            f"No dedicated template for {hook_name}; install it from the generic template?"
        ):
            warn(f"Skipped {hook_name} hook", use_emoji=self._emoji)
            return HookInstallResult(hook_name, destination, InstallStatus.DECLINED, used_fallback=True)

        script = compile_hook(
            hook_name,
            template.read_text(encoding="utf-8"),
            is_using_fallback=is_using_fallback,
            library_path=self.library_path,
            config_path=self.paths.config_path,
            interpreter=self.settings.interpreter,
        )
        self._ensure_hooks_dir(create=force)
        info(f"Installing {hook_name} hook", use_emoji=self._emoji)
        with _permission_guard(destination, "write"):
            if destination.is_symlink():
                destination.unlink()
            destination.write_text(script, encoding="utf-8")
            destination.chmod(HOOK_FILE_MODE)
        status = InstallStatus.REPLACED if existed else InstallStatus.INSTALLED
        ok(f"Installed {hook_name} hook at {destination}", use_emoji=self._emoji)
        return HookInstallResult(hook_name, destination, status, used_fallback=is_using_fallback)

    def _ensure_hooks_dir(self, *, create: bool) -> None:
        hooks_dir = self.paths.hooks_dir
        if hooks_dir.is_dir():
            return
        if not create:
            raise HooksDirMissing(hooks_dir)
        with _permission_guard(hooks_dir, "create"):
            hooks_dir.mkdir(parents=True, exist_ok=True)

    def _listing(self) -> list[str]:
        if not self.paths.hooks_dir.is_dir():
            raise HooksDirMissing(self.paths.hooks_dir)
        return sorted(entry.name for entry in self.paths.hooks_dir.iterdir())

    @staticmethod
    def _delete(path: Path) -> None:
        with _permission_guard(path, "delete"):
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()


__all__ = ["ConfirmCallback", "HookInstaller"]
