# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Trigger registry shared by workspace configurations and compiled hook scripts.

A workspace configuration receives a :class:`TriggerRegistry` and registers
actions against git hook names. Installation only needs the pending hook names;
a compiled hook script calls :func:`run_hook`, which loads the configuration
into a fresh registry and triggers the actions for its own hook name.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import overload

from .config_loader import load_config
from .constants import HOOK_FAILURE_EXIT_CODE, TOOL_ERROR_EXIT_CODE
from .errors import HooksmithError
from .logging import fail

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HookInvocation:
    """Describe one git hook execution as seen by registered actions."""

    hook: str
    args: tuple[str, ...] = ()
    stdin: str | None = None
    env: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


Action = Callable[[HookInvocation], object]


class HookActionFailed(RuntimeError):
    """Raised when a registered action fails while a hook is triggered."""

    def __init__(self, hook: str, action: str, detail: str) -> None:
        """Initialise the error with the failing hook and action.

        Args:
            hook: Hook name being triggered.
            action: Display name of the action that failed.
            detail: Description of the failure.
        """

        super().__init__(f"{hook}: action '{action}' failed: {detail}")
        self.hook = hook
        self.action = action
        self.detail = detail


def _action_name(action: Action) -> str:
    return getattr(action, "__qualname__", None) or getattr(action, "__name__", None) or repr(action)


class TriggerRegistry:
    """Map hook names to the ordered actions registered for them."""

    def __init__(self, *, ignore: bool = False) -> None:
        """Create an empty registry.

        Args:
            ignore: Hint for configurations that the registry is being loaded
                only to validate it, so side effects should be skipped.
        """

        self.ignore = ignore
        self._actions: dict[str, list[Action]] = {}

    @overload
    def register(self, hook_name: str, action: Action) -> Action: ...

    @overload
    def register(self, hook_name: str, action: None = ...) -> Callable[[Action], Action]: ...

    def register(self, hook_name: str, action: Action | None = None) -> Action | Callable[[Action], Action]:
        """Append ``action`` to the actions triggered for ``hook_name``.

        When ``action`` is omitted a decorator is returned so configurations
        can write ``@triggers.register("pre-commit")``.

        Args:
            hook_name: Git hook name; validity is not checked here.
            action: Callable receiving a :class:`HookInvocation`.

        Returns:
            Action | Callable[[Action], Action]: The registered action, or a
            decorator registering the decorated callable.
        """

        if action is None:

            def decorator(func: Action) -> Action:
                return self.register(hook_name, func)

            return decorator
        self._actions.setdefault(hook_name, []).append(action)
        LOGGER.debug("registered %s for %s", _action_name(action), hook_name)
        return action

    def register_command(
        self,
        hook_name: str,
        command: str | Sequence[str],
        *,
        cwd: Path | None = None,
    ) -> Action:
        """Register an action that runs ``command`` and fails on a non-zero exit.

        A string command runs through the shell. A sequence command receives
        the git-supplied hook arguments appended to it. Text git pipes to the
        hook is forwarded on the command's stdin.

        Args:
            hook_name: Git hook name the command runs for.
            command: Shell string or argv sequence.
            cwd: Optional working directory for the command.

        Returns:
            Action: The registered action.
        """

        shell = isinstance(command, str)
        label = command if isinstance(command, str) else " ".join(command)

        def run_command(invocation: HookInvocation) -> None:
            argv: str | list[str] = command if isinstance(command, str) else [*command, *invocation.args]
            completed = subprocess.run(  # noqa: S603 - commands come from the workspace configuration
                argv,
                shell=shell,
                cwd=cwd,
                input=invocation.stdin,
                text=True,
                env=dict(invocation.env) or None,
                check=False,
            )
            if completed.returncode != 0:
                raise HookActionFailed(invocation.hook, label, f"exited with status {completed.returncode}")

        run_command.__qualname__ = label
        return self.register(hook_name, run_command)

    def actions(self, hook_name: str) -> tuple[Action, ...]:
        """Return the actions registered for ``hook_name`` in registration order."""

        return tuple(self._actions.get(hook_name, ()))

    def pending_hooks(self) -> tuple[str, ...]:
        """Return hook names with at least one action, in first-registration order."""

        return tuple(name for name, actions in self._actions.items() if actions)

    def trigger(
        self,
        hook_name: str,
        *args: str,
        stdin: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Run every action registered for ``hook_name`` in order, stopping at the first failure.

        Args:
            hook_name: Git hook being executed.
            *args: Arguments git passed to the hook script.
            stdin: Text git piped to the hook, when any.
            env: Environment snapshot for the actions; defaults to ``os.environ``.

        Raises:
            HookActionFailed: Raised for the first action that raises or returns
                ``False``. Other return values, including integers, count as success.
        """

        invocation = HookInvocation(
            hook=hook_name,
            args=tuple(args),
            stdin=stdin,
            env=MappingProxyType(dict(os.environ if env is None else env)),
        )
        for action in self.actions(hook_name):
            name = _action_name(action)
            LOGGER.debug("triggering %s for %s", name, hook_name)
            try:
                outcome = action(invocation)
            except HookActionFailed:
                raise
            except Exception as exc:
                raise HookActionFailed(hook_name, name, f"{type(exc).__name__}: {exc}") from exc
            if outcome is False:
                raise HookActionFailed(hook_name, name, "returned False")


def run_hook(
    hook_name: str,
    config_path: str | Path,
    args: Sequence[str] = (),
    *,
    stdin: str | None = None,
    use_emoji: bool = True,
) -> int:
    """Load the workspace configuration and trigger ``hook_name``.

    This is the entry point every compiled hook script calls.

    Args:
        hook_name: Hook name baked into the compiled script.
        config_path: Absolute path of the workspace configuration.
        args: Arguments git passed to the hook script.
        stdin: Text git piped to the hook, when any.
        use_emoji: Whether failure messages may include emoji.

    Returns:
        int: ``0`` on success, the hook failure status when an action failed,
        or the tool error status when the configuration could not be loaded.
    """

    registry = TriggerRegistry()
    try:
        load_config(Path(config_path), registry)
    except HooksmithError as exc:
        fail(str(exc), use_emoji=use_emoji)
        return TOOL_ERROR_EXIT_CODE
    try:
        registry.trigger(hook_name, *args, stdin=stdin)
    except HookActionFailed as exc:
        fail(str(exc), use_emoji=use_emoji)
        return HOOK_FAILURE_EXIT_CODE
    return 0


__all__ = [
    "Action",
    "HookActionFailed",
    "HookInvocation",
    "TriggerRegistry",
    "run_hook",
]
