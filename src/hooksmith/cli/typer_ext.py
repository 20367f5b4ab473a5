# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for consistent, sorted CLI help output."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import typer
from click.core import Argument, Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

HelpRecord = tuple[str, str]


class SortedTyperCommand(TyperCommand):
    """Typer command listing its options alphabetically in help output."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Write the ``Arguments`` section in declaration order, then ``Options`` sorted by long name."""

        arguments, options = _help_records(ctx, self.get_params(ctx))
        for title, records in (("Arguments", arguments), ("Options", options)):
            if records:
                with formatter.section(title):
                    formatter.write_dl(records)


def _help_records(ctx: Context, params: Iterable[Parameter]) -> tuple[list[HelpRecord], list[HelpRecord]]:
    arguments: list[HelpRecord] = []
    options: list[tuple[str, HelpRecord]] = []
    for param in params:
        record = param.get_help_record(ctx)
        if record is None:
            continue
        if isinstance(param, Argument):
            arguments.append(record)
        else:
            options.append((_primary_option_name(param), record))
    # stable sort: options sharing a name keep declaration order
    options.sort(key=lambda entry: entry[0])
    return arguments, [record for _, record in options]


class SortedTyperGroup(TyperGroup):
    """Typer group that lists sub-commands alphabetically."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return registered command names sorted alphabetically."""

        return sorted(super().list_commands(ctx))


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application that emits sorted command and option listings by default."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("rich_markup_mode", None)
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator registering commands with sorted option help.

        Args:
            name: Optional explicit command name.
            cls: Command class to instantiate; defaults to :class:`SortedTyperCommand`.
            **kwargs: Additional keyword arguments forwarded to :meth:`typer.Typer.command`.

        Returns:
            Callable[[CommandCallback], CommandCallback]: Registration decorator.
        """

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` configured to emit sorted help listings."""

    return SortedTyper(cls=cls, **kwargs)


def _primary_option_name(param: Parameter) -> str:
    """Return the canonical name used for sorting a Click parameter."""

    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(
        getattr(param, "secondary_opts", ()),
    )
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = ["SortedTyper", "SortedTyperCommand", "SortedTyperGroup", "create_typer"]
