# topmark:header:start
#
#   project      : UtilKit
#   file         : cli_types.py
#   file_relpath : src/utilkit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the UtilKit CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar, cast

import click
from click.shell_completion import CompletionItem

from utilkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    `KeyedStrEnum` subclasses also accept their member names and aliases.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (or an existing member) to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        if issubclass(self.enum_cls, KeyedStrEnum):
            member: Any = self.enum_cls.parse(str(value))
            if member is not None:
                return cast("E", member)
        else:
            # Case-insensitive lookup by the enum's string value
            lookup: dict[str, E] = {
                cast("str", getattr(choice, "value", str(choice))).lower(): choice
                for choice in cast("Iterable[E]", self.enum_cls)
            }
            key: str = str(value).lower()
            if key in lookup:
                return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices in help output, e.g. ``[text|json]``."""
        return f"[{'|'.join(self.choices)}]"

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the choices that start with ``incomplete``."""
        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]
