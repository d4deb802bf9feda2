# topmark:header:start
#
#   project      : UtilKit
#   file         : random_values.py
#   file_relpath : src/utilkit/cli/commands/random_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `random` command.

Prints one or more random values, one per line. Output is reproducible with
``--seed`` (or ``[random].seed`` in the configuration).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.cli.cli_types import EnumChoiceParam
from utilkit.cli.cmd_common import get_config, get_console
from utilkit.core.enum_mixins import KeyedStrEnum
from utilkit.randomness import RandomSource

if TYPE_CHECKING:
    from utilkit.cli.console import ClickConsole

DEFAULT_LENGTH: int = 16


class RandomKind(KeyedStrEnum):
    """Kinds of value produced by ``utilkit random``."""

    UUID = ("uuid", "Version-4 UUID")
    PASSWORD = ("password", "Password over all character classes")
    ALPHANUMERIC = ("alphanumeric", "Lowercase letters and digits", ("alnum",))
    NUMERIC = ("numeric", "Decimal digits", ("digits",))
    HEX_COLOR = ("hex-color", "#RRGGBB color", ("color",))
    IP = ("ip", "IPv4 address", ("ipv4",))
    MAC = ("mac", "MAC address")


def generate(kind: RandomKind, source: RandomSource, length: int) -> str:
    """Draw one value of ``kind`` from ``source``."""
    if kind is RandomKind.UUID:
        return source.uuid()
    if kind is RandomKind.PASSWORD:
        return source.password(length)
    if kind is RandomKind.ALPHANUMERIC:
        return source.alphanumeric(length)
    if kind is RandomKind.NUMERIC:
        return source.numeric(length)
    if kind is RandomKind.HEX_COLOR:
        return source.hex_color()
    if kind is RandomKind.IP:
        return source.ip_address()
    return source.mac_address()


@click.command(
    name="random",
    help=(
        "Print random values of KIND, one per line. "
        f"KIND is one of: {', '.join(k.value for k in RandomKind)}."
    ),
)
@click.argument("kind", type=EnumChoiceParam(RandomKind), metavar="KIND")
@click.option(
    "--length",
    type=click.IntRange(min=0),
    default=DEFAULT_LENGTH,
    show_default=True,
    help="Length for password, alphanumeric and numeric values.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of values to print.",
)
@click.pass_context
def random_command(
    ctx: click.Context,
    kind: RandomKind,
    length: int,
    seed: int | None,
    count: int,
) -> None:
    """Print random values."""
    console: ClickConsole = get_console(ctx)
    source: RandomSource = (
        RandomSource(seed) if seed is not None else get_config(ctx).random_source()
    )
    for _ in range(count):
        console.print(generate(kind, source, length))
