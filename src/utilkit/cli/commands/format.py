# topmark:header:start
#
#   project      : UtilKit
#   file         : format.py
#   file_relpath : src/utilkit/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `format` command.

Formats a single value and prints the result. Defaults for the separator,
currency, locale and file-size precision come from the ``[format]`` section of
the active configuration; explicit options win.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from babel.core import UnknownLocaleError

from utilkit.cli.cli_types import EnumChoiceParam
from utilkit.cli.cmd_common import get_config, get_console
from utilkit.cli.errors import UtilkitUsageError
from utilkit.config.logging import get_logger
from utilkit.core.enum_mixins import KeyedStrEnum
from utilkit.dates import format_date, parse_iso_datetime
from utilkit.files import format_file_size
from utilkit.formatting import (
    escape_html,
    format_credit_card,
    format_currency,
    format_decimal,
    format_number,
    format_percentage,
    format_phone,
    mask,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    unescape_html,
)
from utilkit.formatting.patterns import DEFAULT_PHONE_TEMPLATE

if TYPE_CHECKING:
    from datetime import datetime

    from utilkit.cli.console import ClickConsole
    from utilkit.config.logging import UtilkitLogger
    from utilkit.config.model import Config

logger: UtilkitLogger = get_logger(__name__)

DEFAULT_DECIMALS: int = 2


class FormatKind(KeyedStrEnum):
    """Kinds of formatting offered by ``utilkit format``."""

    NUMBER = ("number", "Thousands-separated number")
    CURRENCY = ("currency", "Locale-aware currency amount")
    PERCENT = ("percent", "Ratio as a percentage", ("percentage",))
    DECIMAL = ("decimal", "Fixed decimal places")
    FILE_SIZE = ("file-size", "Byte count in binary units", ("size",))
    DATE = ("date", "ISO 8601 date rendered with a token pattern")
    PHONE = ("phone", "Phone number template")
    CREDIT_CARD = ("credit-card", "Card number in groups of four", ("card",))
    MASK = ("mask", "Masked sensitive text")
    SLUG = ("slug", "URL slug", ("slugify",))
    TITLE = ("title", "Title Case")
    CAMEL = ("camel", "camelCase")
    SNAKE = ("snake", "snake_case")
    KEBAB = ("kebab", "kebab-case")
    ESCAPE_HTML = ("escape-html", "HTML-escaped text")
    UNESCAPE_HTML = ("unescape-html", "HTML-unescaped text")


NUMERIC_KINDS: frozenset[FormatKind] = frozenset(
    {
        FormatKind.NUMBER,
        FormatKind.CURRENCY,
        FormatKind.PERCENT,
        FormatKind.DECIMAL,
        FormatKind.FILE_SIZE,
    }
)


def parse_number(value: str) -> float:
    """Parse a CLI value as ``int`` when integral, ``float`` otherwise.

    Raises:
        UtilkitUsageError: If ``value`` is not a number.
    """
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError as exc:
        raise UtilkitUsageError(f"'{value}' is not a number") from exc


def render(
    kind: FormatKind,
    value: str,
    config: Config,
    *,
    decimals: int | None,
    separator: str | None,
    currency: str | None,
    locale: str | None,
    template: str | None,
    pattern: str | None,
    visible_start: int,
    visible_end: int,
    mask_char: str,
) -> str:
    """Return ``value`` formatted as ``kind``.

    Raises:
        UtilkitUsageError: If VALUE is not a number for a numeric kind, not an
            ISO 8601 date for ``date``, or the locale/currency is unknown.
    """
    if kind in NUMERIC_KINDS:
        number: float = parse_number(value)
        if kind is FormatKind.NUMBER:
            return format_number(number, separator if separator is not None else config.separator)
        if kind is FormatKind.CURRENCY:
            try:
                return format_currency(number, currency or config.currency, locale or config.locale)
            except (UnknownLocaleError, ValueError) as exc:
                raise UtilkitUsageError(f"Cannot format currency: {exc}") from exc
        if kind is FormatKind.PERCENT:
            return format_percentage(number, decimals if decimals is not None else 0)
        if kind is FormatKind.DECIMAL:
            return format_decimal(number, decimals if decimals is not None else DEFAULT_DECIMALS)
        return format_file_size(
            number, decimals if decimals is not None else config.file_size_decimals
        )

    if kind is FormatKind.DATE:
        try:
            parsed: datetime = parse_iso_datetime(value)
        except ValueError as exc:
            raise UtilkitUsageError(f"'{value}' is not an ISO 8601 date") from exc
        return format_date(parsed, pattern if pattern is not None else config.date_format)

    if kind is FormatKind.PHONE:
        return format_phone(value, template or DEFAULT_PHONE_TEMPLATE)
    if kind is FormatKind.CREDIT_CARD:
        return format_credit_card(value, separator if separator is not None else " ")
    if kind is FormatKind.MASK:
        return mask(value, visible_start, visible_end, mask_char)

    text_formatters = {
        FormatKind.SLUG: slugify,
        FormatKind.TITLE: to_title_case,
        FormatKind.CAMEL: to_camel_case,
        FormatKind.SNAKE: to_snake_case,
        FormatKind.KEBAB: to_kebab_case,
        FormatKind.ESCAPE_HTML: escape_html,
        FormatKind.UNESCAPE_HTML: unescape_html,
    }
    return text_formatters[kind](value)


@click.command(
    name="format",
    help=(
        "Format VALUE as KIND and print the result. "
        f"KIND is one of: {', '.join(k.value for k in FormatKind)}."
    ),
)
@click.argument("kind", type=EnumChoiceParam(FormatKind), metavar="KIND")
@click.argument("value")
@click.option(
    "--decimals",
    type=click.IntRange(min=0),
    default=None,
    help="Decimal places (percent: 0, decimal: 2, file-size: from config).",
)
@click.option(
    "--separator",
    default=None,
    help="Group separator (number: from config, credit-card: a space).",
)
@click.option("--currency", default=None, help="ISO 4217 currency code (default: from config).")
@click.option(
    "--locale",
    default=None,
    help="Locale such as en_US or de-DE (default: from config).",
)
@click.option("--template", default=None, help="Phone template with X placeholders.")
@click.option(
    "--pattern",
    default=None,
    help="Date token pattern such as YYYY-MM-DD HH:mm (default: from config).",
)
@click.option("--visible-start", type=click.IntRange(min=0), default=4, show_default=True)
@click.option("--visible-end", type=click.IntRange(min=0), default=4, show_default=True)
@click.option("--mask-char", default="*", show_default=True)
@click.pass_context
def format_command(
    ctx: click.Context,
    kind: FormatKind,
    value: str,
    decimals: int | None,
    separator: str | None,
    currency: str | None,
    locale: str | None,
    template: str | None,
    pattern: str | None,
    visible_start: int,
    visible_end: int,
    mask_char: str,
) -> None:
    """Format a value and print it."""
    console: ClickConsole = get_console(ctx)
    result: str = render(
        kind,
        value,
        get_config(ctx),
        decimals=decimals,
        separator=separator,
        currency=currency,
        locale=locale,
        template=template,
        pattern=pattern,
        visible_start=visible_start,
        visible_end=visible_end,
        mask_char=mask_char,
    )
    logger.debug("format %s: %r -> %r", kind.value, value, result)
    console.print(result)
