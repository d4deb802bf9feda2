# topmark:header:start
#
#   project      : UtilKit
#   file         : validate.py
#   file_relpath : src/utilkit/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `validate` command.

Checks a single value and reports the outcome through the exit status
(``0`` valid, ``1`` invalid), so the command works as a shell predicate::

    utilkit -q validate email "$ADDRESS" && echo ok

Passwords are checked against the ``[password]`` policy of the active configuration.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

import click

from utilkit.cli.cli_types import EnumChoiceParam
from utilkit.cli.cmd_common import get_config, get_console, get_effective_verbosity
from utilkit.cli.exit_codes import ExitCode
from utilkit.cli.options import output_format_option
from utilkit.config.logging import get_logger
from utilkit.core.enum_mixins import KeyedStrEnum
from utilkit.core.formats import OutputFormat, is_machine_format
from utilkit.core.results import ValidationResult
from utilkit.validation import (
    is_numeric,
    is_valid_credit_card,
    is_valid_date,
    is_valid_email,
    is_valid_hex_color,
    is_valid_ipv4,
    is_valid_json,
    is_valid_phone,
    is_valid_url,
    is_valid_username,
    validate_password,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from utilkit.cli.console import ClickConsole
    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)


class ValidateKind(KeyedStrEnum):
    """Kinds of value understood by ``utilkit validate``."""

    EMAIL = ("email", "e-mail address", ("mail",))
    URL = ("url", "URL")
    PHONE = ("phone", "phone number")
    CREDIT_CARD = ("credit-card", "credit card number", ("card",))
    IPV4 = ("ipv4", "IPv4 address", ("ip",))
    HEX_COLOR = ("hex-color", "hex color", ("color",))
    USERNAME = ("username", "username")
    JSON = ("json", "JSON document")
    DATE = ("date", "ISO 8601 date")
    NUMERIC = ("numeric", "number", ("number",))
    PASSWORD = ("password", "password")


PREDICATES: Final[dict[ValidateKind, Callable[[str], bool]]] = {
    ValidateKind.EMAIL: is_valid_email,
    ValidateKind.URL: is_valid_url,
    ValidateKind.PHONE: is_valid_phone,
    ValidateKind.CREDIT_CARD: is_valid_credit_card,
    ValidateKind.IPV4: is_valid_ipv4,
    ValidateKind.HEX_COLOR: is_valid_hex_color,
    ValidateKind.USERNAME: is_valid_username,
    ValidateKind.JSON: is_valid_json,
    ValidateKind.DATE: is_valid_date,
    ValidateKind.NUMERIC: is_numeric,
}


def check_value(ctx: click.Context, kind: ValidateKind, value: str) -> ValidationResult:
    """Validate ``value`` as ``kind`` and return a structured result."""
    if kind is ValidateKind.PASSWORD:
        return validate_password(value, get_config(ctx).password_policy)
    if PREDICATES[kind](value):
        return ValidationResult()
    return ValidationResult(errors=(f"Not a valid {kind.label}",))


@click.command(
    name="validate",
    help=(
        "Validate VALUE as KIND. Exits with 0 when the value is valid and 1 otherwise. "
        f"KIND is one of: {', '.join(k.value for k in ValidateKind)}."
    ),
)
@click.argument("kind", type=EnumChoiceParam(ValidateKind), metavar="KIND")
@click.argument("value")
@output_format_option
@click.pass_context
def validate_command(
    ctx: click.Context,
    kind: ValidateKind,
    value: str,
    output_format: OutputFormat,
) -> None:
    """Validate a value and exit with the outcome.

    Args:
        ctx (click.Context): The Click context.
        kind (ValidateKind): What VALUE is supposed to be.
        value (str): The value to check.
        output_format (OutputFormat): Plain text or JSON.
    """
    console: ClickConsole = get_console(ctx)
    result: ValidationResult = check_value(ctx, kind, value)
    logger.debug("validate %s: %s", kind.value, result)

    if is_machine_format(output_format):
        console.print(json.dumps({"kind": kind.value, "value": value, **result.to_dict()}))
    elif get_effective_verbosity(ctx) >= 0:
        if result.is_valid:
            console.print(console.styled("valid", fg="green", bold=True))
        else:
            console.print(console.styled("invalid", fg="red", bold=True))
            for error in result.errors:
                console.print(f"  - {error}")

    if not result.is_valid:
        ctx.exit(ExitCode.FAILURE)
