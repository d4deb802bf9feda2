# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit package.

UtilKit is a collection of small, stateless helpers for validation, formatting,
sequences, dates, random values and file metadata. Every helper is re-exported
here; the helper groups are also reachable as namespaces::

    from utilkit import slugify, is_valid_credit_card
    from utilkit import ArrayUtils

    ArrayUtils.chunk([1, 2, 3, 4, 5], 2)  # [[1, 2], [3, 4], [5]]
"""

from __future__ import annotations

from utilkit import arrays as ArrayUtils
from utilkit import dates as DateUtils
from utilkit import files as FileUtils
from utilkit import formatting as FormatUtils
from utilkit import randomness as RandomUtils
from utilkit import validation as ValidationUtils
from utilkit.arrays import (
    SortOrder,
    average,
    chunk,
    count_occurrences,
    difference,
    find_all_by,
    find_by,
    find_index_by,
    flatten,
    group_by,
    intersection,
    is_equal,
    max_value,
    min_value,
    paginate,
    rotate,
    sample,
    search,
    shuffle_array,
    sort_by,
    sum_values,
    union,
    unique,
    unique_by,
    value_range,
)
from utilkit.core import (
    ConfigurationError,
    NumericRange,
    Page,
    UtilkitError,
    ValidationResult,
    by_key,
)
from utilkit.dates import (
    add_days,
    add_months,
    add_years,
    diff_in_days,
    diff_in_hours,
    diff_in_minutes,
    end_of_day,
    end_of_month,
    format_date,
    get_relative_time,
    is_between,
    is_leap_year,
    is_today,
    is_tomorrow,
    is_yesterday,
    parse_iso_datetime,
    start_of_day,
    start_of_month,
)
from utilkit.files import (
    FileType,
    format_file_size,
    get_file_extension,
    get_file_name_without_extension,
    get_file_type,
    is_document,
    is_image,
    is_video,
    validate_file_size,
    validate_file_type,
)
from utilkit.formatting import (
    PadDirection,
    capitalize,
    escape_html,
    format_credit_card,
    format_currency,
    format_decimal,
    format_number,
    format_percentage,
    format_phone,
    mask,
    pad,
    remove_accents,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    truncate,
    unescape_html,
)
from utilkit.randomness import (
    RandomSource,
    random_alpha,
    random_alphanumeric,
    random_boolean,
    random_date,
    random_element,
    random_elements,
    random_float,
    random_hex_color,
    random_int,
    random_ip_address,
    random_mac_address,
    random_number,
    random_numeric,
    random_password,
    random_string,
    random_uuid,
    seed_default_source,
    shuffle,
)
from utilkit.validation import (
    PasswordPolicy,
    is_alpha,
    is_alphanumeric,
    is_empty,
    is_in_range,
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
    matches_pattern,
    validate_password,
)

__all__ = [
    # Namespaces
    "ArrayUtils",
    "DateUtils",
    "FileUtils",
    "FormatUtils",
    "RandomUtils",
    "ValidationUtils",
    # Core
    "ConfigurationError",
    "NumericRange",
    "Page",
    "UtilkitError",
    "ValidationResult",
    "by_key",
    # Arrays
    "SortOrder",
    "average",
    "chunk",
    "count_occurrences",
    "difference",
    "find_all_by",
    "find_by",
    "find_index_by",
    "flatten",
    "group_by",
    "intersection",
    "is_equal",
    "max_value",
    "min_value",
    "paginate",
    "rotate",
    "sample",
    "search",
    "shuffle_array",
    "sort_by",
    "sum_values",
    "union",
    "unique",
    "unique_by",
    "value_range",
    # Dates
    "add_days",
    "add_months",
    "add_years",
    "diff_in_days",
    "diff_in_hours",
    "diff_in_minutes",
    "end_of_day",
    "end_of_month",
    "format_date",
    "get_relative_time",
    "is_between",
    "is_leap_year",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "parse_iso_datetime",
    "start_of_day",
    "start_of_month",
    # Files
    "FileType",
    "format_file_size",
    "get_file_extension",
    "get_file_name_without_extension",
    "get_file_type",
    "is_document",
    "is_image",
    "is_video",
    "validate_file_size",
    "validate_file_type",
    # Formatting
    "PadDirection",
    "capitalize",
    "escape_html",
    "format_credit_card",
    "format_currency",
    "format_decimal",
    "format_number",
    "format_percentage",
    "format_phone",
    "mask",
    "pad",
    "remove_accents",
    "slugify",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    "truncate",
    "unescape_html",
    # Random
    "RandomSource",
    "random_alpha",
    "random_alphanumeric",
    "random_boolean",
    "random_date",
    "random_element",
    "random_elements",
    "random_float",
    "random_hex_color",
    "random_int",
    "random_ip_address",
    "random_mac_address",
    "random_number",
    "random_numeric",
    "random_password",
    "random_string",
    "random_uuid",
    "seed_default_source",
    "shuffle",
    # Validation
    "PasswordPolicy",
    "is_alpha",
    "is_alphanumeric",
    "is_empty",
    "is_in_range",
    "is_numeric",
    "is_valid_credit_card",
    "is_valid_date",
    "is_valid_email",
    "is_valid_hex_color",
    "is_valid_ipv4",
    "is_valid_json",
    "is_valid_phone",
    "is_valid_url",
    "is_valid_username",
    "matches_pattern",
    "validate_password",
]
