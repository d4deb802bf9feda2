# topmark:header:start
#
#   project      : UtilKit
#   file         : names.py
#   file_relpath : src/utilkit/files/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-name helpers: extensions and MIME-type checks by name."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from utilkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Collection
    from os import PathLike

    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)


def get_file_extension(filename: str) -> str:
    """Return the lowercased text after the last ``.``, or ``""`` if there is none.

    Returns:
        str: ``get_file_extension("Report.PDF") == "pdf"``; ``get_file_extension("README") == ""``.
    """
    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


def get_file_name_without_extension(filename: str) -> str:
    """Return ``filename`` up to (excluding) its last ``.``; unchanged without one.

    Returns:
        str: ``get_file_name_without_extension("archive.tar.gz") == "archive.tar"``.
    """
    stem, dot, _ = filename.rpartition(".")
    return stem if dot else filename


def validate_file_type(file: str | PathLike[str], allowed_types: Collection[str]) -> bool:
    """Return True if the MIME type guessed from ``file``'s name is in ``allowed_types``.

    The guess uses the `mimetypes` registry and only looks at the name; the file
    does not need to exist. Names without a known type are rejected.
    """
    mime_type, _ = mimetypes.guess_type(Path(file).name)
    logger.trace("%s: guessed MIME type %s", file, mime_type)
    return mime_type is not None and mime_type in allowed_types
