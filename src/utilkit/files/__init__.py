# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/files/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-metadata helpers: MIME categories, sizes and names."""

from __future__ import annotations

from utilkit.files.mime import (
    DOCUMENT_MIME_TYPES,
    IMAGE_MIME_TYPES,
    VIDEO_MIME_TYPES,
    FileType,
    get_file_type,
    is_document,
    is_image,
    is_video,
)
from utilkit.files.names import (
    get_file_extension,
    get_file_name_without_extension,
    validate_file_type,
)
from utilkit.files.size import format_file_size, validate_file_size

__all__ = [
    "DOCUMENT_MIME_TYPES",
    "IMAGE_MIME_TYPES",
    "VIDEO_MIME_TYPES",
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
]
