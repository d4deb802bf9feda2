# topmark:header:start
#
#   project      : UtilKit
#   file         : mime.py
#   file_relpath : src/utilkit/files/mime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of MIME types into coarse file categories.

Membership is tested against three fixed lists; MIME types are compared
verbatim (no parameter stripping, no case folding).
"""

from __future__ import annotations

from typing import Final

from utilkit.core.enum_mixins import KeyedStrEnum

IMAGE_MIME_TYPES: Final[tuple[str, ...]] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/bmp",
)

VIDEO_MIME_TYPES: Final[tuple[str, ...]] = (
    "video/mp4",
    "video/webm",
    "video/ogg",
    "video/quicktime",
    "video/x-msvideo",
)

DOCUMENT_MIME_TYPES: Final[tuple[str, ...]] = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)


class FileType(KeyedStrEnum):
    """Coarse file category returned by `get_file_type`."""

    IMAGE = ("image", "Image")
    VIDEO = ("video", "Video")
    DOCUMENT = ("document", "Document")
    UNKNOWN = ("unknown", "Unknown")


def is_image(mime_type: str) -> bool:
    """Return True if ``mime_type`` is a known image type."""
    return mime_type in IMAGE_MIME_TYPES


def is_video(mime_type: str) -> bool:
    """Return True if ``mime_type`` is a known video type."""
    return mime_type in VIDEO_MIME_TYPES


def is_document(mime_type: str) -> bool:
    """Return True if ``mime_type`` is a known office/PDF document type."""
    return mime_type in DOCUMENT_MIME_TYPES


def get_file_type(mime_type: str) -> FileType:
    """Return the first matching category (image, video, document) or ``UNKNOWN``.

    Returns:
        FileType: ``get_file_type("image/png") == "image"``.
    """
    if is_image(mime_type):
        return FileType.IMAGE
    if is_video(mime_type):
        return FileType.VIDEO
    if is_document(mime_type):
        return FileType.DOCUMENT
    return FileType.UNKNOWN
