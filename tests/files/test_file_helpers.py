# topmark:header:start
#
#   project      : UtilKit
#   file         : test_file_helpers.py
#   file_relpath : tests/files/test_file_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for file-size formatting, size limits, names and MIME categories."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from tests.conftest import parametrize
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


@parametrize(
    "size, decimals, expected",
    [
        (0, 2, "0 Bytes"),
        (512, 2, "512.00 Bytes"),
        (1024, 2, "1.00 KB"),
        (1536, 0, "2 KB"),
        (1048576, 2, "1.00 MB"),
        (1073741824, 1, "1.0 GB"),
        (1024**5, 2, "1.00 PB"),
        (1024**6, 0, "1024 PB"),
        (0.5, 1, "0.5 Bytes"),
        (-2048, 2, "-2.00 KB"),
    ],
)
def test_format_file_size(size: float, decimals: int, expected: str) -> None:
    """It should pick the largest binary unit and use fixed decimals."""
    assert format_file_size(size, decimals) == expected


def test_format_file_size_non_finite() -> None:
    """Non-finite counts should stay in bytes."""
    assert format_file_size(math.nan) == "nan Bytes"
    assert format_file_size(math.inf) == "inf Bytes"


def test_validate_file_size_with_byte_counts() -> None:
    """The limit itself should be accepted."""
    assert validate_file_size(1024 * 1024, 1)
    assert not validate_file_size(1024 * 1024 + 1, 1)
    assert validate_file_size(0, 0)


def test_validate_file_size_with_paths(tmp_path: Path) -> None:
    """Paths should be measured on disk."""
    small: Path = tmp_path / "small.bin"
    small.write_bytes(b"x" * 2048)

    assert validate_file_size(small, 0.01)
    assert validate_file_size(str(small), 0.002)
    assert not validate_file_size(small, 0.001)


def test_validate_file_size_missing_path(tmp_path: Path) -> None:
    """A path that cannot be stat'ed should raise."""
    with pytest.raises(OSError):
        validate_file_size(tmp_path / "missing.bin", 1)


@parametrize(
    "name, extension, stem",
    [
        ("document.pdf", "pdf", "document"),
        ("Report.PDF", "pdf", "Report"),
        ("archive.tar.gz", "gz", "archive.tar"),
        ("README", "", "README"),
        (".bashrc", "bashrc", ""),
        ("trailing.", "", "trailing"),
    ],
)
def test_extension_helpers(name: str, extension: str, stem: str) -> None:
    """Extensions are taken after the last dot."""
    assert get_file_extension(name) == extension
    assert get_file_name_without_extension(name) == stem


def test_validate_file_type() -> None:
    """The MIME type is guessed from the name only."""
    assert validate_file_type("photo.png", ["image/png", "image/jpeg"])
    assert validate_file_type(Path("docs") / "manual.pdf", {"application/pdf"})
    assert not validate_file_type("photo.png", ["application/pdf"])
    assert not validate_file_type("unknown.zzzz", ["application/octet-stream"])


@parametrize(
    "mime, category",
    [
        ("image/png", FileType.IMAGE),
        ("image/svg+xml", FileType.IMAGE),
        ("video/mp4", FileType.VIDEO),
        ("application/pdf", FileType.DOCUMENT),
        ("text/plain", FileType.UNKNOWN),
    ],
)
def test_get_file_type(mime: str, category: FileType) -> None:
    """Categories should be checked in image, video, document order."""
    assert get_file_type(mime) is category
    assert is_image(mime) is (category is FileType.IMAGE)
    assert is_video(mime) is (category is FileType.VIDEO)
    assert is_document(mime) is (category is FileType.DOCUMENT)


def test_file_type_values() -> None:
    """Members should compare equal to their machine keys."""
    assert get_file_type("image/png") == "image"
    assert str(FileType.UNKNOWN) == "unknown"
