"""
Linux sysfs attribute parsers.

Readers for the single-value pseudo-files exposed under /sys/block and
/sys/class/block.
"""

from __future__ import annotations

from pathlib import Path

from blkls.core.errors import AttributeReadError
from blkls.core.models import AttributeFailure
from blkls.platform.base import FileAccess, LocalFileAccess

_default_access = LocalFileAccess()

MAX_UNSIGNED = 2**64 - 1


def parse_unsigned(value: str) -> int:
    """Parse an unsigned decimal integer, ignoring surrounding whitespace.

    Raises:
        ValueError: The value is empty, signed, not made of ASCII digits,
            or does not fit in 64 bits.
    """
    text = value.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not an unsigned integer: {value!r}")
    number = int(text)
    if number > MAX_UNSIGNED:
        raise ValueError(f"out of range for a 64-bit count: {text}")
    return number


def read_attribute(path: Path, fs: FileAccess | None = None) -> str:
    """Read the raw content of a sysfs attribute.

    Raises:
        AttributeReadError: ``OPEN`` when the file cannot be opened,
            ``READ`` when its contents cannot be read.
    """
    fs = fs or _default_access
    try:
        handle = fs.open_text(path)
    except OSError as e:
        raise AttributeReadError(str(path), AttributeFailure.OPEN, e.strerror) from e

    with handle:
        try:
            return handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise AttributeReadError(str(path), AttributeFailure.READ, str(e)) from e


def read_unsigned(path: Path, fs: FileAccess | None = None) -> int:
    """Read an unsigned integer attribute such as ``size`` or ``removable``."""
    content = read_attribute(path, fs)
    try:
        return parse_unsigned(content)
    except ValueError as e:
        raise AttributeReadError(str(path), AttributeFailure.PARSE, str(e)) from e


def read_string(path: Path, fs: FileAccess | None = None) -> str:
    """Read a string attribute such as ``device/model``, trimmed."""
    return read_attribute(path, fs).strip()
