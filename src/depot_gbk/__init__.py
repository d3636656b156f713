"""Character encoding detection with a focus on UTF-8 versus GBK."""

from __future__ import annotations

from depot_gbk._utils import DEFAULT_MAX_BYTES
from depot_gbk.detector import (
    DetectionResult,
    detect,
    detect_charset_only,
    is_utf8,
)
from depot_gbk.gbk import is_likely_gbk

__version__ = "0.1.0"
__all__ = [
    "DetectionResult",
    "detect_charset",
    "detect_encoding_detailed",
    "is_likely_gbk",
    "is_utf8",
]


def detect_encoding_detailed(
    byte_str: bytes | bytearray | memoryview,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> DetectionResult:
    """Detect the encoding of the given byte string.

    :param byte_str: The bytes to examine.  Empty input is allowed.
    :param max_bytes: Maximum number of bytes the classifier examines.
    :returns: A :class:`DetectionResult` with charset, confidence, language
        and UTF-8 validity.
    """
    return detect(byte_str, max_bytes=max_bytes)


def detect_charset(
    byte_str: bytes | bytearray | memoryview,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> str:
    """Return just the charset name for the given byte string."""
    return detect_charset_only(byte_str, max_bytes=max_bytes)
