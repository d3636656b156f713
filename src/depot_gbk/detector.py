"""Encoding detection engine.

Combines the statistical classifier with an exact UTF-8 validity check.  The
two answer different questions, so a result may name a legacy charset while
also being valid UTF-8, or the reverse.
"""

from __future__ import annotations

import dataclasses
import logging

from depot_gbk._utils import DEFAULT_MAX_BYTES, _as_bytes, _validate_max_bytes
from depot_gbk.classifier.orchestrator import classify
from depot_gbk.language import UNKNOWN_LANGUAGE

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of :func:`detect` for one byte buffer.

    ``charset``, ``confidence`` and ``language`` come from the classifier.
    ``is_valid_utf8`` is the result of a strict UTF-8 decode of the whole
    buffer and never depends on the classifier's verdict.
    """

    charset: str
    confidence: float
    language: str
    is_valid_utf8: bool

    def to_dict(self) -> dict[str, str | float | bool]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'charset'``, ``'confidence'``, ``'language'``
            and ``'is_valid_utf8'`` keys.
        """
        return dataclasses.asdict(self)


def is_utf8(byte_str: bytes | bytearray | memoryview) -> bool:
    """Return True if *byte_str* is well-formed UTF-8.

    This is a strict decode: overlong forms, surrogates, code points above
    U+10FFFF and truncated sequences all make it fail.  The empty buffer is
    valid.
    """
    try:
        _as_bytes(byte_str).decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def detect(
    byte_str: bytes | bytearray | memoryview,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> DetectionResult:
    """Detect the encoding of *byte_str*.

    Only the first *max_bytes* bytes are classified, but UTF-8 validity is
    always checked over the whole buffer.

    :param byte_str: The bytes to examine.  May be empty.
    :param max_bytes: Maximum number of bytes handed to the classifier.
    :returns: A new :class:`DetectionResult`.
    :raises ValueError: If *max_bytes* is not a positive integer.
    """
    _validate_max_bytes(max_bytes)
    data = _as_bytes(byte_str)
    verdict = classify(data, max_bytes=max_bytes)
    valid_utf8 = is_utf8(data)
    logger.debug(
        "detected %s (confidence %.4f, language %s, valid utf-8 %s) in %d bytes",
        verdict.charset,
        verdict.confidence,
        verdict.language,
        valid_utf8,
        len(data),
    )
    return DetectionResult(
        charset=verdict.charset,
        confidence=verdict.confidence,
        language=verdict.language or UNKNOWN_LANGUAGE,
        is_valid_utf8=valid_utf8,
    )


def detect_charset_only(
    byte_str: bytes | bytearray | memoryview,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> str:
    """Return only the charset name that :func:`detect` would report."""
    return detect(byte_str, max_bytes=max_bytes).charset
