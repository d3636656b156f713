"""Stage 1: Pure ASCII detection."""

from __future__ import annotations

from depot_gbk.classifier import Classification

# Allowed ASCII bytes: tab (0x09), newline (0x0A), carriage return (0x0D),
# and printable ASCII (0x20-0x7E).  bytes.translate deletes these from the
# input; if anything remains, the data is not pure ASCII.
_ALLOWED_ASCII: bytes = bytes([0x09, 0x0A, 0x0D, *range(0x20, 0x7F)])

# Every 7-bit byte, printable or not.
_SEVEN_BIT: bytes = bytes(range(0x80))

#: Confidence when the data is 7-bit but carries control bytes.
CONTROL_ASCII_CONFIDENCE: float = 0.60


def detect_ascii(data: bytes) -> Classification | None:
    """Return an ASCII verdict if all bytes are printable ASCII plus common whitespace.

    :param data: The raw byte data to examine.
    :returns: A :class:`Classification` for ASCII, or ``None``.
    """
    if not data:
        return None
    if data.translate(None, _ALLOWED_ASCII):
        return None  # Non-allowed bytes remain
    return Classification(charset="ascii", confidence=1.0, language=None)


def detect_seven_bit(data: bytes) -> Classification | None:
    """Return a reduced-confidence ASCII verdict for 7-bit data with control bytes."""
    if not data or data.translate(None, _SEVEN_BIT):
        return None
    return Classification(
        charset="ascii", confidence=CONTROL_ASCII_CONFIDENCE, language=None
    )
