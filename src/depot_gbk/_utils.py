"""Internal shared utilities for depot_gbk."""

from __future__ import annotations

#: Default maximum number of bytes the classifier examines.
DEFAULT_MAX_BYTES: int = 200_000


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _as_bytes(byte_str: bytes | bytearray | memoryview) -> bytes:
    """Return *byte_str* as an immutable ``bytes`` object."""
    return byte_str if isinstance(byte_str, bytes) else bytes(byte_str)
