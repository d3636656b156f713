"""Structural GBK likelihood heuristic.

A coarse signal, independent of the classifier: it looks only at how the
bytes pair up and never consults the GBK code tables.
"""

from __future__ import annotations

from depot_gbk._utils import _as_bytes

# Both bytes of a pair must fall in this inclusive range.
_GBK_LOW = 0xA1
_GBK_HIGH = 0xFE


def is_likely_gbk(byte_str: bytes | bytearray | memoryview) -> bool:
    """Return True if more than 30% of the byte pairs look like GBK characters.

    The buffer is split into non-overlapping pairs starting at index 0; an odd
    trailing byte is ignored.  A pair counts when both of its bytes are in
    0xA1-0xFE.  Empty and single-byte buffers are never GBK.
    """
    data = _as_bytes(byte_str)
    total_pairs = len(data) // 2
    if total_pairs == 0:
        return False
    gbk_like_pairs = sum(
        1
        for first, second in zip(data[0::2], data[1::2])
        if _GBK_LOW <= first <= _GBK_HIGH and _GBK_LOW <= second <= _GBK_HIGH
    )
    # gbk_like_pairs / total_pairs > 0.3, in exact integer arithmetic
    return gbk_like_pairs * 10 > total_pairs * 3
