"""Stage 1: UTF-8 structural validation."""

from __future__ import annotations

from depot_gbk.classifier import Classification


def _lead_table() -> dict[int, tuple[int, int, int]]:
    """Map each legal lead byte to ``(length, second_low, second_high)``.

    The narrowed second-byte bounds exclude overlong forms (after 0xE0 and
    0xF0), UTF-16 surrogates (after 0xED) and code points above U+10FFFF
    (after 0xF4).  0xC0, 0xC1 and 0xF5-0xFF never start a sequence.
    """
    table = dict.fromkeys(range(0xC2, 0xE0), (2, 0x80, 0xBF))
    table.update(dict.fromkeys(range(0xE0, 0xF0), (3, 0x80, 0xBF)))
    table.update(dict.fromkeys(range(0xF0, 0xF5), (4, 0x80, 0xBF)))
    table[0xE0] = (3, 0xA0, 0xBF)
    table[0xED] = (3, 0x80, 0x9F)
    table[0xF0] = (4, 0x90, 0xBF)
    table[0xF4] = (4, 0x80, 0x8F)
    return table


_LEADS = _lead_table()

# Share of multi-byte bytes at which the confidence reaches its ceiling.
_FULL_RATIO = 1 / 6


def detect_utf8(data: bytes, *, truncated: bool = False) -> Classification | None:
    """Return a UTF-8 verdict when *data* is well-formed and not pure ASCII.

    :param data: The raw byte data to examine.
    :param truncated: ``True`` when *data* was cut from a longer buffer, in
        which case a final sequence may stop short, though the bytes it does
        have must still be valid.
    :returns: A :class:`Classification` for UTF-8, or ``None``.
    """
    length = len(data)
    sequences = 0
    multibyte_bytes = 0
    i = 0
    while i < length:
        if data[i] < 0x80:
            i += 1
            continue
        lead = _LEADS.get(data[i])
        if lead is None:
            return None
        seq_len, second_low, second_high = lead
        end = i + seq_len
        if end > length:
            if not truncated:
                return None
            end = length
        tail = data[i + 1 : end]
        if tail and not second_low <= tail[0] <= second_high:
            return None
        if any(not 0x80 <= b <= 0xBF for b in tail[1:]):
            return None
        sequences += 1
        multibyte_bytes += end - i
        i = end

    # Pure ASCII (or empty) is left to the ASCII stages.
    if not sequences:
        return None

    # Even a little valid multi-byte UTF-8 is strong evidence.
    share = min(multibyte_bytes / length / _FULL_RATIO, 1.0)
    return Classification(
        charset="utf-8", confidence=min(0.99, 0.80 + 0.19 * share), language=None
    )
