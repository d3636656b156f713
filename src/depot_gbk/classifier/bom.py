"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from depot_gbk.classifier import Classification

# The UTF-32-LE mark begins with the UTF-16-LE one, so the four-byte marks
# are tried on their own before the shorter ones.
_FOUR_BYTE_MARKS: dict[bytes, str] = {
    b"\x00\x00\xfe\xff": "utf-32-be",
    b"\xff\xfe\x00\x00": "utf-32-le",
}
_SHORT_MARKS: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xfe\xff", "utf-16-be"),
    (b"\xff\xfe", "utf-16-le"),
)


def _charset_from_mark(data: bytes) -> str | None:
    charset = _FOUR_BYTE_MARKS.get(data[:4])
    # UTF-32 text is whole 4-byte units; anything else is UTF-16 whose first
    # character happens to be U+0000.
    if charset is not None and len(data) % 4 == 0:
        return charset
    for mark, short_charset in _SHORT_MARKS:
        if data.startswith(mark):
            return short_charset
    return None


def detect_bom(data: bytes) -> Classification | None:
    """Return a certain verdict when *data* opens with a byte order mark.

    :param data: The raw byte data to examine.
    :returns: A :class:`Classification` at confidence 1.0, or ``None``.
    """
    charset = _charset_from_mark(data)
    if charset is None:
        return None
    return Classification(charset=charset, confidence=1.0, language=None)
