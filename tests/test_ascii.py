# tests/test_ascii.py
from depot_gbk.classifier import Classification
from depot_gbk.classifier.ascii import (
    CONTROL_ASCII_CONFIDENCE,
    detect_ascii,
    detect_seven_bit,
)


def test_pure_ascii():
    result = detect_ascii(b"Hello, world!\r\n\tIndented line")
    assert result == Classification("ascii", 1.0, None)


def test_empty_is_not_ascii():
    assert detect_ascii(b"") is None


def test_high_byte_rejected():
    assert detect_ascii(b"caf\xe9") is None


def test_control_byte_rejected_by_printable_stage():
    assert detect_ascii(b"Hello\x00world") is None


def test_seven_bit_with_controls():
    result = detect_seven_bit(b"Hello\x00\x1bworld")
    assert result == Classification("ascii", CONTROL_ASCII_CONFIDENCE, None)
    assert result.confidence == 0.60


def test_seven_bit_rejects_high_bytes():
    assert detect_seven_bit(b"Hello\x00\x80") is None


def test_seven_bit_empty():
    assert detect_seven_bit(b"") is None
