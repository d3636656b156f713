# tests/test_detector.py
"""Tests for the detection engine and its result type."""

import dataclasses

import pytest

from depot_gbk.detector import DetectionResult, detect, detect_charset_only, is_utf8


def test_is_utf8_valid():
    assert is_utf8(b"") is True
    assert is_utf8(b"Hello") is True
    assert is_utf8("中文".encode()) is True
    assert is_utf8("\U0001f600".encode()) is True


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\xaf",  # overlong
        b"\xed\xa0\x80",  # surrogate
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xe4\xb8",  # truncated
        b"\x80",  # lone continuation byte
        b"\xff\xfe",
    ],
)
def test_is_utf8_invalid(data):
    assert is_utf8(data) is False


def test_is_utf8_gbk():
    assert is_utf8("中文".encode("gbk")) is False


def test_detect_empty():
    result = detect(b"")
    assert result == DetectionResult("utf-8", 0.10, "unknown", True)


def test_detect_ascii():
    result = detect(b"Hello")
    assert result.charset == "ascii"
    assert result.confidence == 1.0
    assert result.language == "english"
    assert result.is_valid_utf8 is True


def test_detect_utf8_chinese():
    result = detect("这是一段中文文本".encode())
    assert result.charset == "utf-8"
    assert result.language == "chinese"
    assert result.is_valid_utf8 is True


def test_detect_gbk(chinese_text):
    result = detect(chinese_text.encode("gbk"))
    assert result.charset in ("gb2312", "gbk", "gb18030")
    assert result.language == "chinese"
    assert result.is_valid_utf8 is False


def test_bom_verdict_and_utf8_validity_disagree():
    result = detect(b"\xff\xfe")
    assert result.charset == "utf-16-le"
    assert result.is_valid_utf8 is False


def test_utf8_validity_checks_whole_buffer():
    # The classifier only sees the ASCII prefix; the invalid tail still counts
    data = b"Hello world" + "中文".encode("gbk")
    result = detect(data, max_bytes=5)
    assert result.charset == "ascii"
    assert result.is_valid_utf8 is False


def test_truncation_inside_utf8_sequence():
    data = "中文".encode() * 1000
    result = detect(data, max_bytes=4)
    assert result.charset == "utf-8"
    assert result.is_valid_utf8 is True


def test_fallback_verdict():
    result = detect(b"\xa0")
    assert result == DetectionResult("windows-1252", 0.10, "unknown", False)


@pytest.mark.parametrize("max_bytes", [0, -1, True, 1.5, "10", None])
def test_invalid_max_bytes(max_bytes):
    with pytest.raises(ValueError, match="max_bytes must be a positive integer"):
        detect(b"Hello", max_bytes=max_bytes)


def test_accepts_bytearray_and_memoryview():
    data = "中文".encode()
    assert detect(bytearray(data)) == detect(data)
    assert detect(memoryview(data)) == detect(data)


def test_detect_charset_only(german_text):
    assert detect_charset_only(german_text.encode("windows-1252")) == "windows-1252"


def test_result_is_frozen():
    result = detect(b"Hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.charset = "utf-8"  # type: ignore[misc]


def test_result_to_dict():
    result = DetectionResult("gbk", 0.5, "chinese", False)
    assert result.to_dict() == {
        "charset": "gbk",
        "confidence": 0.5,
        "language": "chinese",
        "is_valid_utf8": False,
    }


def test_detect_is_deterministic(german_text):
    data = german_text.encode("windows-1252")
    assert detect(data) == detect(data)


def test_detect_logs_verdict(caplog):
    with caplog.at_level("DEBUG", logger="depot_gbk"):
        detect(b"Hello")
    assert any("detected ascii" in r.getMessage() for r in caplog.records)
