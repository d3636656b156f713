"""Thread-safety integration tests for concurrent detection calls."""

from __future__ import annotations

import threading

from depot_gbk import detect_encoding_detailed

_GB_CHARSETS = frozenset({"gb2312", "gbk", "gb18030"})

# Test data shared across tests.
_JAPANESE = "これはテストです。日本語のテキストです。".encode("shift_jis")
_GERMAN = (
    "Die Größe des Gebäudes überraschte die Besucher. Natürlich können wir das ändern."
).encode("windows-1252")
_CHINESE = (
    "我们在这个问题上有很多不同的看法，但是大家都认为中国的发展很重要。"  # noqa: RUF001
).encode("gbk")

_SAMPLES: list[tuple[bytes, frozenset[str]]] = [
    (_JAPANESE, frozenset({"shift_jis"})),
    (_GERMAN, frozenset({"windows-1252"})),
    (_CHINESE, _GB_CHARSETS),
]


def _run_concurrent_detect(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each detecting *iterations* times.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(data: bytes, expected: frozenset[str]) -> None:
        barrier.wait()
        for _ in range(iterations):
            charset = detect_encoding_detailed(data).charset
            if charset not in expected:
                errors.append(f"Expected one of {sorted(expected)}, got {charset!r}")

    threads = []
    for _ in range(n_workers):
        for data, expected in _SAMPLES:
            t = threading.Thread(target=worker, args=(data, expected))
            threads.append(t)
            t.start()

    for t in threads:
        t.join(timeout=60)

    return errors


def test_concurrent_detect_is_consistent():
    errors = _run_concurrent_detect(n_workers=4, iterations=20)
    assert errors == []


def test_concurrent_results_match_serial():
    serial = {data: detect_encoding_detailed(data) for data, _ in _SAMPLES}
    mismatches: list[bytes] = []

    def worker(data: bytes) -> None:
        if detect_encoding_detailed(data) != serial[data]:
            mismatches.append(data)

    threads = [
        threading.Thread(target=worker, args=(data,))
        for data, _ in _SAMPLES
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)
    assert mismatches == []
