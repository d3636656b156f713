"""Tests for CJK multi-byte gating in the pipeline."""

from __future__ import annotations

from depot_gbk.classifier.orchestrator import _gate_cjk_candidates, run_pipeline
from depot_gbk.profiles import PROFILES


def _multibyte_names(profiles) -> set[str]:
    return {p.name for p in profiles if p.is_multibyte}


def test_single_byte_candidates_pass_through(ctx):
    gated = _gate_cjk_candidates(b"caf\xe9", PROFILES, ctx)
    assert [p.name for p in gated] == [p.name for p in PROFILES if not p.is_multibyte]


def test_too_few_non_ascii_bytes(ctx):
    # A single high byte can never be CJK text
    assert _multibyte_names(_gate_cjk_candidates(b"caf\xe9", PROFILES, ctx)) == set()


def test_low_lead_byte_diversity_gated(ctx):
    # The same character repeated: valid structure, but only one lead byte
    data = "啊".encode("gb2312") * 10
    gated = _gate_cjk_candidates(data, PROFILES, ctx)
    assert not {"gb2312", "gbk", "gb18030"} & _multibyte_names(gated)


def test_real_chinese_passes(ctx, chinese_text):
    data = chinese_text.encode("gb2312")
    gated = _gate_cjk_candidates(data, PROFILES, ctx)
    assert {"gb2312", "gbk", "gb18030"} <= _multibyte_names(gated)


def test_latin_text_not_detected_as_cjk():
    """Western European text should not be misdetected as a CJK charset."""
    data = "Héllo wörld, tëst dàta wïth äccénts.".encode("windows-1252")
    result = run_pipeline(data)
    assert result[0].charset == "windows-1252"


def test_real_japanese_still_detected():
    data = "これはテストです。日本語のテキストです。".encode("shift_jis")
    result = run_pipeline(data)
    assert result[0].charset == "shift_jis"
