"""Tests for the built-in charset profile table."""

import codecs

import pytest

from depot_gbk.profiles import (
    PROFILES,
    PROFILES_VERSION,
    SequenceForm,
    byte_span,
)

_BY_NAME = {p.name: p for p in PROFILES}


def test_profiles_version():
    assert PROFILES_VERSION == 2


def test_profile_names_unique():
    assert len(_BY_NAME) == len(PROFILES)


def test_all_codecs_resolve():
    for profile in PROFILES:
        codecs.lookup(profile.python_codec)


def test_gb_family_ordered_narrowest_first():
    gb = [p.name for p in PROFILES if p.family == "gb"]
    assert gb == ["gb2312", "gbk", "gb18030"]


def test_multibyte_profiles_have_a_language():
    for profile in PROFILES:
        if profile.is_multibyte:
            assert profile.language is not None


def test_multibyte_profiles_declare_byte_shapes():
    for profile in PROFILES:
        if not profile.is_multibyte:
            assert profile.sequences == ()
            continue
        assert profile.sequences, profile.name
        for form in profile.sequences:
            assert isinstance(form, SequenceForm)
            assert len(form.positions) >= 2
            # Every shape opens with a non-ASCII byte
            assert form.positions[0]
            assert min(form.positions[0]) >= 0x80
            assert all(allowed for allowed in form.positions)
            assert all(0 <= b <= 0xFF for allowed in form.positions for b in allowed)


def test_family_members_share_byte_shapes():
    for profile in PROFILES:
        for other in PROFILES:
            if profile.family == other.family:
                assert profile.sequences == other.sequences


def test_euc_jp_single_shift_forms():
    lengths = {
        min(form.positions[0]): len(form.positions)
        for form in _BY_NAME["euc-jp"].sequences
    }
    assert lengths[0x8E] == 2
    assert lengths[0x8F] == 3


def test_gb_four_byte_form():
    forms = _BY_NAME["gb18030"].sequences
    assert any(len(form.positions) == 4 for form in forms)


def test_byte_span_inclusive():
    assert byte_span(0xA1, 0xA3) == frozenset({0xA1, 0xA2, 0xA3})


def test_latin_code_pages_infer_language():
    assert _BY_NAME["windows-1252"].language is None
    assert _BY_NAME["windows-1250"].language is None


def test_common_chars_are_not_ascii():
    for profile in PROFILES:
        assert profile.common_chars
        assert all(ch > "\x7f" for ch in profile.common_chars)


def test_gbk_covers_traditional_forms():
    assert "這" in _BY_NAME["gbk"].common_chars
    assert "這" not in _BY_NAME["gb2312"].common_chars


def test_profiles_are_frozen():
    with pytest.raises(AttributeError):
        _BY_NAME["gbk"].name = "other"  # type: ignore[misc]
