"""Stage 2b: Multi-byte structural probing.

Matches the data against the byte shapes a CJK profile declares in
:attr:`~depot_gbk.profiles.CharsetProfile.sequences`.  One pass per family
yields three figures, cached in the :class:`ClassifierContext`:

- the pair ratio, valid sequences per lead byte (the structural score);
- how many non-ASCII bytes sit inside valid sequences;
- how many distinct lead bytes open a valid sequence.
"""

from __future__ import annotations

from depot_gbk.classifier import ClassifierContext
from depot_gbk.profiles import CharsetProfile, SequenceForm

# Deleting all bytes >= 0x80 and comparing lengths gives the non-ASCII count.
HIGH_BYTES: bytes = bytes(range(0x80, 0x100))


def count_non_ascii(data: bytes) -> int:
    """Return the number of bytes >= 0x80 in *data*."""
    return len(data) - len(data.translate(None, HIGH_BYTES))


def _match(data: bytes, start: int, form: SequenceForm) -> int:
    """Return the end offset of *form* matched at *start*, or 0."""
    end = start + len(form.positions)
    if end > len(data):
        return 0
    for offset, allowed in enumerate(form.positions):
        if data[start + offset] not in allowed:
            return 0
    return end


def _scan(data: bytes, sequences: tuple[SequenceForm, ...]) -> tuple[float, int, int]:
    """Walk *data* once and return ``(pair_ratio, mb_bytes, lead_diversity)``.

    Any byte that may open one of the forms counts as a lead byte.  Forms are
    tried in declaration order and the first match is consumed whole.
    """
    openers = frozenset().union(*(form.positions[0] for form in sequences))
    lead_count = 0
    valid_count = 0
    mb_bytes = 0
    leads: set[int] = set()
    i = 0
    length = len(data)
    while i < length:
        lead = data[i]
        if lead not in openers:
            i += 1
            continue
        lead_count += 1
        for form in sequences:
            end = _match(data, i, form)
            if end:
                valid_count += 1
                leads.add(lead)
                mb_bytes += count_non_ascii(data[i:end])
                i = end
                break
        else:
            i += 1
    ratio = valid_count / lead_count if lead_count else 0.0
    return ratio, mb_bytes, len(leads)


def _get_analysis(
    data: bytes, profile: CharsetProfile, ctx: ClassifierContext
) -> tuple[float, int, int] | None:
    """Return the family's analysis, computing it on first use."""
    if not profile.sequences:
        return None
    cached = ctx.analysis_cache.get(profile.family)
    if cached is None:
        cached = _scan(data, profile.sequences)
        ctx.analysis_cache[profile.family] = cached
    return cached


def compute_structural_score(
    data: bytes, profile: CharsetProfile, ctx: ClassifierContext
) -> float:
    """Return 0.0-1.0 indicating how well *data* matches the profile's structure.

    Single-byte profiles and empty data always score 0.0.
    """
    if not data or not profile.is_multibyte:
        return 0.0
    result = _get_analysis(data, profile, ctx)
    return result[0] if result is not None else 0.0


def compute_multibyte_byte_coverage(
    data: bytes, profile: CharsetProfile, ctx: ClassifierContext
) -> float:
    """Share of non-ASCII bytes that sit inside valid multi-byte sequences.

    CJK text pairs up nearly every high byte, while Latin text with scattered
    accents leaves most of them orphaned.  Returns 0.0 for single-byte
    profiles, empty data, or data without non-ASCII bytes.
    """
    if not data or not profile.is_multibyte:
        return 0.0
    result = _get_analysis(data, profile, ctx)
    if result is None:
        return 0.0
    if ctx.non_ascii_count < 0:
        ctx.non_ascii_count = count_non_ascii(data)
    if ctx.non_ascii_count == 0:
        return 0.0
    return result[1] / ctx.non_ascii_count


def compute_lead_byte_diversity(
    data: bytes, profile: CharsetProfile, ctx: ClassifierContext
) -> int:
    """Count distinct lead byte values in valid multi-byte sequences."""
    if not data or not profile.is_multibyte:
        return 0
    result = _get_analysis(data, profile, ctx)
    if result is None:
        return 256  # no declared shapes, nothing to gate on
    return result[2]
