"""Stage 3: Profile scoring and margin-based confidence.

Every candidate that survived validity filtering and CJK gating has already
been decoded.  Its non-ASCII letters are compared with the profile's
expected scripts and most frequent characters; multi-byte candidates are
further weighted by how cleanly the bytes pair up.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from depot_gbk.classifier import Classification, ClassifierContext
from depot_gbk.classifier.mess import compute_mess_score
from depot_gbk.classifier.structural import (
    compute_multibyte_byte_coverage,
    compute_structural_score,
)
from depot_gbk.profiles import CharsetProfile

_MAX_SAMPLE_CHARS = 20_000
_SCRIPT_WEIGHT = 0.3
_COMMON_WEIGHT = 0.7
# Multi-byte candidates whose pairs absorb nearly every non-ASCII byte get
# their score multiplied by (1 + coverage).
_COVERAGE_BOOST_THRESHOLD = 0.95
_MARGIN_SCALE = 1.5
_MAX_CONFIDENCE = 0.99
# With n non-ASCII bytes of evidence, confidence is capped at n / (n + 3):
# three bytes cap it at 0.5, thirty at about 0.9.
_EVIDENCE_HALF_POINT = 3


@lru_cache(maxsize=8192)
def _char_name(ch: str) -> str:
    return unicodedata.name(ch, "")


def letter_ratios(
    text: str, profile: CharsetProfile
) -> tuple[float, float, float]:
    """Return ``(letter_share, script_ratio, common_ratio)`` for *text*.

    Only non-ASCII characters are examined.  ``letter_share`` is the share of
    the visible ones that are letters; the other two ratios are taken over
    those letters.  Letters are characters in the Unicode L* and M*
    categories; combining marks count so that Thai vowel signs are included.
    """
    visible = 0
    letters = 0
    in_script = 0
    common = 0
    for ch in text[:_MAX_SAMPLE_CHARS]:
        if ch < "\x80" or ch.isspace():
            continue
        visible += 1
        if unicodedata.category(ch)[0] not in "LM":
            continue
        letters += 1
        if ch in profile.common_chars:
            common += 1
        if _char_name(ch).startswith(profile.scripts):
            in_script += 1
    if not letters:
        return 0.0, 0.0, 0.0
    return letters / visible, in_script / letters, common / letters


def score_profile(
    data: bytes, text: str, profile: CharsetProfile, ctx: ClassifierContext
) -> float:
    """Score how well *text*, decoded from *data*, fits *profile*."""
    letter_share, script_ratio, common_ratio = letter_ratios(text, profile)
    evidence = _SCRIPT_WEIGHT * script_ratio + _COMMON_WEIGHT * common_ratio
    if not profile.is_multibyte:
        # Wrong code pages turn letters into symbols; CJK text carries its own
        # full-width punctuation, so the share only applies here.
        return evidence * letter_share * (1.0 - compute_mess_score(text))

    coverage = compute_multibyte_byte_coverage(data, profile, ctx)
    score = compute_structural_score(data, profile, ctx) * coverage * evidence
    if coverage >= _COVERAGE_BOOST_THRESHOLD:
        score *= 1 + coverage
    return score


def score_candidates(
    data: bytes,
    candidates: tuple[CharsetProfile, ...],
    decoded: dict[str, str],
    ctx: ClassifierContext,
) -> list[tuple[CharsetProfile, float]]:
    """Score all candidates and return them sorted by score descending.

    The sort is stable, so candidates that tie keep their table order.
    """
    if not data or not candidates:
        return []
    scores = [
        (profile, score_profile(data, decoded[profile.name], profile, ctx))
        for profile in candidates
    ]
    scores.sort(key=lambda x: x[1], reverse=True)
    return scores


def assign_confidence(
    scores: list[tuple[CharsetProfile, float]],
    *,
    evidence_bytes: int | None = None,
) -> list[Classification]:
    """Turn ranked scores into verdicts.

    A candidate's confidence is its lead over the best candidate of any other
    family, scaled by 1.5 and capped at 0.99.  Family members are code-page
    supersets of each other, so they never count as rivals.  Candidates that
    scored zero are dropped.

    When *evidence_bytes*, the number of non-ASCII bytes examined, is given,
    confidence is also capped at ``evidence_bytes / (evidence_bytes + 3)``
    so that a handful of high bytes never reads as near-certain.
    """
    ceiling = _MAX_CONFIDENCE
    if evidence_bytes is not None:
        ceiling = min(
            ceiling, evidence_bytes / (evidence_bytes + _EVIDENCE_HALF_POINT)
        )
    results: list[Classification] = []
    for profile, score in scores:
        if score <= 0.0:
            continue
        rival = max(
            (s for p, s in scores if p.family != profile.family), default=0.0
        )
        confidence = min(ceiling, max(0.0, (score - rival) * _MARGIN_SCALE))
        results.append(
            Classification(
                charset=profile.name, confidence=confidence, language=profile.language
            )
        )
    return results
