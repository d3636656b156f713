"""Classifier orchestrator: runs all detection stages in sequence."""

from __future__ import annotations

import logging

from depot_gbk._utils import DEFAULT_MAX_BYTES
from depot_gbk.classifier import Classification, ClassifierContext
from depot_gbk.classifier.ascii import detect_ascii, detect_seven_bit
from depot_gbk.classifier.bom import detect_bom
from depot_gbk.classifier.statistical import assign_confidence, score_candidates
from depot_gbk.classifier.structural import (
    compute_lead_byte_diversity,
    compute_multibyte_byte_coverage,
    compute_structural_score,
    count_non_ascii,
)
from depot_gbk.classifier.utf8 import detect_utf8
from depot_gbk.classifier.validity import filter_by_validity
from depot_gbk.language import UNKNOWN_LANGUAGE, detect_language, infer_language
from depot_gbk.profiles import PROFILES, CharsetProfile

logger = logging.getLogger(__name__)

_EMPTY_RESULT = Classification(charset="utf-8", confidence=0.10, language=None)
_FALLBACK_RESULT = Classification(
    charset="windows-1252", confidence=0.10, language=None
)

# Minimum structural score (valid multi-byte pairs / lead bytes) required
# to keep a CJK candidate.  Below this the profile is a false positive,
# e.g. Shift_JIS matching Latin data whose scattered high bytes look like
# lead bytes but rarely form valid pairs.
_CJK_MIN_MB_RATIO = 0.05
# Minimum number of non-ASCII bytes for a CJK candidate to survive gating.
_CJK_MIN_NON_ASCII = 2
# Minimum share of non-ASCII bytes that must sit inside valid multi-byte
# sequences.  Genuine CJK text is close to 1.0; Latin text with scattered
# high bytes has many orphans.
_CJK_MIN_BYTE_COVERAGE = 0.35
# Minimum number of distinct lead bytes, applied only once there are enough
# non-ASCII bytes to expect that much variety.
_CJK_MIN_LEAD_DIVERSITY = 4
_CJK_DIVERSITY_MIN_NON_ASCII = 16

# Language scoring only needs the start of the data.
_LANG_SCORE_MAX_BYTES = 2048


def _gate_cjk_candidates(
    data: bytes,
    candidates: tuple[CharsetProfile, ...],
    ctx: ClassifierContext,
) -> tuple[CharsetProfile, ...]:
    """Eliminate CJK candidates that lack genuine multi-byte structure.

    Each multi-byte candidate must pass, in order: the structural pair ratio
    gate, the minimum non-ASCII byte count, the byte coverage gate and (for
    larger inputs) the lead byte diversity gate.  Single-byte candidates
    pass through untouched.
    """
    gated: list[CharsetProfile] = []
    for profile in candidates:
        if profile.is_multibyte:
            if compute_structural_score(data, profile, ctx) < _CJK_MIN_MB_RATIO:
                continue
            if ctx.non_ascii_count < 0:
                ctx.non_ascii_count = count_non_ascii(data)
            if ctx.non_ascii_count < _CJK_MIN_NON_ASCII:
                continue
            coverage = compute_multibyte_byte_coverage(data, profile, ctx)
            if coverage < _CJK_MIN_BYTE_COVERAGE:
                continue
            if (
                ctx.non_ascii_count >= _CJK_DIVERSITY_MIN_NON_ASCII
                and compute_lead_byte_diversity(data, profile, ctx)
                < _CJK_MIN_LEAD_DIVERSITY
            ):
                continue
        gated.append(profile)
    return tuple(gated)


def _to_text(data: bytes, charset: str) -> str:
    """Decode *data* leniently for language scoring."""
    try:
        return data.decode(charset, errors="ignore")
    except LookupError:
        return ""


def _fill_language(
    data: bytes, results: list[Classification]
) -> list[Classification]:
    """Fill in the language of every verdict that lacks one.

    Single-language charsets use the fixed map; the rest are decoded and
    handed to :func:`depot_gbk.language.detect_language`.
    """
    filled: list[Classification] = []
    for result in results:
        if result.language is not None:
            filled.append(result)
            continue
        language = infer_language(result.charset)
        if language is None:
            language = (
                detect_language(_to_text(data, result.charset))
                if data
                else UNKNOWN_LANGUAGE
            )
        filled.append(
            Classification(
                charset=result.charset,
                confidence=result.confidence,
                language=language,
            )
        )
    return filled


def _run_pipeline_core(data: bytes, ctx: ClassifierContext) -> list[Classification]:
    """Core pipeline logic. Returns verdicts sorted best first."""
    if not data:
        return [_EMPTY_RESULT]

    # Stage 1a: BOMs are definitive.
    bom_result = detect_bom(data)
    if bom_result is not None:
        return [bom_result]

    # Stage 1b: printable ASCII
    ascii_result = detect_ascii(data)
    if ascii_result is not None:
        return [ascii_result]

    # Stage 1c: UTF-8 structural validation
    utf8_result = detect_utf8(data, truncated=ctx.truncated)
    if utf8_result is not None:
        return [utf8_result]

    # Stage 1d: 7-bit data with control bytes
    seven_bit_result = detect_seven_bit(data)
    if seven_bit_result is not None:
        return [seven_bit_result]

    # Stage 2a: Byte validity filtering
    decoded = filter_by_validity(data, PROFILES, truncated=ctx.truncated)
    candidates = tuple(p for p in PROFILES if p.name in decoded)
    if not candidates:
        logger.debug("no profile decodes the data; falling back")
        return [_FALLBACK_RESULT]

    # Stage 2b: drop CJK candidates without real multi-byte structure
    candidates = _gate_cjk_candidates(data, candidates, ctx)
    if not candidates:
        logger.debug("all candidates gated out; falling back")
        return [_FALLBACK_RESULT]

    # Stage 3: statistical scoring
    scores = score_candidates(data, candidates, decoded, ctx)
    if logger.isEnabledFor(logging.DEBUG):
        for profile, score in scores:
            logger.debug("%s score = %.4f", profile.name, score)

    if ctx.non_ascii_count < 0:
        ctx.non_ascii_count = count_non_ascii(data)
    results = assign_confidence(scores, evidence_bytes=ctx.non_ascii_count)
    if not results:
        logger.debug("no candidate scored above zero; falling back")
        return [_FALLBACK_RESULT]
    return results


def run_pipeline(
    data: bytes, max_bytes: int = DEFAULT_MAX_BYTES
) -> list[Classification]:
    """Run the full classifier.

    :param data: The raw byte data to analyze.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A non-empty list of :class:`Classification` sorted best first,
        each with its language filled in.
    """
    ctx = ClassifierContext(truncated=len(data) > max_bytes)
    data = data[:max_bytes]
    results = _run_pipeline_core(data, ctx)
    return _fill_language(data[:_LANG_SCORE_MAX_BYTES], results)


def classify(data: bytes, max_bytes: int = DEFAULT_MAX_BYTES) -> Classification:
    """Return the single best verdict for *data*.

    Never raises for any byte input; when nothing matches, a low-confidence
    fallback verdict is returned.
    """
    result = run_pipeline(data, max_bytes)[0]
    logger.debug(
        "%s %s confidence = %s", result.charset, result.language, result.confidence
    )
    return result
