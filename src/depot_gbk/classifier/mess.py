"""Post-decode mess detection for single-byte candidates.

Scores decoded text for signs that the wrong code page was used: control
characters that real text does not carry, an implausible density of
accented letters, and letters hopping between scripts.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

_COMMON_CONTROL = frozenset("\t\n\r")
# First word of the Unicode name for letters of the scripts we track.
_SCRIPTS = frozenset(
    {
        "LATIN",
        "CYRILLIC",
        "GREEK",
        "ARABIC",
        "HEBREW",
        "THAI",
        "HANGUL",
        "HIRAGANA",
        "KATAKANA",
        "CJK",
    }
)
# 10k characters give a stable score; larger samples only cost time.
_MAX_SAMPLE_CHARS = 10_000
# Share of accented letters above which text starts to look like mojibake.
_ACCENT_TOLERANCE = 0.40


@lru_cache(maxsize=4096)
def _is_accented(ch: str) -> bool:
    """Return True if *ch* is a letter with combining marks after NFKD."""
    decomposed = unicodedata.normalize("NFKD", ch)
    return len(decomposed) > 1 and any(unicodedata.combining(c) for c in decomposed)


@lru_cache(maxsize=4096)
def _script_of(ch: str) -> str | None:
    """Return the script of a letter from its Unicode name, or None."""
    if not ch.isalpha():
        return None
    script = unicodedata.name(ch, "").partition(" ")[0]
    return script if script in _SCRIPTS else None


def compute_mess_score(text: str) -> float:
    """Return a mess score for decoded text. 0.0 = clean, 1.0 = very messy."""
    if not text:
        return 0.0

    text = text[:_MAX_SAMPLE_CHARS]
    unprintable = 0
    letters = 0
    accented = 0
    visible = 0
    script_changes = 0
    prev_script: str | None = None

    for ch in text:
        category = unicodedata.category(ch)
        # Only Cc counts; Cf holds legitimate marks such as ZWJ and RTL marks.
        if category == "Cc" and ch not in _COMMON_CONTROL:
            unprintable += 1
        if category[0] == "L":
            letters += 1
            if _is_accented(ch):
                accented += 1
        if ch.isspace():
            continue
        visible += 1
        script = _script_of(ch)
        if script is None:
            continue
        if prev_script is not None and script != prev_script:
            script_changes += 1
        prev_script = script

    unprintable_ratio = unprintable / len(text)
    accent_ratio = accented / letters if letters > 10 else 0.0
    script_ratio = script_changes / visible if visible > 10 else 0.0

    # A single control character in a short string must not max out the
    # score on its own, hence the 0.8 cap on that component.
    score = (
        min(unprintable_ratio * 8.0, 0.8)
        + max(0.0, accent_ratio - _ACCENT_TOLERANCE) * 2.0
        + script_ratio * 3.0
    )
    return min(score, 1.0)
