"""Language inference for detected charsets.

Single-language charsets map straight to their language.  For charsets that
serve many languages (ASCII, the UTF family, the Windows Latin code pages)
the language is read off the decoded text: the dominant script first, then,
for Latin script, the diacritics that are characteristic of each language.
"""

from __future__ import annotations

import unicodedata
from collections import Counter

#: Language reported when nothing in the data identifies one.
UNKNOWN_LANGUAGE = "unknown"

_SINGLE_LANG_MAP: dict[str, str] = {
    "big5": "chinese",
    "euc-jp": "japanese",
    "euc-kr": "korean",
    "gb18030": "chinese",
    "gb2312": "chinese",
    "gbk": "chinese",
    "iso-8859-7": "greek",
    "koi8-r": "russian",
    "shift_jis": "japanese",
    "tis-620": "thai",
    "windows-1251": "russian",
    "windows-1255": "hebrew",
    "windows-1256": "arabic",
}

# Unicode character name prefix -> script bucket.
_SCRIPTS: tuple[tuple[str, str], ...] = (
    ("LATIN", "latin"),
    ("CJK UNIFIED IDEOGRAPH", "han"),
    ("HIRAGANA", "kana"),
    ("KATAKANA", "kana"),
    ("HANGUL", "korean"),
    ("CYRILLIC", "russian"),
    ("GREEK", "greek"),
    ("HEBREW", "hebrew"),
    ("ARABIC", "arabic"),
    ("THAI", "thai"),
)

# Letters that point to one Latin-script language.  Checked in this order;
# the first language with the most hits wins.
_LATIN_MARKERS: dict[str, frozenset[str]] = {
    "german": frozenset("äöüß"),
    "french": frozenset("éèêàâçùûœëîï"),
    "spanish": frozenset("ñáíóú"),
    "portuguese": frozenset("ãõ"),
    "polish": frozenset("ąćęłńśźż"),
    "czech": frozenset("ěčřšžůťď"),
    "hungarian": frozenset("őű"),
    "turkish": frozenset("ğış"),
}

# A text counts as Japanese when at least this share of its Han + kana
# letters is kana.
_KANA_SHARE = 0.1
# Non-Latin letters win over Latin ones once they reach this share of the
# Latin count; an ideograph carries far more text than a Latin letter.
_NON_LATIN_WEIGHT = 0.2


def infer_language(charset: str) -> str | None:
    """Return the language for a single-language charset, or None.

    :param charset: The canonical charset name.
    :returns: A lower-case language name, or ``None`` if the charset is
        multi-language.
    """
    return _SINGLE_LANG_MAP.get(charset)


def _latin_language(counts: Counter[str]) -> str:
    best = "english"
    best_hits = 0
    for language, markers in _LATIN_MARKERS.items():
        hits = sum(n for ch, n in counts.items() if ch in markers)
        if hits > best_hits:
            best, best_hits = language, hits
    return best


def detect_language(text: str) -> str:
    """Guess the natural language of decoded *text*.

    :returns: A lower-case language name, or :data:`UNKNOWN_LANGUAGE` when the
        text contains no letters.
    """
    scripts: Counter[str] = Counter()
    latin_letters: Counter[str] = Counter()
    for ch in text:
        if not ch.isalpha():
            continue
        name = unicodedata.name(ch, "")
        for prefix, script in _SCRIPTS:
            if name.startswith(prefix):
                scripts[script] += 1
                if script == "latin" and ch > "\x7f":
                    latin_letters[ch.lower()] += 1
                break

    if not scripts:
        return UNKNOWN_LANGUAGE

    latin = scripts.pop("latin", 0)
    if scripts and sum(scripts.values()) >= latin * _NON_LATIN_WEIGHT:
        han = scripts.pop("han", 0)
        kana = scripts.pop("kana", 0)
        cjk = han + kana
        if cjk:
            scripts["japanese" if kana >= cjk * _KANA_SHARE else "chinese"] = cjk
        return scripts.most_common(1)[0][0]
    return _latin_language(latin_letters)
