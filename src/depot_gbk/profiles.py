"""Built-in charset profiles used by the statistical classifier.

Each :class:`CharsetProfile` describes one legacy charset the classifier can
report: the Python codec used to decode it, whether it is a CJK multi-byte
code page, the byte shapes of its multi-byte characters, and the letters its
text is expected to contain once decoded.

The table is plain data.  Bump :data:`PROFILES_VERSION` whenever an entry or
a character set changes so that callers pinning detection behaviour can tell
the difference.
"""

from __future__ import annotations

import dataclasses

#: Revision of the profile table below.
PROFILES_VERSION: int = 2


def byte_span(low: int, high: int) -> frozenset[int]:
    """Return the byte values from *low* to *high*, both inclusive."""
    return frozenset(range(low, high + 1))


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceForm:
    """One valid shape of a multi-byte character.

    ``positions[0]`` holds the bytes that may open the sequence, and each
    following entry the bytes allowed at that offset.
    """

    positions: tuple[frozenset[int], ...]


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetProfile:
    """Static description of a charset known to the classifier."""

    name: str
    python_codec: str
    is_multibyte: bool
    # ``None`` means the charset serves several languages and the language is
    # inferred from the decoded text instead.
    language: str | None
    # Profiles sharing a family are subset/superset code pages of each other.
    family: str
    # Unicode character name prefixes expected for the decoded letters.
    scripts: tuple[str, ...]
    # Most frequent non-ASCII letters of the profile's language(s).
    common_chars: frozenset[str]
    # Multi-byte sequence shapes, tried in order.  Empty for single-byte
    # charsets.  Profiles of one family share the same forms.
    sequences: tuple[SequenceForm, ...] = ()


# Frequent characters shared by the simplified Chinese code pages.
_HANZI_SIMPLIFIED = frozenset(
    "的一是不了人我在有他这中大来上国个到说们为子和你地出道也时年得就那要下以生"
    "会自着去之过家学对可她里后小么心多天而能好都然没日于起还发成事只作当想看文"
    "无开手十用主行方又如前所本见经头面公同三已老从动两长知民样现分将外但身些与"
    "高意进把法此实回二理美点月明其种声全工己话儿者向情部正名定女问力机给等几很"
    "业最间新什打便位因重被走电四第门相次东政海口使教西再平真听世气信北少关并内"
    "加化由却代军产入先山五太水万市眼体别处总才场师书比住员九笑性通目华报立马命"
    "张活难神数件安表原车白应路期叫死常提感金何更反合放做系计或司利受光王果亲界"
    "及今京务制解各任至清物台象记边共风战干接它许八特觉望直服毛林题建南度统色字"
    "请交爱让认算论百吃义科怎元社术结六功指思非流每青管夫连远资队跟带花快条院变"
    "联言权往展该领传近留红治决周保达办运武半候七必城父强步完革深区即求品士转量"
    "空甚众技轻程告江语英基派满式李息写呢识极令黄德收脸钱党倒未持取设始版双历越"
    "史商千片容研像找友孩站广改议形委早房音火际则首单据导影失拿网香似斯专石若兵"
    "弟谁校读志飞观争究包组造落视济喜离虽坏兴切乐"
)

_HANZI_TRADITIONAL = frozenset(
    "的一是不了人我在有他這中大來上國個到說們為子和你地出道也時年得就那要下以生"
    "會自著去之過家學對可她裡後小麼心多天而能好都然沒日於起還發成事只作當想看文"
    "無開手十用主行方又如前所本見經頭面公同三已老從動兩長知民樣現分將外但身些與"
    "高意進把法此實回二理美點月明其種聲全工己話兒者向情部正名定女問力機給等幾很"
    "業最間新什打便位因重被走電四第門相次東政海口使教西再平真聽世氣信北少關並內"
    "加化由卻代軍產入先山五太水萬市眼體別處總才場師書比住員九笑性通目華報立馬命"
    "張活難神數件安表原車白應路期叫死常提感金何更反合放做系計或司利受光王果親界"
    "及今京務制解各任至清物臺象記邊共風戰接它許八特覺望直服毛林題建南度統色字"
    "請交愛讓認算論百吃義科怎元社術結六功指思非流每青管夫連遠資隊跟帶花快條院變"
    "聯言權往展該領傳近留紅治決周保達辦運武半候七必城父強步完革深區即求品士轉量"
    "空甚眾技輕程告江語英基派滿式李息寫呢識極令黃德收臉錢黨倒未持取設始版雙歷越"
    "史商千片容研像找友孩站廣改議形委早房音火際則首單據導影失拿網香似斯專石若兵"
    "弟誰校讀志飛觀爭究包組造落視濟喜離雖壞興切樂"
)

# GBK and GB18030 also encode the traditional forms.
_HANZI_GBK = _HANZI_SIMPLIFIED | _HANZI_TRADITIONAL

_JAPANESE = frozenset(
    "あいうえおかがきぎくぐけげこごさざしじすずせぜそぞただちっつづてでとどなにぬ"
    "ねのはばぱひびふぶへべほぼまみむめもゃやゅゆょよらりるれろわをん"
    "アイウェエオカガキクグケゲコゴサザシジスズセソタダチッツテデトドナニネノハバパ"
    "ヒビピフブプヘベペホボポマミムメモャュョラリルレロワンー"
    "日本人年大中出一国上事時見行生自分今前言手私何方的会者"
)

_HANGUL = frozenset(
    "이다는의에가하고을를지기서한도으로사대리나자인수일그아있것들게시해정어전라마"
    "보위부니주우원상적요만관여면소오국제무스과중되내구장거비동경신미성실없연재세"
    "했습니까었았서요지만와과로부터께에서은운안녕계문입트테"
)

_RUSSIAN = frozenset("оеаинтсрвлкмдпуяыьгзбчйхжшюцщэфъё")

_GREEK = frozenset("αεοιτνσκπρηυλμςάέίόύήώδγχθφβ")

_HEBREW = frozenset("אבגדהוזחטיכךלמםנןסעפףצץקרשת")

_ARABIC = frozenset("اأإآبتثجحخدذرزسشصضطظعغفقكلمنهويىةءؤئ")

_THAI = frozenset("กขคงจฉชซดตถทนบปผพฟมยรลวศสหอฮะัาำิีึืุูเแโใไ่้็์")

_WESTERN = frozenset("éèêëàâäáãçñóòôöõúùûüíìîïæøåßÉÀÇÖÜÄ")

_CENTRAL = frozenset("ąćęłńśźżčďěňřšťůžľĺŕőűăşţŁŚŻŽŠČŘ")

_HAN = ("CJK UNIFIED IDEOGRAPH",)
_KANA = ("HIRAGANA", "KATAKANA", "CJK UNIFIED IDEOGRAPH")

_EUC_BYTE = byte_span(0xA1, 0xFE)
_DIGIT = byte_span(0x30, 0x39)

# Only strict GB2312 pairs and GB18030 four-byte forms: the GBK extension
# range (lead 0x81-0xFE, trail 0x40-0xFE) also matches most Latin text with
# scattered accents.
_GB_SEQUENCES = (
    SequenceForm((byte_span(0x81, 0xFE), _DIGIT, byte_span(0x81, 0xFE), _DIGIT)),
    SequenceForm((byte_span(0xA1, 0xF7), _EUC_BYTE)),
)
_BIG5_SEQUENCES = (
    SequenceForm(
        (byte_span(0xA1, 0xF9), byte_span(0x40, 0x7E) | byte_span(0xA1, 0xFE))
    ),
)
_SHIFT_JIS_SEQUENCES = (
    SequenceForm(
        (
            byte_span(0x81, 0x9F) | byte_span(0xE0, 0xEF),
            byte_span(0x40, 0x7E) | byte_span(0x80, 0xFC),
        )
    ),
)
_EUC_JP_SEQUENCES = (
    # SS2: half-width katakana
    SequenceForm((frozenset({0x8E}), byte_span(0xA1, 0xDF))),
    # SS3: JIS X 0212
    SequenceForm((frozenset({0x8F}), _EUC_BYTE, _EUC_BYTE)),
    SequenceForm((_EUC_BYTE, _EUC_BYTE)),
)
_EUC_KR_SEQUENCES = (SequenceForm((_EUC_BYTE, _EUC_BYTE)),)

# Within a family, narrower code pages come first so they win ties.
PROFILES: tuple[CharsetProfile, ...] = (
    CharsetProfile(
        name="gb2312",
        python_codec="gb2312",
        is_multibyte=True,
        language="chinese",
        family="gb",
        scripts=_HAN,
        common_chars=_HANZI_SIMPLIFIED,
        sequences=_GB_SEQUENCES,
    ),
    CharsetProfile(
        name="gbk",
        python_codec="gbk",
        is_multibyte=True,
        language="chinese",
        family="gb",
        scripts=_HAN,
        common_chars=_HANZI_GBK,
        sequences=_GB_SEQUENCES,
    ),
    CharsetProfile(
        name="gb18030",
        python_codec="gb18030",
        is_multibyte=True,
        language="chinese",
        family="gb",
        scripts=_HAN,
        common_chars=_HANZI_GBK,
        sequences=_GB_SEQUENCES,
    ),
    CharsetProfile(
        name="big5",
        python_codec="big5",
        is_multibyte=True,
        language="chinese",
        family="big5",
        scripts=_HAN,
        common_chars=_HANZI_TRADITIONAL,
        sequences=_BIG5_SEQUENCES,
    ),
    CharsetProfile(
        name="shift_jis",
        python_codec="shift_jis",
        is_multibyte=True,
        language="japanese",
        family="shift_jis",
        scripts=_KANA,
        common_chars=_JAPANESE,
        sequences=_SHIFT_JIS_SEQUENCES,
    ),
    CharsetProfile(
        name="euc-jp",
        python_codec="euc_jp",
        is_multibyte=True,
        language="japanese",
        family="euc-jp",
        scripts=_KANA,
        common_chars=_JAPANESE,
        sequences=_EUC_JP_SEQUENCES,
    ),
    CharsetProfile(
        name="euc-kr",
        python_codec="euc_kr",
        is_multibyte=True,
        language="korean",
        family="euc-kr",
        scripts=("HANGUL",),
        common_chars=_HANGUL,
        sequences=_EUC_KR_SEQUENCES,
    ),
    CharsetProfile(
        name="windows-1252",
        python_codec="cp1252",
        is_multibyte=False,
        language=None,
        family="latin",
        scripts=("LATIN",),
        common_chars=_WESTERN,
    ),
    CharsetProfile(
        name="windows-1250",
        python_codec="cp1250",
        is_multibyte=False,
        language=None,
        family="latin-central",
        scripts=("LATIN",),
        common_chars=_CENTRAL,
    ),
    CharsetProfile(
        name="windows-1251",
        python_codec="cp1251",
        is_multibyte=False,
        language="russian",
        family="windows-1251",
        scripts=("CYRILLIC",),
        common_chars=_RUSSIAN,
    ),
    CharsetProfile(
        name="koi8-r",
        python_codec="koi8_r",
        is_multibyte=False,
        language="russian",
        family="koi8-r",
        scripts=("CYRILLIC",),
        common_chars=_RUSSIAN,
    ),
    CharsetProfile(
        name="iso-8859-7",
        python_codec="iso8859_7",
        is_multibyte=False,
        language="greek",
        family="greek",
        scripts=("GREEK",),
        common_chars=_GREEK,
    ),
    CharsetProfile(
        name="windows-1255",
        python_codec="cp1255",
        is_multibyte=False,
        language="hebrew",
        family="hebrew",
        scripts=("HEBREW",),
        common_chars=_HEBREW,
    ),
    CharsetProfile(
        name="windows-1256",
        python_codec="cp1256",
        is_multibyte=False,
        language="arabic",
        family="arabic",
        scripts=("ARABIC",),
        common_chars=_ARABIC,
    ),
    CharsetProfile(
        name="tis-620",
        python_codec="tis_620",
        is_multibyte=False,
        language="thai",
        family="thai",
        scripts=("THAI",),
        common_chars=_THAI,
    ),
)

