"""Japanese phonetic processing utilities: kana script conversion and
romanization under the Hepburn, Nippon and Passport systems."""

from typing import Dict

import jaconv
import pykakasi

from yomigana.validate import RomajiSystem
from .characters import SOKUON, is_kanji

# ──────────────────────────────────────────────────────────────────────────────
# KANA TABLES (hiragana → Hepburn)
# ──────────────────────────────────────────────────────────────────────────────
_MONOGRAPHS: Dict[str, str] = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "i", "ゑ": "e", "を": "wo", "ん": "n",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ゔ": "vu",
    # small kana on their own
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa", "ゕ": "ka", "ゖ": "ke",
}

# Contracted sounds: consonant stem for each i-column kana + small ya/yu/yo
_YOON_STEMS = {
    "き": "ky", "ぎ": "gy", "し": "sh", "じ": "j", "ち": "ch", "ぢ": "j",
    "に": "ny", "ひ": "hy", "び": "by", "ぴ": "py", "み": "my", "り": "ry",
}
_YOON_VOWELS = {"ゃ": "a", "ゅ": "u", "ょ": "o"}

_DIGRAPHS: Dict[str, str] = {
    kana + small: stem + vowel
    for kana, stem in _YOON_STEMS.items()
    for small, vowel in _YOON_VOWELS.items()
}
_DIGRAPHS.update({
    # loan-word combinations
    "いぇ": "ye", "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "くぁ": "kwa", "ぐぁ": "gwa",
    "しぇ": "she", "じぇ": "je", "ちぇ": "che",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
})

_NIPPON_STEMS = {"し": "sy", "じ": "zy", "ち": "ty", "ぢ": "dy"}

_SYSTEM_OVERRIDES: Dict[RomajiSystem, Dict[str, str]] = {
    RomajiSystem.hepburn: {},
    RomajiSystem.nippon: {
        "し": "si", "ち": "ti", "つ": "tu", "ふ": "hu",
        "じ": "zi", "ぢ": "di", "づ": "du", "ゐ": "wi", "ゑ": "we",
        "しぇ": "sye", "じぇ": "zye", "ちぇ": "tye",
        **{
            kana + small: stem + vowel
            for kana, stem in _NIPPON_STEMS.items()
            for small, vowel in _YOON_VOWELS.items()
        },
    },
    RomajiSystem.passport: {"を": "o"},
}

_TABLES: Dict[RomajiSystem, Dict[str, str]] = {
    system: {**_MONOGRAPHS, **_DIGRAPHS, **overrides}
    for system, overrides in _SYSTEM_OVERRIDES.items()
}

_LONG_VOWEL_MARKS = {
    RomajiSystem.hepburn: {"a": "ā", "i": "ī", "u": "ū", "e": "ē", "o": "ō"},
    RomajiSystem.nippon: {"a": "â", "i": "î", "u": "û", "e": "ê", "o": "ô"},
    RomajiSystem.passport: {},
}

_PUNCTUATION = {
    "、": ",", "。": ".", "！": "!", "？": "?", "・": " ",
    "「": '"', "」": '"', "　": " ",
}

_VOWEL_OR_Y_KANA = set("あいうえおやゆよ")
_VOWEL_KANA = {"あ": "a", "い": "i", "う": "u", "え": "e", "お": "o"}
_LABIAL_KANA = set("ばびぶべぼぱぴぷぺぽまみむめも")
_CONSONANTS = set("bcdfghjklmpqrstvwxz")


class JapanesePhonetics:
    """Kana conversion and romanization. All methods are pure."""

    _kks = pykakasi.kakasi()

    @staticmethod
    def to_hiragana(kana: str) -> str:
        return jaconv.kata2hira(jaconv.h2z(kana))

    @staticmethod
    def to_katakana(kana: str) -> str:
        return jaconv.hira2kata(kana)

    @classmethod
    def reading_for(cls, text: str) -> str:
        """Best-effort katakana reading of arbitrary text via pykakasi.

        Used when the analyzer has no reading for an unknown word.
        """
        if not any(is_kanji(ch) for ch in text):
            return text
        return "".join(part["kana"] for part in cls._kks.convert(text))

    @staticmethod
    def geminate(romaji: str, system: RomajiSystem) -> str:
        """Double the first consonant of *romaji* (the effect of a preceding
        small tsu). Vowel-initial and empty syllables are returned as is."""
        if not romaji or romaji[0].lower() not in _CONSONANTS:
            return romaji
        if romaji.startswith("ch") and system != RomajiSystem.nippon:
            return "t" + romaji
        return romaji[0] + romaji

    @classmethod
    def to_romaji(cls, kana: str, system: RomajiSystem = RomajiSystem.hepburn) -> str:
        """Romanize a kana string under *system*.

        Digraphs are matched before single kana. A small tsu doubles the
        following consonant and never produces a syllable of its own; a
        trailing one yields nothing, leaving the caller to carry it over.
        """
        table = _TABLES[system]
        hira = cls.to_hiragana(kana)
        out = []
        pending_gemination = False
        i = 0

        while i < len(hira):
            ch = hira[i]

            if ch in SOKUON:
                pending_gemination = True
                i += 1
                continue

            if ch == "ー":
                out.append(cls._long_vowel(out, system))
                i += 1
                continue

            pair = hira[i:i + 2]
            if (ch in _VOWEL_KANA and not pending_gemination
                    and not (len(pair) == 2 and pair in table) and cls._lengthens(out, ch)):
                cls._long_vowel(out, system)
                i += 1
                continue

            if len(pair) == 2 and pair in table:
                syllable = table[pair]
                i += 2
            elif ch == "ん":
                syllable = cls._syllabic_n(hira[i + 1:i + 2], system)
                i += 1
            elif ch in table:
                syllable = table[ch]
                i += 1
            else:
                syllable = _PUNCTUATION.get(ch) or jaconv.z2h(ch, kana=False, ascii=True, digit=True)
                i += 1

            if pending_gemination:
                syllable = cls.geminate(syllable, system)
                pending_gemination = False
            out.append(syllable)

        return "".join(out)

    @staticmethod
    def _syllabic_n(following: str, system: RomajiSystem) -> str:
        if system == RomajiSystem.passport:
            return "m" if following in _LABIAL_KANA else "n"
        return "n'" if following in _VOWEL_OR_Y_KANA else "n"

    @staticmethod
    def _lengthens(out, ch: str) -> bool:
        """True when vowel kana *ch* prolongs the syllable before it: o+u, or a
        repeated a/u/e/o. i+i and e+i stay as written (oniisan, sensei)."""
        prev = out[-1][-1:] if out else ""
        vowel = _VOWEL_KANA[ch]
        return (vowel == "u" and prev == "o") or (prev == vowel and vowel != "i")

    @staticmethod
    def _long_vowel(out, system: RomajiSystem) -> str:
        """Lengthen the last emitted vowel in place; returns the text to append."""
        if system == RomajiSystem.passport:
            return ""
        marks = _LONG_VOWEL_MARKS[system]
        if out and out[-1] and out[-1][-1] in marks:
            out[-1] = out[-1][:-1] + marks[out[-1][-1]]
            return ""
        return "-"
