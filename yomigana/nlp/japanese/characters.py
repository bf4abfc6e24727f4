"""Script classification of Japanese text."""

from enum import Enum


class TextType(str, Enum):
    """Composition of a token or an element."""
    pure_kanji = "pure_kanji"
    kanji_kana_mixed = "kanji_kana_mixed"
    pure_kana = "pure_kana"
    others = "others"


SOKUON = "っッ"

# Iteration and abbreviation marks that only ever stand in for kanji
_KANJI_MARKS = "々〆〇"


def is_kanji(ch: str) -> bool:
    return (
        "\u4e00" <= ch <= "\u9fff"      # CJK unified ideographs
        or "\u3400" <= ch <= "\u4dbf"   # extension A
        or "\uf900" <= ch <= "\ufaff"   # compatibility ideographs
        or "\U00020000" <= ch <= "\U0002ebef"
        or ch in _KANJI_MARKS
    )


def is_hiragana(ch: str) -> bool:
    return "\u3041" <= ch <= "\u309f"


def is_katakana(ch: str) -> bool:
    return (
        "\u30a0" <= ch <= "\u30ff"      # includes the long-vowel mark ー
        or "\u31f0" <= ch <= "\u31ff"   # phonetic extensions
        or "\uff66" <= ch <= "\uff9f"   # half-width katakana
    )


def is_kana(ch: str) -> bool:
    return is_hiragana(ch) or is_katakana(ch)


def classify(text: str) -> TextType:
    """Return the composition category of *text*.

    Every string maps to exactly one category; the empty string and any
    string containing a character that is neither kanji nor kana (Latin,
    digits, punctuation, symbols, whitespace) is ``others``.
    """
    if not text:
        return TextType.others

    has_kanji = has_kana = False
    for ch in text:
        if is_kanji(ch):
            has_kanji = True
        elif is_kana(ch):
            has_kana = True
        else:
            return TextType.others

    if has_kanji and has_kana:
        return TextType.kanji_kana_mixed
    return TextType.pure_kanji if has_kanji else TextType.pure_kana


def split_runs(text: str):
    """Split *text* into maximal runs of kanji and non-kanji characters.

    Returns a list of ``(run, is_kanji)`` pairs whose runs concatenate back
    to *text*.
    """
    runs = []
    for ch in text:
        kanji = is_kanji(ch)
        if runs and runs[-1][1] == kanji:
            runs[-1] = (runs[-1][0] + ch, kanji)
        else:
            runs.append((ch, kanji))
    return runs
