"""Element and Division: the per-token records the conversion pipeline
classifies, resolves, rewrites and finally renders."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from yomigana.nlp.base import Node
from yomigana.validate import RomajiSystem
from .characters import SOKUON, TextType, classify, split_runs
from .phonetics import JapanesePhonetics

# counter ke is read ka, ga, ke or ko depending on the word (一ヶ月, 関ヶ原)
_KE_READINGS = "[かがけこゕゖ]"
_KANA_PATTERNS = {"ヶ": _KE_READINGS, "ヵ": _KE_READINGS, "ゖ": _KE_READINGS, "ゕ": _KE_READINGS}


@dataclass
class Element:
    """The smallest unit that renders together: original spelling plus its
    hiragana/katakana/romaji notations.

    ``spelling`` and ``type`` are fixed once set; the notations are rewritten
    through :meth:`set_reading`, which keeps all three in step.
    """
    spelling: str
    hiragana: str
    katakana: str
    romaji: str
    type: TextType

    _READ_ONLY = ("spelling", "type")

    def __setattr__(self, name, value):
        if name in self._READ_ONLY and name in self.__dict__:
            raise AttributeError(f"Element.{name} is read-only")
        super().__setattr__(name, value)

    @classmethod
    def from_reading(cls, spelling: str, reading: str, system: RomajiSystem,
                     text_type: Optional[TextType] = None) -> "Element":
        """Build an element from a kana *reading* in either script."""
        hira = JapanesePhonetics.to_hiragana(reading)
        return cls(
            spelling=spelling,
            hiragana=hira,
            katakana=JapanesePhonetics.to_katakana(hira),
            romaji=JapanesePhonetics.to_romaji(hira, system),
            type=text_type if text_type is not None else classify(spelling),
        )

    @classmethod
    def passthrough(cls, spelling: str, system: RomajiSystem) -> "Element":
        """Element for non-Japanese text: every notation is the spelling."""
        return cls(
            spelling=spelling,
            hiragana=spelling,
            katakana=spelling,
            romaji=JapanesePhonetics.to_romaji(spelling, system),
            type=TextType.others,
        )

    def set_reading(self, hiragana: str, system: RomajiSystem) -> None:
        self.hiragana = hiragana
        self.katakana = JapanesePhonetics.to_katakana(hiragana)
        self.romaji = JapanesePhonetics.to_romaji(hiragana, system)

    @property
    def ends_in_sokuon(self) -> bool:
        return bool(self.hiragana) and self.hiragana[-1] in SOKUON

    def to_dict(self) -> Dict[str, Any]:
        return {
            "element": self.spelling,
            "hiragana": self.hiragana,
            "katakana": self.katakana,
            "romaji": self.romaji,
            "type": self.type.value,
        }


@dataclass
class Division:
    """Ordered, non-empty group of elements the analyzer produced as one token."""
    elements: List[Element]
    part_of_speech: str = "other"
    type: TextType = field(init=False)

    def __post_init__(self):
        if not self.elements:
            raise ValueError("A division needs at least one element")
        self.type = classify(self.spelling)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index: int) -> Element:
        return self.elements[index]

    @property
    def spelling(self) -> str:
        return "".join(e.spelling for e in self.elements)

    @property
    def hiragana_reading(self) -> str:
        return "".join(e.hiragana for e in self.elements)

    @property
    def katakana_reading(self) -> str:
        return "".join(e.katakana for e in self.elements)

    def romaji_reading(self, system: RomajiSystem) -> str:
        """Romanize the division as a whole so in-token gemination and
        syllabic-n context survive element boundaries."""
        return JapanesePhonetics.to_romaji(self.hiragana_reading, system)

    @property
    def ends_in_sokuon(self) -> bool:
        return self.elements[-1].ends_in_sokuon

    @property
    def is_lone_kanji(self) -> bool:
        """True for a single-character, single-element pure-kanji division."""
        return (
            len(self.elements) == 1
            and self.elements[0].type == TextType.pure_kanji
            and len(self.elements[0].spelling) == 1
        )

    def to_dict(self, system: RomajiSystem = RomajiSystem.hepburn) -> Dict[str, Any]:
        return {
            "surface": self.spelling,
            "hiragana": self.hiragana_reading,
            "katakana": self.katakana_reading,
            "romaji": self.romaji_reading(system),
            "type": self.type.value,
            "pos": self.part_of_speech,
            "elements": [e.to_dict() for e in self.elements],
        }

    # ---------------------------------------------------------------------
    # ――― construction from analyzer output --------------------------------
    # ---------------------------------------------------------------------

    @classmethod
    def from_node(cls, node: Node, system: RomajiSystem) -> "Division":
        surface = node.surface
        text_type = classify(surface)

        if text_type == TextType.others:
            elements = [Element.passthrough(surface, system)]
        elif text_type == TextType.kanji_kana_mixed:
            elements = cls._align_mixed(surface, node.reading, system)
        else:
            elements = [Element.from_reading(surface, node.reading or surface, system, text_type)]

        return cls(elements, node.part_of_speech)

    @staticmethod
    def _align_mixed(surface: str, reading: str, system: RomajiSystem) -> List[Element]:
        """Carve the reading of each kanji run out of the token reading by
        anchoring on the kana runs, e.g. 感じ取れ / かんじとれ gives
        感=かん, じ, 取=と, れ.

        Kana runs take the matched reading, so 関ヶ原 / せきがはら gives
        関=せき, ヶ=が, 原=はら.

        Falls back to a single mixed element when the kana runs cannot be
        found in the reading (irregular or missing readings).
        """
        runs = split_runs(surface)
        hira = JapanesePhonetics.to_hiragana(reading or "")
        pattern = "".join(
            "(.+?)" if kanji else "(" + "".join(_kana_pattern(ch) for ch in run) + ")"
            for run, kanji in runs
        )
        match = re.fullmatch(pattern, hira)
        if not match:
            return [Element.from_reading(surface, reading or surface, system, TextType.kanji_kana_mixed)]

        elements = []
        for (run, kanji), run_reading in zip(runs, match.groups()):
            if kanji:
                elements.append(Element.from_reading(run, run_reading, system, TextType.pure_kanji))
            else:
                elements.append(Element.from_reading(run, run_reading, system, TextType.pure_kana))
        return elements


def _kana_pattern(ch: str) -> str:
    return _KANA_PATTERNS.get(ch) or re.escape(JapanesePhonetics.to_hiragana(ch))
