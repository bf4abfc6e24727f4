"""Rendering of resolved divisions into the requested script and presentation."""

from typing import Callable, Dict, List

from yomigana.nlp.base import ConfigurationError
from yomigana.validate import Mode, RomajiSystem, To
from .characters import TextType
from .division import Division, Element
from .phonetics import JapanesePhonetics

RUBY_TEMPLATE = "<ruby>{base}<rp>{start}</rp><rt>{ruby}</rt><rp>{end}</rp></ruby>"

_ELEMENT_NOTATIONS: Dict[To, Callable[[Element], str]] = {
    To.hiragana: lambda e: e.hiragana,
    To.katakana: lambda e: e.katakana,
    To.romaji: lambda e: e.romaji,
}


class Renderer:
    """Walks the finished division sequence and builds the output string.

    Normal and Spaced join whole-division readings; Okurigana and Furigana
    keep the original spelling and annotate pure-kanji elements. Romaji
    output carries a pending small-tsu from one division (or element) to
    the next, doubling the next consonant instead of writing the tsu.
    """

    def __init__(self, system: RomajiSystem = RomajiSystem.hepburn,
                 delimiter_start: str = "(", delimiter_end: str = ")"):
        self.system = system
        self.delimiter_start = delimiter_start
        self.delimiter_end = delimiter_end

    def render(self, divisions: List[Division], to: To, mode: Mode) -> str:
        if to not in _ELEMENT_NOTATIONS:
            raise ConfigurationError("to", to, "unsupported target script", [t.value for t in To])

        if mode == Mode.normal:
            return self._render_readings(divisions, to, separator="")
        elif mode == Mode.spaced:
            return self._render_readings(divisions, to, separator=" ")
        elif mode == Mode.okurigana:
            return self._render_annotated(divisions, to, self._inline)
        elif mode == Mode.furigana:
            return self._render_annotated(divisions, to, self._ruby)
        else:
            raise ConfigurationError("mode", mode, "unsupported presentation mode", [m.value for m in Mode])

    # ---------------------------------------------------------------------
    # ――― strategies --------------------------------------------------------
    # ---------------------------------------------------------------------

    def _render_readings(self, divisions: List[Division], to: To, separator: str) -> str:
        parts: List[str] = []
        if to != To.romaji:
            reading = (lambda d: d.hiragana_reading) if to == To.hiragana else (lambda d: d.katakana_reading)
            for division in divisions:
                parts.append(reading(division))
                parts.append(separator)
            return "".join(parts)

        pending_gemination = False
        for division in divisions:
            romaji = division.romaji_reading(self.system)
            if pending_gemination:
                romaji = JapanesePhonetics.geminate(romaji, self.system)
                pending_gemination = False
            parts.append(romaji)
            if division.ends_in_sokuon:
                # the doubled consonant belongs to the next division; no separator
                pending_gemination = True
                continue
            parts.append(separator)
        return "".join(parts)

    def _render_annotated(self, divisions: List[Division], to: To,
                          annotate: Callable[[str, str], str]) -> str:
        notation_of = _ELEMENT_NOTATIONS[to]
        parts: List[str] = []
        pending_gemination = False

        for division in divisions:
            for element in division:
                notation = notation_of(element)
                if to == To.romaji:
                    if pending_gemination:
                        notation = JapanesePhonetics.geminate(notation, self.system)
                    pending_gemination = element.ends_in_sokuon

                if element.type == TextType.pure_kanji:
                    parts.append(annotate(element.spelling, notation))
                else:
                    parts.append(element.spelling)
        return "".join(parts)

    def _inline(self, base: str, ruby: str) -> str:
        return f"{base}{self.delimiter_start}{ruby}{self.delimiter_end}"

    def _ruby(self, base: str, ruby: str) -> str:
        return RUBY_TEMPLATE.format(base=base, start=self.delimiter_start, ruby=ruby, end=self.delimiter_end)
