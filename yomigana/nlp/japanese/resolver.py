"""Re-segmentation of runs of single-kanji tokens against a reading dictionary."""

from typing import List, Optional

from yomigana.dictionary import BaseReadingDictionary
from yomigana.logger import logger
from yomigana.validate import RomajiSystem
from .characters import TextType
from .division import Division, Element


class KanjiBlockResolver:
    """Merge consecutive lone-kanji divisions into blocks and read each block
    by greedy longest-match lookup.

    The analyzer falls back to one token per kanji when a compound is
    missing from its own dictionary, and the per-character readings it then
    reports are usually wrong for the compound. Each block is matched
    left to right: the longest prefix with a dictionary entry wins, and the
    remaining tail is resolved the same way. A single character without
    any entry keeps the analyzer's reading.
    """

    def __init__(self, dictionary: BaseReadingDictionary):
        self._dictionary = dictionary

    def resolve(self, divisions: List[Division], system: RomajiSystem) -> List[Division]:
        result: List[Division] = []
        block: List[Division] = []

        for division in divisions:
            if division.is_lone_kanji:
                block.append(division)
                continue
            if block:
                result.extend(self.resolve_block(block, system))
                block = []
            result.append(division)

        if block:
            result.extend(self.resolve_block(block, system))
        return result

    def resolve_block(self, block: List[Division], system: RomajiSystem) -> List[Division]:
        """Resolve one block of lone-kanji divisions.

        Always terminates: every pass of the outer loop consumes at least
        one character, either through a dictionary hit or through the
        single-character fallback to the analyzer reading.
        """
        resolved: List[Division] = []
        start = 0

        while start < len(block):
            end = len(block)
            while end > start:
                spelling = "".join(d.spelling for d in block[start:end])
                reading = self.lookup_reading(spelling)
                if reading is not None:
                    logger.debug(f"Resolved kanji block {spelling} as {reading}")
                    element = Element.from_reading(spelling, reading, system, TextType.pure_kanji)
                    resolved.append(Division([element], block[start].part_of_speech))
                    break
                end -= 1

            if end == start:
                fallback = block[start]
                logger.debug(
                    f"No dictionary entry for {fallback.spelling}; "
                    f"keeping analyzer reading {fallback.hiragana_reading}"
                )
                resolved.append(fallback)
                end = start + 1

            start = end

        return resolved

    def lookup_reading(self, spelling: str) -> Optional[str]:
        """First listed reading of the first entry spelled exactly *spelling*."""
        for entry in self._dictionary.lookup(spelling):
            if spelling in entry.spellings and entry.readings:
                return entry.readings[0]
        return None
