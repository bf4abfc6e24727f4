"""Japanese tokenization backed by Janome."""

from typing import List, Optional

from janome.tokenizer import Tokenizer

from yomigana import USER_DICTIONARY
from yomigana.logger import logger
from yomigana.nlp.base import BaseTokenizer, Node
from .phonetics import JapanesePhonetics

# Mapping from Janome Japanese POS tags to canonical English tags
JANOME_POS_MAP = {
    "名詞": "noun",
    "動詞": "verb",
    "形容詞": "adjective",
    "副詞": "adverb",
    "連体詞": "adjective",  # prenominal adjective
    "接続詞": "conjunction",
    "感動詞": "interjection",
    "助詞": "particle",
    "助動詞": "auxiliary",
    "記号": "symbol",
    "フィラー": "filler",
    "その他": "other",
    "接頭詞": "prefix",
    "名詞,代名詞": "pronoun",
}


def normalise_pos(part_of_speech: str) -> str:
    """Map a Janome POS string (``名詞,代名詞,一般,*``) to a canonical tag."""
    pos_fields = part_of_speech.split(',')
    full_pos = ','.join(pos_fields[:2]).strip()
    return (
        JANOME_POS_MAP.get(full_pos)
        or JANOME_POS_MAP.get(pos_fields[0].strip())
        or "other"
    )


class JanomeTokenizer(BaseTokenizer):
    """Morphological analyzer producing one Node per Janome token."""

    def __init__(self, user_dictionary: Optional[str] = USER_DICTIONARY):
        if user_dictionary:
            logger.info(f"Loading Janome with user dictionary {user_dictionary}")
            self._tokenizer = Tokenizer(udic=user_dictionary, udic_enc="utf8")
        else:
            self._tokenizer = Tokenizer()

    def tokenize(self, text: str) -> List[Node]:
        if self._tokenizer is None:
            raise RuntimeError("JanomeTokenizer is closed")
        if not text:
            return []

        nodes: List[Node] = []
        pos = 0
        for token in self._tokenizer.tokenize(text, wakati=False):
            surface = token.surface
            start = text.find(surface, pos) if surface else -1
            if start < 0:
                # Janome rewrote the surface; realigned at the next match
                logger.warning(f"Token {surface!r} not found in input at offset {pos}; skipped")
                continue
            if start > pos:
                nodes.append(self._gap(text[pos:start]))
            reading = token.reading if token.reading != "*" else JapanesePhonetics.reading_for(surface)
            nodes.append(Node(surface, reading, normalise_pos(token.part_of_speech)))
            pos = start + len(surface)

        if pos < len(text):
            nodes.append(self._gap(text[pos:]))
        return nodes

    @staticmethod
    def _gap(span: str) -> Node:
        if span.isspace():
            logger.debug(f"Analyzer dropped whitespace {span!r}; kept as-is")
        else:
            logger.warning(f"Analyzer dropped {span!r}; kept as-is")
        return Node(span, span, "symbol")

    def close(self) -> None:
        self._tokenizer = None
