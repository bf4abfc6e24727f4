"""Japanese language processing module."""

from .characters import TextType, classify
from .converter import JapaneseConverter
from .division import Division, Element
from .phonetics import JapanesePhonetics
from .renderer import Renderer
from .resolver import KanjiBlockResolver
from .rules import COUNTER_READINGS, apply_counter_readings
from .tokenizer import JanomeTokenizer, JANOME_POS_MAP

__all__ = [
    'TextType',
    'classify',
    'JapaneseConverter',
    'Division',
    'Element',
    'JapanesePhonetics',
    'Renderer',
    'KanjiBlockResolver',
    'COUNTER_READINGS',
    'apply_counter_readings',
    'JanomeTokenizer',
    'JANOME_POS_MAP',
]
