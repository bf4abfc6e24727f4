"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from yomigana.dictionary import StaticDictionary
from yomigana.nlp.base import BaseTokenizer, Node


@pytest.fixture
def make_tokenizer():
    """Factory for a mock analyzer that returns the given (surface, reading, pos) nodes."""
    def _make(*tokens):
        tokenizer = Mock(spec=BaseTokenizer)
        tokenizer.tokenize.return_value = [Node(*token) for token in tokens]
        return tokenizer
    return _make


@pytest.fixture
def counter_dictionary():
    """Reading dictionary with numerals and counters but no compounds."""
    return StaticDictionary({
        "一": ["いち"],
        "二": ["に"],
        "三": ["さん"],
        "分": ["ぶん", "ふん"],
        "百": ["ひゃく"],
    })


@pytest.fixture
def sample_nodes():
    """Analyzer output covering every composition category."""
    return [
        Node("人生", "ジンセイ", "noun"),
        Node("の", "ノ", "particle"),
        Node("ライン", "ライン", "noun"),
        Node("感じ取れ", "カンジトレ", "verb"),
        Node("たら", "タラ", "auxiliary"),
        Node("、", "、", "symbol"),
    ]


@pytest.fixture
def sample_text(sample_nodes):
    return "".join(node.surface for node in sample_nodes)
