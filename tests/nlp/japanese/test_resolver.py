"""Tests for kanji block resolution."""
from unittest.mock import Mock
from yomigana.dictionary import BaseReadingDictionary, DictionaryEntry, StaticDictionary
from yomigana.nlp.base import Node
from yomigana.nlp.japanese.characters import TextType
from yomigana.nlp.japanese.division import Division
from yomigana.nlp.japanese.resolver import KanjiBlockResolver
from yomigana.validate import RomajiSystem

HEPBURN = RomajiSystem.hepburn


def divisions_of(*tokens):
    return [Division.from_node(Node(*token), HEPBURN) for token in tokens]


class TestResolveBlock:

    def test_whole_block_found(self):
        resolver = KanjiBlockResolver(StaticDictionary({"東京": ["とうきょう"]}))
        result = resolver.resolve(divisions_of(("東", "ヒガシ"), ("京", "キョウ")), HEPBURN)
        assert len(result) == 1
        assert result[0].spelling == "東京"
        assert result[0].hiragana_reading == "とうきょう"
        assert result[0][0].type == TextType.pure_kanji

    def test_first_listed_reading_wins(self):
        resolver = KanjiBlockResolver(StaticDictionary({"日本": ["にほん", "にっぽん"]}))
        result = resolver.resolve(divisions_of(("日", "ヒ"), ("本", "ホン")), HEPBURN)
        assert result[0].hiragana_reading == "にほん"

    def test_shrinks_from_the_right_then_resolves_tail(self, counter_dictionary):
        resolver = KanjiBlockResolver(counter_dictionary)
        result = resolver.resolve(divisions_of(("三", "サン"), ("百", "ヒャク")), HEPBURN)
        assert [d.spelling for d in result] == ["三", "百"]
        assert [d.hiragana_reading for d in result] == ["さん", "ひゃく"]

    def test_lookup_order(self):
        dictionary = Mock(spec=BaseReadingDictionary)
        dictionary.lookup.return_value = []
        resolver = KanjiBlockResolver(dictionary)
        resolver.resolve(divisions_of(("日", "ニチ"), ("本", "ホン"), ("語", "ゴ")), HEPBURN)
        looked_up = [call.args[0] for call in dictionary.lookup.call_args_list]
        assert looked_up == ["日本語", "日本", "日", "本語", "本", "語"]

    def test_longest_prefix_then_tail(self):
        resolver = KanjiBlockResolver(StaticDictionary({"日本": ["にほん"], "語": ["ご"]}))
        result = resolver.resolve(divisions_of(("日", "ニチ"), ("本", "ホン"), ("語", "ゴ")), HEPBURN)
        assert [d.spelling for d in result] == ["日本", "語"]
        assert [d.hiragana_reading for d in result] == ["にほん", "ご"]

    def test_no_coverage_keeps_analyzer_readings(self):
        resolver = KanjiBlockResolver(StaticDictionary())
        block = divisions_of(("魑", "チ"), ("魅", "ミ"), ("魍", "モウ"), ("魎", "リョウ"))
        result = resolver.resolve(block, HEPBURN)
        assert [d.spelling for d in result] == ["魑", "魅", "魍", "魎"]
        assert "".join(d.hiragana_reading for d in result) == "ちみもうりょう"

    def test_single_character_without_entry_terminates(self):
        resolver = KanjiBlockResolver(StaticDictionary())
        block = divisions_of(("鬱", "ウツ"))
        result = resolver.resolve(block, HEPBURN)
        assert result == block
        assert result[0] is block[0]

    def test_spellings_reassemble_block(self):
        resolver = KanjiBlockResolver(StaticDictionary({"本語": ["ほんご"]}))
        block = divisions_of(("日", "ニチ"), ("本", "ホン"), ("語", "ゴ"), ("学", "ガク"))
        result = resolver.resolve(block, HEPBURN)
        assert "".join(d.spelling for d in result) == "日本語学"
        assert [d.spelling for d in result] == ["日", "本語", "学"]

    def test_entries_spelled_differently_are_ignored(self):
        dictionary = Mock(spec=BaseReadingDictionary)
        dictionary.lookup.return_value = [DictionaryEntry({"其他"}, ["そのた"])]
        resolver = KanjiBlockResolver(dictionary)
        result = resolver.resolve(divisions_of(("其", "ソ")), HEPBURN)
        assert result[0].hiragana_reading == "そ"


class TestResolveSequence:

    def test_non_lone_kanji_tokens_flush_and_pass_through(self):
        resolver = KanjiBlockResolver(StaticDictionary({"東京": ["とうきょう"], "人生": ["じんせい"]}))
        divisions = divisions_of(("東", "ヒガシ"), ("京", "キョウ"), ("は", "ハ"), ("人生", "ジンセイ"), ("東", "トウ"))
        result = resolver.resolve(divisions, HEPBURN)
        assert [d.spelling for d in result] == ["東京", "は", "人生", "東"]
        assert result[1] is divisions[2]
        assert result[2] is divisions[3]

    def test_trailing_block_is_flushed(self):
        resolver = KanjiBlockResolver(StaticDictionary({"京": ["きょう"]}))
        result = resolver.resolve(divisions_of(("は", "ハ"), ("京", "ケイ")), HEPBURN)
        assert result[-1].hiragana_reading == "きょう"

    def test_empty_sequence(self):
        assert KanjiBlockResolver(StaticDictionary()).resolve([], HEPBURN) == []
