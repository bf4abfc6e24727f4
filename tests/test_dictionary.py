"""Tests for the reading dictionary adapters."""
import pytest
from unittest.mock import Mock, patch
from yomigana.dictionary import (
    BaseReadingDictionary,
    DictionaryEntry,
    JamdictDictionary,
    StaticDictionary,
)


def jmdict_record(kanji, kana):
    record = Mock()
    record.kanji_forms = [Mock(text=k) for k in kanji]
    record.kana_forms = [Mock(text=k) for k in kana]
    return record


class TestBaseReadingDictionary:

    def test_interface_is_abstract(self):
        for method in ('lookup', 'close'):
            assert getattr(getattr(BaseReadingDictionary, method), '__isabstractmethod__', False)
        with pytest.raises(TypeError):
            BaseReadingDictionary()


class TestStaticDictionary:

    def test_lookup(self):
        dictionary = StaticDictionary({"日本": ["にほん", "にっぽん"]})
        entries = dictionary.lookup("日本")
        assert entries == [DictionaryEntry({"日本"}, ["にほん", "にっぽん"])]

    def test_miss(self):
        assert StaticDictionary().lookup("日本") == []

    def test_add_keeps_order_without_duplicates(self):
        dictionary = StaticDictionary({"分": ["ぶん"]})
        dictionary.add("分", ["ふん", "ぶん"])
        assert dictionary.lookup("分")[0].readings == ["ぶん", "ふん"]

    def test_close_forgets_entries(self):
        with StaticDictionary({"日": ["ひ"]}) as dictionary:
            assert dictionary.lookup("日")
        assert dictionary.lookup("日") == []


class TestJamdictDictionary:

    @pytest.fixture
    def mock_jamdict(self):
        with patch('yomigana.dictionary.Jamdict') as mock_cls:
            yield mock_cls.return_value

    def test_lookup_converts_records(self, mock_jamdict):
        mock_jamdict.lookup.return_value = Mock(
            entries=[jmdict_record(["日本", "日本国"], ["にほん", "にっぽん"])],
            names=[],
        )
        entries = JamdictDictionary(include_names=False).lookup("日本")
        assert entries == [DictionaryEntry({"日本", "日本国"}, ["にほん", "にっぽん"])]
        mock_jamdict.lookup.assert_called_once_with("日本", lookup_chars=False, lookup_ne=False)

    def test_names_appended_after_words(self, mock_jamdict):
        mock_jamdict.lookup.return_value = Mock(
            entries=[jmdict_record(["東"], ["ひがし"])],
            names=[jmdict_record(["東"], ["あずま"])],
        )
        entries = JamdictDictionary(include_names=True).lookup("東")
        assert [e.readings for e in entries] == [["ひがし"], ["あずま"]]
        mock_jamdict.lookup.assert_called_once_with("東", lookup_chars=False, lookup_ne=True)

    def test_names_ignored_when_disabled(self, mock_jamdict):
        mock_jamdict.lookup.return_value = Mock(entries=[], names=[jmdict_record(["東"], ["あずま"])])
        assert JamdictDictionary(include_names=False).lookup("東") == []

    def test_lookups_are_cached(self, mock_jamdict):
        mock_jamdict.lookup.return_value = Mock(entries=[jmdict_record(["日"], ["ひ"])], names=[])
        dictionary = JamdictDictionary(include_names=False)
        first = dictionary.lookup("日")
        second = dictionary.lookup("日")
        assert first == second
        assert mock_jamdict.lookup.call_count == 1

    def test_closed(self, mock_jamdict):
        dictionary = JamdictDictionary(include_names=False)
        dictionary.close()
        dictionary.close()
        with pytest.raises(RuntimeError):
            dictionary.lookup("日")

    def test_constructor_arguments_forwarded(self):
        with patch('yomigana.dictionary.Jamdict') as mock_cls:
            JamdictDictionary(include_names=False, memory_mode=True)
        mock_cls.assert_called_once_with(memory_mode=True)
