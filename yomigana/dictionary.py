from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Set

from jamdict import Jamdict

from yomigana import INCLUDE_NAMES
from yomigana.logger import logger


@dataclass
class DictionaryEntry:
    """One dictionary entry: the spellings it is written with and its
    readings, in the order the dictionary lists them."""
    spellings: Set[str] = field(default_factory=set)
    readings: List[str] = field(default_factory=list)


class BaseReadingDictionary(ABC):
    """Abstract interface for reading lookups by written form."""

    @abstractmethod
    def lookup(self, spelling: str) -> List[DictionaryEntry]:
        """Return every entry that can be written as *spelling*."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class StaticDictionary(BaseReadingDictionary):
    """In-memory dictionary built from a ``{spelling: [readings]}`` mapping."""

    def __init__(self, readings: Optional[Mapping[str, Iterable[str]]] = None):
        self._entries: Dict[str, DictionaryEntry] = {}
        for spelling, values in (readings or {}).items():
            self.add(spelling, values)

    def add(self, spelling: str, readings: Iterable[str]) -> None:
        entry = self._entries.setdefault(spelling, DictionaryEntry({spelling}))
        entry.readings.extend(r for r in readings if r not in entry.readings)

    def lookup(self, spelling: str) -> List[DictionaryEntry]:
        entry = self._entries.get(spelling)
        return [entry] if entry else []

    def close(self) -> None:
        self._entries.clear()


class JamdictDictionary(BaseReadingDictionary):
    """JMdict (and optionally JMnedict) lookups through Jamdict.

    Jamdict opens its own SQLite connection per query, so one instance can
    serve concurrent conversions; results are memoised per spelling.
    """

    def __init__(self, include_names: bool = INCLUDE_NAMES, cache_size: int = 4096,
                 **jamdict_kwargs):
        self._jam = Jamdict(**jamdict_kwargs)  # heavy-weight but cached for the life of the process
        self._include_names = include_names
        self._cached_lookup = lru_cache(maxsize=cache_size)(self._lookup)
        logger.info(f"Jamdict dictionary ready (names={'on' if include_names else 'off'})")

    def lookup(self, spelling: str) -> List[DictionaryEntry]:
        if self._jam is None:
            raise RuntimeError("JamdictDictionary is closed")
        return list(self._cached_lookup(spelling))

    def _lookup(self, spelling: str):
        result = self._jam.lookup(spelling, lookup_chars=False, lookup_ne=self._include_names)
        records = list(result.entries)
        if self._include_names:
            records.extend(result.names)
        return tuple(self._to_entry(record) for record in records)

    @staticmethod
    def _to_entry(record) -> DictionaryEntry:
        return DictionaryEntry(
            spellings={kanji.text for kanji in record.kanji_forms},
            readings=[kana.text for kana in record.kana_forms],
        )

    def close(self) -> None:
        if self._jam is not None:
            self._cached_lookup.cache_clear()
            self._jam = None
            logger.info("Jamdict dictionary closed")
