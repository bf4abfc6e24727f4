"""Japanese text to hiragana/katakana/romaji conversion."""

import asyncio
from typing import List, Optional, Union

from yomigana.dictionary import BaseReadingDictionary
from yomigana.logger import logger
from yomigana.nlp.base import BaseTokenizer
from yomigana.validate import ConversionRequest, Mode, RomajiSystem, To
from .division import Division
from .renderer import Renderer
from .resolver import KanjiBlockResolver
from .rules import apply_counter_readings


class JapaneseConverter:
    """Converts Japanese text into a target script and presentation.

    The analyzer and the reading dictionary are loaded once and shared by
    every call; each conversion builds its own division sequence, so calls
    may run concurrently (see :meth:`convert_async`). Use as a context
    manager, or call :meth:`close`, to release both resources.
    """

    def __init__(self, tokenizer: Optional[BaseTokenizer] = None,
                 dictionary: Optional[BaseReadingDictionary] = None):
        # ──────────────────────────────────────────────────────────────────────────────
        # INITIALISATION
        # ──────────────────────────────────────────────────────────────────────────────
        if tokenizer is None or dictionary is None:
            from yomigana.nlp import get_reading_dictionary, get_tokenizer
            tokenizer = tokenizer or get_tokenizer("ja")
            dictionary = dictionary or get_reading_dictionary("ja")
        self._tokenizer = tokenizer
        self._dictionary = dictionary
        self._resolver = KanjiBlockResolver(dictionary)
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._tokenizer.close()
        finally:
            self._dictionary.close()
        logger.info("Converter resources released")

    # ---------------------------------------------------------------------
    # ――― public API -------------------------------------------------------
    # ---------------------------------------------------------------------

    def get_divisions(self, text: str,
                      system: Union[RomajiSystem, str, None] = None) -> List[Division]:
        """Return the resolved and rewritten divisions of *text*, in order.

        Concatenating the spellings of all returned elements reproduces
        *text* exactly.
        """
        request = ConversionRequest.build(text=text, system=system)
        return self._analyse(request)

    def convert(
        self,
        text: str,
        to: Union[To, str, None] = None,
        mode: Union[Mode, str, None] = None,
        system: Union[RomajiSystem, str, None] = None,
        delimiter_start: Optional[str] = None,
        delimiter_end: Optional[str] = None,
    ) -> str:
        """Convert *text* and return the rendered string.

        Options left as ``None`` take the configured defaults. Unknown
        options raise ConfigurationError before any analysis happens.
        """
        request = ConversionRequest.build(
            text=text, to=to, mode=mode, system=system,
            delimiter_start=delimiter_start, delimiter_end=delimiter_end,
        )
        divisions = self._analyse(request)
        renderer = Renderer(request.system, request.delimiter_start, request.delimiter_end)
        return renderer.render(divisions, request.to, request.mode)

    async def convert_async(self, text: str, **options) -> str:
        """Run :meth:`convert` in a worker thread."""
        return await asyncio.to_thread(self.convert, text, **options)

    async def get_divisions_async(self, text: str,
                                  system: Union[RomajiSystem, str, None] = None) -> List[Division]:
        return await asyncio.to_thread(self.get_divisions, text, system)

    # ---------------------------------------------------------------------
    # ――― pipeline ---------------------------------------------------------
    # ---------------------------------------------------------------------

    def _analyse(self, request: ConversionRequest) -> List[Division]:
        if self._closed:
            raise RuntimeError("JapaneseConverter is closed")
        logger.debug(
            f"Converting {len(request.text)} chars: to={request.to.value} "
            f"mode={request.mode.value} system={request.system.value}"
        )
        if not request.text:
            return []

        nodes = self._tokenizer.tokenize(request.text)
        divisions = [Division.from_node(node, request.system) for node in nodes if node.surface]
        divisions = self._resolver.resolve(divisions, request.system)
        apply_counter_readings(divisions, request.system)
        return divisions
