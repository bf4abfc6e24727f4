"""Natural Language Processing module for yomigana

This module provides the language-specific collaborators (analyzer and
reading dictionary) and the converter built on top of them.
"""

from .base import BaseTokenizer, ConfigurationError, Node

_JAPANESE = ['ja', 'jp']


def _check_language(language: str) -> str:
    language = language.lower()
    if language not in _JAPANESE:
        raise ConfigurationError("language", language, "unsupported language", _JAPANESE)
    return language


def get_tokenizer(language: str) -> BaseTokenizer:
    """Get a morphological analyzer for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific tokenizer instance

    Raises:
        ConfigurationError: If language is not supported
    """
    _check_language(language)
    from .japanese.tokenizer import JanomeTokenizer
    return JanomeTokenizer()


def get_reading_dictionary(language: str):
    """Get a reading dictionary for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        BaseReadingDictionary instance

    Raises:
        ConfigurationError: If language is not supported
    """
    _check_language(language)
    from yomigana.dictionary import JamdictDictionary
    return JamdictDictionary()


def get_converter(language: str):
    """Get a converter wired with the default analyzer and dictionary.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Raises:
        ConfigurationError: If language is not supported
    """
    _check_language(language)
    from .japanese.converter import JapaneseConverter
    return JapaneseConverter(get_tokenizer(language), get_reading_dictionary(language))


__all__ = [
    'BaseTokenizer',
    'ConfigurationError',
    'Node',
    'get_tokenizer',
    'get_reading_dictionary',
    'get_converter',
]
