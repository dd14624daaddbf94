"""Natural Language Processing module for romanize

This module provides the language-specific pieces of romanization:
tagging, kana transliteration and script pre-passes.
"""

from typing import Optional
from romanize.config import RomanizerConfig
from .base import (
    Token,
    RomanizationError,
    TokenAlignmentError,
    MalformedTokenError,
    BaseTokenizer,
    BaseTransliterator,
    BasePreRomanizer,
    BaseRomanizer,
)

def get_tokenizer(language: str, config: Optional[RomanizerConfig] = None) -> BaseTokenizer:
    """Get a morphological tagger for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)
        config: Optional settings (user dictionary)

    Returns:
        Language-specific tokenizer instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()
    config = config or RomanizerConfig()

    if language in ['ja', 'jp']:
        from .japanese.tokenizer import JapaneseTokenizer
        return JapaneseTokenizer(config.user_dict_path(), config.user_dict_encoding)
    else:
        raise ValueError(f"Unsupported language for tokenization: {language}")

def get_pre_romanizer(language: str) -> BasePreRomanizer:
    """Get a whole-text pre-romanizer for the specified script language.

    Args:
        language: Language code ('ko' for Korean)

    Returns:
        Language-specific pre-romanizer instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language == 'ko':
        from .korean.pre_romanizer import HangulPreRomanizer
        return HangulPreRomanizer()
    else:
        raise ValueError(f"Unsupported language for pre-romanization: {language}")

def get_romanizer(language: str, config: Optional[RomanizerConfig] = None) -> BaseRomanizer:
    """Get a romanizer for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)
        config: Optional settings; defaults to ``RomanizerConfig()``

    Returns:
        Language-specific romanizer instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.romanizer import JapaneseRomanizer
        return JapaneseRomanizer(config=config)
    else:
        raise ValueError(f"Unsupported language for romanization: {language}")

__all__ = [
    'Token',
    'RomanizationError',
    'TokenAlignmentError',
    'MalformedTokenError',
    'BaseTokenizer',
    'BaseTransliterator',
    'BasePreRomanizer',
    'BaseRomanizer',
    'get_tokenizer',
    'get_pre_romanizer',
    'get_romanizer'
]
