"""Japanese language processing module."""

from .aligner import OutputBuffer, reconstruct
from .classifier import TokenKind, classify_token, kana_of
from .macrons import encode_macrons
from .phonetics import JapanesePhonetics
from .romanizer import JapaneseRomanizer
from .spacing import needs_space, next_pending_space
from .tokenizer import JapaneseTokenizer

__all__ = [
    'OutputBuffer',
    'reconstruct',
    'TokenKind',
    'classify_token',
    'kana_of',
    'encode_macrons',
    'JapanesePhonetics',
    'JapaneseRomanizer',
    'needs_space',
    'next_pending_space',
    'JapaneseTokenizer',
]
