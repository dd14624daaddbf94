"""Token classification for the romanizer."""

import re
from enum import Enum
from typing import Optional
from romanize.nlp.base import Token

# IPADIC part-of-speech categories
SYMBOL_POS = "記号"
NOUN_POS = "名詞"

# Katakana block from ァ to the long-vowel mark ー
KATAKANA_RE = re.compile(r"[\u30a1-\u30fc]+")


class TokenKind(Enum):
    PUNCTUATION = "punctuation"
    PHONETIC = "phonetic"
    OPAQUE = "opaque"


def is_katakana(text: str) -> bool:
    """Check if text is non-empty and written in katakana only."""
    return bool(KATAKANA_RE.fullmatch(text))


def is_noun(token: Token) -> bool:
    return token.part_of_speech == NOUN_POS


def kana_of(token: Token) -> Optional[str]:
    """Return the kana to transliterate for *token*, if any.

    The tagger's pronunciation wins; a surface written entirely in katakana
    (typically an unknown loanword) stands in for a missing pronunciation.
    """
    if token.pronunciation is not None:
        return token.pronunciation
    if is_katakana(token.surface):
        return token.surface
    return None


def classify_token(token: Token) -> TokenKind:
    """Decide how the aligner treats *token*.

    Raises:
        MalformedTokenError: If the token has no part-of-speech field
    """
    if token.part_of_speech == SYMBOL_POS:
        return TokenKind.PUNCTUATION
    if kana_of(token) is not None:
        return TokenKind.PHONETIC
    return TokenKind.OPAQUE
