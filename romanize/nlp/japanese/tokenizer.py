"""Japanese morphological tagging with Janome."""

from typing import List, Optional
from janome.tokenizer import Tokenizer
from romanize.logger import logger
from romanize.nlp.base import BaseTokenizer, Token

# Janome fills unknown fields with this placeholder
EMPTY_FIELD = "*"


class JapaneseTokenizer(BaseTokenizer):
    """Janome tagger producing IPADIC-layout tokens."""

    def __init__(self, user_dict: Optional[str] = None, user_dict_encoding: str = "utf8"):
        """Load the Janome dictionary (and an optional IPADIC CSV user dictionary) once."""
        if user_dict:
            logger.info(f"Loading Janome user dictionary: {user_dict}")
            self._tokenizer = Tokenizer(user_dict, udic_enc=user_dict_encoding)
        else:
            self._tokenizer = Tokenizer()

    def tokenize(self, text: str) -> List[Token]:
        """Tokenise *text*; whitespace comes back as symbol tokens like any punctuation."""
        return [to_token(t) for t in self._tokenizer.tokenize(text, wakati=False)]


def to_token(janome_token) -> Token:
    """Flatten a Janome token into the nine IPADIC feature fields.

    Unknown words have no reading or pronunciation; those trailing
    placeholders are dropped so that the fields are absent, not '*'.
    """
    features = janome_token.part_of_speech.split(',') + [
        janome_token.infl_type,
        janome_token.infl_form,
        janome_token.base_form,
        janome_token.reading,
        janome_token.phonetic,
    ]
    while len(features) > 7 and features[-1] == EMPTY_FIELD:
        features.pop()
    return Token(surface=janome_token.surface, features=tuple(features))
