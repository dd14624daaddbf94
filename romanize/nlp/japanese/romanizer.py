"""Japanese to Latin romanization."""

from typing import Optional
from romanize.config import RomanizerConfig
from romanize.logger import logger
from romanize.nlp.base import BaseRomanizer, BaseTokenizer, BaseTransliterator, BasePreRomanizer
from .aligner import reconstruct
from .phonetics import JapanesePhonetics
from .tokenizer import JapaneseTokenizer

class JapaneseRomanizer(BaseRomanizer):
    """Mixed-script text to romaji with macrons, spacing and noun capitalization.

    Collaborators are built once per instance; the Janome dictionary is the
    heavy one and is only read after loading, so one romanizer can serve
    many calls.
    """

    def __init__(
        self,
        config: Optional[RomanizerConfig] = None,
        tokenizer: Optional[BaseTokenizer] = None,
        phonetics: Optional[BaseTransliterator] = None,
        pre_romanizer: Optional[BasePreRomanizer] = None,
    ):
        self.config = config or RomanizerConfig()
        self.tokenizer = tokenizer or JapaneseTokenizer(
            self.config.user_dict_path(), self.config.user_dict_encoding
        )
        self.phonetics = phonetics or JapanesePhonetics()
        if pre_romanizer is None and self.config.pre_romanize:
            from romanize.nlp.korean.pre_romanizer import HangulPreRomanizer
            pre_romanizer = HangulPreRomanizer()
        self.pre_romanizer = pre_romanizer

    def romanize(self, text: str) -> str:
        """
        Romanize *text*.

        Hangul is romanized first, the remaining text is tagged, and each
        token is rewritten in place (see ``aligner.reconstruct``).

        Raises:
            TokenAlignmentError: If tagging and text get out of step
            MalformedTokenError: If the tagger returns an unusable token
        """
        if not text:
            return ""
        if self.pre_romanizer is not None:
            text = self.pre_romanizer.pre_romanize(text)
        tokens = self.tokenizer.tokenize(text)
        logger.debug(f"Tagged {len(tokens)} tokens: {[t.surface for t in tokens]}")
        return reconstruct(text, tokens, self.phonetics.to_latin)
