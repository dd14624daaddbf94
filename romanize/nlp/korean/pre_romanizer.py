"""Hangul pre-romanization pass."""

import re
from korean_romanizer.romanizer import Romanizer
from romanize.nlp.base import BasePreRomanizer

# Precomposed Hangul syllables
HANGUL_RUN_RE = re.compile(r"[\uac00-\ud7a3]+")


class HangulPreRomanizer(BasePreRomanizer):
    """Romanize Hangul runs (Revised Romanization) ahead of Japanese tagging."""

    def pre_romanize(self, text: str) -> str:
        """Replace every Hangul run in *text*; other characters pass through."""
        if not self.contains_hangul(text):
            return text
        return HANGUL_RUN_RE.sub(lambda match: Romanizer(match.group(0)).romanize(), text)

    @staticmethod
    def contains_hangul(text: str) -> bool:
        return bool(HANGUL_RUN_RE.search(text))
