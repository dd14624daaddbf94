"""Japanese phonetic transcription utilities."""

import jaconv
import pykakasi
from romanize.nlp.base import BaseTransliterator

LONG_VOWEL_MARK = "ー"
LENGTH_MARKER = "-"

class JapanesePhonetics(BaseTransliterator):
    """Kana to Hepburn transliterator."""

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()

    def to_latin(self, kana: str) -> str:
        """Convert *kana* (katakana or hiragana) to Hepburn romaji.

        Every long-vowel mark "ー" becomes an ASCII hyphen right after the
        vowel it lengthens, so ``タイヨー`` gives ``taiyo-``.
        """
        hira = jaconv.kata2hira(kana)
        runs = []
        for run in hira.split(LONG_VOWEL_MARK):
            # pykakasi on a run returns one dict per word it recognises
            runs.append("".join(item["hepburn"] for item in self._kks.convert(run)) if run else "")
        return LENGTH_MARKER.join(runs)
