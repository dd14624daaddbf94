"""Token-by-token rewrite of a text into its romanized form."""

from typing import Callable, Iterable
from romanize.logger import logger
from romanize.nlp.base import Token, TokenAlignmentError, MalformedTokenError
from romanize.nlp.normalizer import normalize_text
from .classifier import TokenKind, classify_token, is_noun, kana_of
from .macrons import encode_macrons
from .spacing import needs_space, next_pending_space


class OutputBuffer:
    """Text being romanized in place, plus the cursor of the last aligned token.

    Two searches are offered:

    - ``locate`` scans the whole buffer from the start. Phonetic tokens use
      it because their kana/kanji surface is gone from the buffer once an
      earlier occurrence has been rewritten to Latin.
    - ``locate_from_cursor`` starts at ``cursor``. Opaque tokens use it, as
      Latin text recurs verbatim and an earlier occurrence must not be hit.

    ``cursor`` only ever serves as a lower bound; it is set from ``locate``
    results taken before the buffer is mutated.
    """

    def __init__(self, text: str):
        self.text = text
        self.cursor = 0

    def locate(self, surface: str) -> int:
        idx = self.text.find(surface)
        if idx < 0:
            raise TokenAlignmentError(surface, self.text, "surface not found in buffer")
        return idx

    def locate_from_cursor(self, surface: str) -> int:
        idx = self.text.find(surface, self.cursor)
        if idx < 0:
            raise TokenAlignmentError(
                surface, self.text, f"surface not found at or after position {self.cursor}"
            )
        return idx

    def replace_first(self, surface: str, replacement: str) -> None:
        """Rewrite exactly one occurrence: the first one in the buffer."""
        idx = self.locate(surface)
        self.text = self.text[:idx] + replacement + self.text[idx + len(surface):]

    def insert_space_before(self, surface: str) -> None:
        idx = self.locate_from_cursor(surface)
        self.text = self.text[:idx] + " " + self.text[idx:]


def romanize_token(token: Token, transliterate: Callable[[str], str]) -> str:
    """Latin replacement for a phonetic token, without any leading space."""
    replacement = transliterate(kana_of(token))
    if is_noun(token):
        replacement = replacement[:1].upper() + replacement[1:]
    return encode_macrons(replacement)


def reconstruct(
    text: str,
    tokens: Iterable[Token],
    transliterate: Callable[[str], str],
    normalize: Callable[[str], str] = normalize_text,
) -> str:
    """
    Rewrite *text* token by token into its romanized form.

    *tokens* must cover *text* in left-to-right order. Punctuation is kept as
    is; phonetic tokens are replaced by their transliteration; opaque tokens
    are kept but may get a space in front of them.

    Args:
        text: The (pre-romanized) input text
        tokens: Tagger output for *text*
        transliterate: kana -> Latin function using '-' as length marker
        normalize: Final pass applied to the finished buffer

    Returns:
        The romanized text

    Raises:
        TokenAlignmentError: If a token's surface cannot be located
        MalformedTokenError: If a token breaks the tagger contract
    """
    buffer = OutputBuffer(text)
    pending_space = False

    for token in tokens:
        if not token.surface:
            raise MalformedTokenError(token.surface, token.features, "empty surface")

        kind = classify_token(token)

        # Punctuation keeps the cursor where it is: later tokens may sit
        # before this occurrence of the same symbol.
        if kind is TokenKind.PUNCTUATION:
            pending_space = False
            continue

        idx = buffer.locate(token.surface)
        space = needs_space(kind, pending_space, token.surface)

        if kind is TokenKind.PHONETIC:
            replacement = romanize_token(token, transliterate)
            if space:
                replacement = " " + replacement
            logger.debug(f"Replacing '{token.surface}' at {idx} with '{replacement}'")
            buffer.replace_first(token.surface, replacement)
        elif space:
            logger.debug(f"Spacing '{token.surface}' (cursor {buffer.cursor})")
            buffer.insert_space_before(token.surface)

        pending_space = next_pending_space(kind)
        buffer.cursor = idx

    return normalize(buffer.text)
