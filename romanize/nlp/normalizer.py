"""Final Unicode normalization pass."""

import unicodedata

def normalize_text(text: str) -> str:
    """
    Apply NFKC normalization to a romanized string.

    This folds full-width punctuation to ASCII (``～`` → ``~``, ``（`` → ``(``)
    and composes combining macrons with the vowel before them (``o`` + U+0304
    → ``ō``). Applying it twice gives the same result as applying it once.

    Args:
        text: The romanized text

    Returns:
        Normalized text string
    """
    return unicodedata.normalize("NFKC", text)
