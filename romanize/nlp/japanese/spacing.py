"""Word-boundary spacing between romanized tokens."""

from romanize.nlp.japanese.classifier import TokenKind


def needs_space(kind: TokenKind, pending_space: bool, surface: str) -> bool:
    """
    Decide whether a space goes in front of the current token.

    - Phonetic tokens are Japanese words, so they are spaced whenever the
      previous token left a pending space.
    - Opaque tokens are spaced only when they start with a letter or digit;
      a bracket or similar symbol stays glued to what precedes it.
    - Punctuation never receives a space.

    Args:
        kind: Classification of the current token
        pending_space: Whether the previous word asked for a following space
        surface: The current token's surface text

    Returns:
        True if a single space must be inserted before the token
    """
    if not pending_space or kind is TokenKind.PUNCTUATION:
        return False
    if kind is TokenKind.PHONETIC:
        return True
    return surface[:1].isalnum()


def next_pending_space(kind: TokenKind) -> bool:
    """Only a phonetic token asks for a space before the next word."""
    return kind is TokenKind.PHONETIC
