from romanize.nlp.japanese.phonetics import LENGTH_MARKER

COMBINING_MACRON = "\u0304"

def encode_macrons(latin: str) -> str:
    """Replace each length-marker hyphen with a combining macron.

    The macron attaches to the vowel before it; NFKC later composes the pair
    (``o`` + U+0304 → ``ō``).
    """
    return latin.replace(LENGTH_MARKER, COMBINING_MACRON)
