from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class RomanizationError(Exception):
    """Base class for failures while romanizing a text."""


class TokenAlignmentError(RomanizationError):
    """Raised when a token's surface cannot be found in the output buffer."""
    def __init__(self, surface: str, text: str, reason: str):
        super().__init__(
            f"Failed to align token '{surface}' in text '{text}': {reason}"
        )
        self.surface = surface
        self.text = text
        self.reason = reason


class MalformedTokenError(RomanizationError):
    """Raised when the tagger hands over a token that breaks its contract."""
    def __init__(self, surface: str, features: Sequence[str], reason: str):
        super().__init__(
            f"Malformed token '{surface}' with features {list(features)}: {reason}"
        )
        self.surface = surface
        self.features = tuple(features)
        self.reason = reason


# ──────────────────────────────────────────────────────────────────────────────
# TOKENS
# ──────────────────────────────────────────────────────────────────────────────
# IPADIC feature positions
POS_INDEX = 0
READING_INDEX = 7
PRONUNCIATION_INDEX = 8


@dataclass(frozen=True)
class Token:
    """One tagger token: the surface span plus its IPADIC feature list.

    Features keep the tagger's order (part of speech, three subdivisions,
    inflection type, inflection form, base form, reading, pronunciation).
    Unknown words carry fewer fields; missing positions are absent rather
    than padded.
    """
    surface: str
    features: Tuple[str, ...] = ()

    def feature(self, index: int) -> Optional[str]:
        if index < len(self.features):
            return self.features[index]
        return None

    @property
    def part_of_speech(self) -> str:
        pos = self.feature(POS_INDEX)
        if not pos:
            raise MalformedTokenError(self.surface, self.features, "missing part-of-speech field")
        return pos

    @property
    def reading(self) -> Optional[str]:
        return self.feature(READING_INDEX)

    @property
    def pronunciation(self) -> Optional[str]:
        return self.feature(PRONUNCIATION_INDEX)


# ──────────────────────────────────────────────────────────────────────────────
# COLLABORATORS
# ──────────────────────────────────────────────────────────────────────────────
class BaseTokenizer(ABC):
    """Abstract base class for morphological tagging"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Split text into tokens in left-to-right order"""
        pass


class BaseTransliterator(ABC):
    """Abstract base class for kana to Latin transliteration"""

    @abstractmethod
    def to_latin(self, kana: str) -> str:
        """Return the Latin rendering, marking long vowels with '-'"""
        pass


class BasePreRomanizer(ABC):
    """Abstract base class for whole-text passes run before tokenization"""

    @abstractmethod
    def pre_romanize(self, text: str) -> str:
        """Romanize runs of a foreign script, leave everything else untouched"""
        pass


class BaseRomanizer(ABC):
    """Abstract base class for full-text romanizers"""

    @abstractmethod
    def romanize(self, text: str) -> str:
        """Romanize text"""
        pass

    def romanize_lines(self, lines: Sequence[str]) -> List[str]:
        """Romanize each line independently."""
        return [self.romanize(line) for line in lines]
