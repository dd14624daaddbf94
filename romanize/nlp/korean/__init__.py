"""Korean language processing module."""

from .pre_romanizer import HangulPreRomanizer

__all__ = [
    'HangulPreRomanizer'
]
