"""Shared helpers for dictionary word normalization."""

from __future__ import annotations

from typing import Optional

from ..core.constants import DICTIONARY_PUNCTUATION


def invalid_char_index(word: str) -> Optional[int]:
    """Return the index of the first character not allowed in an entry, if any."""

    for index, char in enumerate(word):
        if not (char.isalnum() or char in DICTIONARY_PUNCTUATION):
            return index
    return None


def clean_word(text: str) -> str:
    """Return the lowercase form of a word list line with surrounding whitespace removed."""

    if not text:
        return ""
    return text.strip().lower()


def is_guessable(char: str) -> bool:
    """Only alphanumeric characters can be guessed; punctuation is always shown."""

    return len(char) == 1 and char.isalnum()


__all__ = ["clean_word", "invalid_char_index", "is_guessable"]
