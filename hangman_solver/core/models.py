"""Data models supporting the hangman solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .constants import BLANK_GLYPH


@dataclass(frozen=True)
class LetterFragment:
    """A guessable slot, either still unknown or holding its revealed letter."""

    revealed: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return self.revealed is None

    def accepts(self, char: str) -> bool:
        if self.revealed is None:
            return char.isalnum()
        return char == self.revealed

    def __str__(self) -> str:
        return self.revealed or BLANK_GLYPH


@dataclass(frozen=True)
class PunctuationFragment:
    """A fixed separator such as an apostrophe or hyphen."""

    char: str

    def accepts(self, char: str) -> bool:
        return char == self.char

    def __str__(self) -> str:
        return self.char


Fragment = Union[LetterFragment, PunctuationFragment]


@dataclass(frozen=True)
class Feedback:
    """Result of one guess: where ``letter`` occurs, empty for a miss."""

    letter: str
    positions: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def is_miss(self) -> bool:
        return not self.positions


@dataclass(frozen=True)
class RankedLetter:
    letter: str
    count: int
