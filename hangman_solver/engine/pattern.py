"""Puzzle pattern model: words made of letter and punctuation fragments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Set

from ..core.constants import BLANK_GLYPH, FORMAT_CHARS, FORMAT_PUNCTUATION, WORD_SEPARATOR
from ..core.exceptions import (
    ConflictingRevealError,
    FormatParseError,
    ImmutablePositionError,
    PositionOutOfRangeError,
)
from ..core.models import Fragment, LetterFragment, PunctuationFragment


class Word:
    """An ordered sequence of fragments describing one word of the puzzle.

    Comparing a ``Word`` with a plain string uses :meth:`matches`, so
    ``Word.from_pattern("t__t") == "test"`` holds.
    """

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        self.fragments: List[Fragment] = list(fragments)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_format(cls, text: str) -> "Word":
        """Build a word from a compact format such as ``4'1`` or ``2-7``.

        Every digit expands to that many unknown letters on its own, so
        ``12`` means one letter followed by two more.
        """

        fragments: List[Fragment] = []
        for index, char in enumerate(text):
            if char.isdigit() and char in FORMAT_CHARS:
                fragments.extend(LetterFragment() for _ in range(int(char)))
            elif char in FORMAT_PUNCTUATION:
                fragments.append(PunctuationFragment(char))
            else:
                raise FormatParseError(text, f"unexpected character {char!r} at index {index}")
        return cls(fragments)

    @classmethod
    def from_pattern(cls, text: str) -> "Word":
        """Build a word from a rendered pattern such as ``t__t`` or ``don'_``."""

        fragments: List[Fragment] = []
        for char in text:
            if char == BLANK_GLYPH:
                fragments.append(LetterFragment())
            elif char.isalnum():
                fragments.append(LetterFragment(char.lower()))
            else:
                fragments.append(PunctuationFragment(char))
        return cls(fragments)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def matches(self, candidate: str) -> bool:
        if len(candidate) != len(self.fragments):
            return False
        return all(fragment.accepts(char) for fragment, char in zip(self.fragments, candidate))

    @property
    def is_solved(self) -> bool:
        return not any(
            isinstance(fragment, LetterFragment) and fragment.is_blank
            for fragment in self.fragments
        )

    def unknown_positions(self) -> List[int]:
        return [
            index
            for index, fragment in enumerate(self.fragments)
            if isinstance(fragment, LetterFragment) and fragment.is_blank
        ]

    def letter_count(self) -> int:
        return sum(1 for fragment in self.fragments if isinstance(fragment, LetterFragment))

    def revealed_letters(self) -> Set[str]:
        return {
            fragment.revealed
            for fragment in self.fragments
            if isinstance(fragment, LetterFragment) and fragment.revealed is not None
        }

    def display(self) -> str:
        return "".join(str(fragment) for fragment in self.fragments)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def reveal(self, letter: str, positions: Iterable[int]) -> None:
        """Place ``letter`` at every position, or change nothing on error."""

        letter = letter.lower()
        updates = {}
        for position in positions:
            if position < 0 or position >= len(self.fragments):
                raise PositionOutOfRangeError(position, len(self.fragments))
            fragment = self.fragments[position]
            if isinstance(fragment, PunctuationFragment):
                raise ImmutablePositionError(position, fragment.char)
            if fragment.revealed is not None and fragment.revealed != letter:
                raise ConflictingRevealError(position, fragment.revealed, letter)
            updates[position] = LetterFragment(letter)

        for position, fragment in updates.items():
            self.fragments[position] = fragment

    def copy(self) -> "Word":
        return Word(self.fragments)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __getitem__(self, index: int) -> Fragment:
        return self.fragments[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.matches(other)
        if isinstance(other, Word):
            return self.fragments == other.fragments
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Word({self.display()!r})"


@dataclass
class Puzzle:
    """One or more words forming the full guessing target."""

    words: List[Word] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "Puzzle":
        if not text:
            raise FormatParseError(text, "format is empty")
        for index, char in enumerate(text):
            if char not in FORMAT_CHARS:
                raise FormatParseError(text, f"unexpected character {char!r} at index {index}")

        words = [Word.from_format(chunk) for chunk in text.split(WORD_SEPARATOR)]
        for number, word in enumerate(words, start=1):
            if word.letter_count() == 0:
                raise FormatParseError(text, f"word {number} has no letters")
        return cls(words)

    @property
    def primary_word(self) -> Word:
        return self.words[0]

    @property
    def is_solved(self) -> bool:
        return all(word.is_solved for word in self.words)

    def display(self) -> str:
        return " ".join(word.display() for word in self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __getitem__(self, index: int) -> Word:
        return self.words[index]

    def __str__(self) -> str:
        return self.display()
