"""Shared constants and enumerations for the hangman solver."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import FrozenSet

# Words are separated by ``_`` inside a format string ("4_3" is two words).
WORD_SEPARATOR = "_"

# Glyph used when rendering a letter slot that is still unknown.
BLANK_GLYPH = "_"

# Punctuation allowed in a format string: "that's" -> 4'1, "mind-blown" -> 4-5.
FORMAT_PUNCTUATION: FrozenSet[str] = frozenset({"-", "'"})
FORMAT_CHARS: FrozenSet[str] = frozenset("0123456789") | FORMAT_PUNCTUATION | {WORD_SEPARATOR}

# Non-alphanumeric characters tolerated inside dictionary entries.
DICTIONARY_PUNCTUATION: FrozenSet[str] = frozenset("'-&,.!")

DEFAULT_LANGUAGE = "english"
DEFAULT_DATA_DIR = Path("data")
DICTIONARY_SUFFIX = ".json"


class SolveState(str, Enum):
    """States of the interactive solve loop."""

    RANKING = "RANKING"
    AWAITING_GUESS_CHOICE = "AWAITING_GUESS_CHOICE"
    AWAITING_FEEDBACK = "AWAITING_FEEDBACK"
    APPLYING = "APPLYING"
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"

    @property
    def is_terminal(self) -> bool:
        return self in {SolveState.SOLVED, SolveState.EXHAUSTED}
