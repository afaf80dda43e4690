"""Custom exception hierarchy for the hangman solver."""

from __future__ import annotations

from typing import Optional


class HangmanError(Exception):
    """Base exception for solver failures."""


class FormatParseError(HangmanError):
    """Raised when a puzzle format string cannot be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(
            f"invalid puzzle format {text!r}: {reason} "
            "(expected digits, '-', \"'\" and '_' between words, e.g. 4'1_5)"
        )


class DictionaryParseError(HangmanError):
    """Raised when a word list line holds a character outside the accepted set."""

    def __init__(self, line: int, position: int, char: str, source: Optional[str] = None) -> None:
        self.line = line
        self.position = position
        self.char = char
        self.source = source
        where = f"{source} " if source else ""
        super().__init__(
            f"unexpected character {char!r} in {where}at line {line}, position {position} "
            "(entries may hold letters, digits and ' - & , . !)"
        )


class RevealError(HangmanError):
    """Raised when feedback cannot be applied to a word."""


class ImmutablePositionError(RevealError):
    """Raised when a reveal targets a punctuation slot."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(f"position {position} holds fixed punctuation {char!r}")


class ConflictingRevealError(RevealError):
    """Raised when a revealed slot would be overwritten with another letter."""

    def __init__(self, position: int, existing: str, letter: str) -> None:
        self.position = position
        self.existing = existing
        self.letter = letter
        super().__init__(
            f"position {position} is already {existing!r}, cannot reveal {letter!r}"
        )


class ContradictoryFeedbackError(RevealError):
    """Raised when feedback disagrees with what earlier rounds established."""

    def __init__(self, letter: str, reason: str) -> None:
        self.letter = letter
        self.reason = reason
        super().__init__(f"{letter!r} {reason}")


class PositionOutOfRangeError(RevealError):
    """Raised when a reveal targets a position past the end of the word."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(f"position {position} is outside a word of length {length}")


class InputParseError(HangmanError):
    """Raised when a feedback line is malformed."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(
            f"could not read {line!r}: {reason} (expected letter,(pos,pos,...) e.g. e,(1,4) or x,())"
        )


class InputClosedError(HangmanError):
    """Raised when the feedback source runs out of input."""


class PersistenceError(HangmanError):
    """Raised when a persisted dictionary is missing, unreadable or corrupt."""


class SolverStateError(HangmanError):
    """Raised when a solve session is driven out of order."""
