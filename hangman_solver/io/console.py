"""Console feedback source for the interactive solve loop."""

from __future__ import annotations

import re
import sys
from typing import Callable, List, Optional, TextIO

from ..core.exceptions import InputClosedError, InputParseError
from ..core.models import Feedback
from ..engine.pattern import Puzzle
from ..engine.solver import SolveSession
from ..utils.logger import get_logger
from ..utils.pretty import format_result, print_round


LOGGER = get_logger(__name__)

PROMPT = "enter your guess as letter,(pos,pos,...) or letter,() for a miss: "

_FEEDBACK_RE = re.compile(r"^\s*([^,\s]+)\s*,\s*(.*?)\s*$")
_POSITION_RE = re.compile(r"[0-9]+")


def parse_feedback(line: str) -> Feedback:
    """Parse ``letter,(pos,pos,...)`` into a :class:`Feedback`.

    Positions are 0-based; an empty ``()`` means the letter is not in the word.
    """

    match = _FEEDBACK_RE.match(line)
    if not match:
        raise InputParseError(line, "missing ',' between letter and positions")

    letter, group = match.groups()
    if len(letter) != 1 or not letter.isalnum():
        raise InputParseError(line, f"{letter!r} is not a single letter")
    if not (group.startswith("(") and group.endswith(")")):
        raise InputParseError(line, "positions must be wrapped in parentheses")

    positions: List[int] = []
    for token in group[1:-1].split(","):
        token = token.strip()
        if not token:
            continue
        if not _POSITION_RE.fullmatch(token):
            raise InputParseError(line, f"{token!r} is not a non-negative position")
        position = int(token)
        if position not in positions:
            positions.append(position)

    return Feedback(letter.lower(), tuple(sorted(positions)))


class ConsolePrompter:
    """Reads feedback lines from the console, re-prompting on malformed input."""

    def __init__(
        self,
        puzzle: Optional[Puzzle] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.puzzle = puzzle
        self.input_fn = input_fn or input
        self.stream = stream or sys.stdout

    def show_round(self, session: SolveSession) -> None:
        print_round(session, self.puzzle, stream=self.stream)

    def request_feedback(self, session: SolveSession) -> Feedback:
        while True:
            try:
                line = self.input_fn(PROMPT)
            except EOFError as exc:
                raise InputClosedError("input closed before the word was solved") from exc
            try:
                return parse_feedback(line)
            except InputParseError as exc:
                LOGGER.warning("Malformed feedback: %r", line)
                self.report_error(exc)

    def report_error(self, error: Exception) -> None:
        print(f"error: {error}", file=self.stream)

    def show_result(self, session: SolveSession) -> None:
        print(format_result(session, self.puzzle), file=self.stream)
