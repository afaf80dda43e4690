"""Pretty-print helpers for solve rounds."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence

from ..core.constants import SolveState
from ..core.models import RankedLetter

if TYPE_CHECKING:
    from ..engine.pattern import Puzzle
    from ..engine.solver import SolveSession


def format_ranking(ranking: Sequence[RankedLetter], limit: Optional[int] = 10) -> str:
    shown = ranking if limit is None else ranking[:limit]
    parts = [f"{item.letter}:{item.count}" for item in shown]
    if limit is not None and len(ranking) > limit:
        parts.append(f"(+{len(ranking) - limit} more)")
    return " ".join(parts) or "-"


def format_round(session: SolveSession, puzzle: Optional[Puzzle] = None) -> str:
    rendering = puzzle.display() if puzzle is not None else session.word.display()
    attempted = ",".join(session.attempted) or "-"
    lines = [
        f"word is      {rendering}",
        f"candidates   {len(session.candidates)}",
        f"ranking      {format_ranking(session.ranking)}",
        f"attempted    {attempted}",
        f"best option: {session.suggestion}",
    ]
    return "\n".join(lines)


def format_result(session: SolveSession, puzzle: Optional[Puzzle] = None) -> str:
    rendering = puzzle.display() if puzzle is not None else session.word.display()
    if session.state == SolveState.SOLVED:
        return f"solved: {rendering} ({len(session.history)} guesses)"

    lines = [f"no letters left to try for {rendering}"]
    remaining = session.candidates.words()
    if remaining:
        lines.append(f"remaining candidates: {', '.join(remaining[:10])}")
    return "\n".join(lines)


def print_round(session: SolveSession, puzzle: Optional[Puzzle] = None, *, stream=None) -> None:
    """Print the ranking, the current rendering and the suggested letter."""

    stream = stream or sys.stdout
    print(format_round(session, puzzle), file=stream)
