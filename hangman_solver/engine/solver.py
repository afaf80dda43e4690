"""Interactive solve loop.

A :class:`SolveSession` walks the states of :class:`SolveState`:

  RANKING -> AWAITING_GUESS_CHOICE -> AWAITING_FEEDBACK -> APPLYING -> RANKING

until the word has no blank letters (SOLVED) or no unattempted letter is
left in the ranking (EXHAUSTED). :func:`run_session` drives a session
against any :class:`FeedbackSource`, such as the console prompter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Set

from ..core.constants import DEFAULT_DATA_DIR, DEFAULT_LANGUAGE, SolveState
from ..core.exceptions import ContradictoryFeedbackError, RevealError, SolverStateError
from ..core.models import Feedback, RankedLetter
from ..data.dictionary import LanguageDictionary
from ..data.store import DictionaryStore
from ..utils.logger import get_logger
from .pattern import Puzzle, Word
from .ranker import LetterRanker


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    puzzle: Puzzle
    languages: List[str] = field(default_factory=lambda: [DEFAULT_LANGUAGE])
    update_paths: Optional[List[Path]] = None
    data_dir: Path | str = DEFAULT_DATA_DIR
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if not self.languages:
            raise ValueError("at least one language is required")
        if self.update_paths is not None and len(self.update_paths) != len(self.languages):
            raise ValueError(
                f"update mode needs one word list per language ({len(self.languages)} languages, "
                f"{len(self.update_paths)} paths)"
            )

    @property
    def is_update_mode(self) -> bool:
        return self.update_paths is not None

    def to_store(self) -> DictionaryStore:
        return DictionaryStore(self.data_dir)

    def load_dictionaries(self) -> List[LanguageDictionary]:
        """Build (update mode) or load each selected language, in order."""

        store = self.to_store()
        if self.update_paths is None:
            return [store.load(language) for language in self.languages]
        return [
            store.build_from_wordlist(language, path)
            for language, path in zip(self.languages, self.update_paths, strict=True)
        ]


class FeedbackSource(Protocol):
    """Protocol implemented by anything that answers the solver's suggestions."""

    def show_round(self, session: "SolveSession") -> None:
        ...

    def request_feedback(self, session: "SolveSession") -> Feedback:
        ...

    def report_error(self, error: Exception) -> None:
        ...

    def show_result(self, session: "SolveSession") -> None:
        ...


class SolveSession:
    """State machine for solving one word against one language dictionary.

    The session owns ``word`` and a working subset of ``dictionary``; the
    dictionary passed in is filtered into a new object and never mutated.
    """

    def __init__(
        self,
        word: Word,
        dictionary: LanguageDictionary,
        ranker: Optional[LetterRanker] = None,
    ) -> None:
        self.word = word
        self.ranker = ranker or LetterRanker()
        self.candidates = dictionary.filter_matching(word)
        self.attempted: List[str] = []
        self.misses: Set[str] = set()
        self.history: List[Feedback] = []
        self.ranking: List[RankedLetter] = []
        self.suggestion: Optional[str] = None
        self.state = SolveState.RANKING
        LOGGER.debug("Session started for %s with %s candidates", word, len(self.candidates))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def advance(self) -> SolveState:
        """Rank the remaining letters and pick the next suggestion."""

        if self.state != SolveState.RANKING:
            raise SolverStateError(f"cannot rank while {self.state.value}")

        if self.word.is_solved:
            self.ranking = []
            self.suggestion = None
            self.state = SolveState.SOLVED
            LOGGER.info("Solved: %s", self.word)
            return self.state

        self.ranking = self.ranker.rank(self.candidates, self.excluded_letters())
        self.state = SolveState.AWAITING_GUESS_CHOICE

        if not self.ranking:
            self.suggestion = None
            self.state = SolveState.EXHAUSTED
            LOGGER.info("No letters left to try for %s", self.word)
            return self.state

        self.suggestion = self.ranking[0].letter
        self.state = SolveState.AWAITING_FEEDBACK
        return self.state

    def apply_feedback(self, feedback: Feedback) -> SolveState:
        """Apply a guess result; on a reveal error nothing changes and the error propagates."""

        if self.state != SolveState.AWAITING_FEEDBACK:
            raise SolverStateError(f"cannot apply feedback while {self.state.value}")

        letter = feedback.letter.lower()
        if feedback.is_miss and letter in self.word.revealed_letters():
            raise ContradictoryFeedbackError(letter, "is already placed in the word, it cannot be a miss")
        if not feedback.is_miss and letter in self.misses:
            raise ContradictoryFeedbackError(letter, "was reported as a miss earlier")

        self.state = SolveState.APPLYING
        try:
            if feedback.is_miss:
                self.misses.add(letter)
                removed = self.candidates.remove_containing(letter)
                LOGGER.debug("Miss on %r removed %s candidates", letter, removed)
            else:
                self.word.reveal(letter, feedback.positions)
        except RevealError:
            self.state = SolveState.AWAITING_FEEDBACK
            raise

        if letter not in self.attempted:
            self.attempted.append(letter)
        self.history.append(feedback)
        self.candidates = self.candidates.filter_matching(self.word)
        LOGGER.debug("After %r: %s -> %s candidates", letter, self.word, len(self.candidates))
        self.state = SolveState.RANKING
        return self.state

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def excluded_letters(self) -> Set[str]:
        return set(self.attempted) | self.word.revealed_letters()

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal


def run_session(session: SolveSession, source: FeedbackSource) -> SolveState:
    """Drive ``session`` to a terminal state, re-prompting after reveal errors."""

    while True:
        state = session.advance()
        if state.is_terminal:
            source.show_result(session)
            return state

        source.show_round(session)
        while True:
            feedback = source.request_feedback(session)
            try:
                session.apply_feedback(feedback)
            except RevealError as exc:
                LOGGER.warning("Feedback rejected: %s", exc)
                source.report_error(exc)
                continue
            break
