"""Interactive solver for hangman-style word puzzles.

This package exposes the public API surface via:

- ``hangman_solver.engine.pattern.Puzzle`` / ``Word``: the puzzle pattern model.
- ``hangman_solver.data.dictionary.LanguageDictionary``: candidate words with letter counts.
- ``hangman_solver.data.store.DictionaryStore``: JSON persistence per language.
- ``hangman_solver.engine.solver.SolveSession``: the guess/feedback state machine.
"""

from .data.dictionary import LanguageDictionary
from .data.store import DictionaryStore
from .engine.pattern import Puzzle, Word
from .engine.ranker import LetterRanker
from .engine.solver import SolveSession, SolverConfig, run_session

__all__ = [
    "DictionaryStore",
    "LanguageDictionary",
    "LetterRanker",
    "Puzzle",
    "SolveSession",
    "SolverConfig",
    "Word",
    "run_session",
]

__version__ = "0.1.0"
