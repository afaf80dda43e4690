"""CLI entrypoint for the interactive hangman solver."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from hangman_solver.core.constants import DEFAULT_DATA_DIR, DEFAULT_LANGUAGE, SolveState
from hangman_solver.core.exceptions import FormatParseError, HangmanError, InputClosedError
from hangman_solver.engine.pattern import Puzzle
from hangman_solver.engine.solver import SolveSession, SolverConfig, run_session
from hangman_solver.io.console import ConsolePrompter
from hangman_solver.utils.logger import configure_logging, get_logger


LOGGER = get_logger("hangman_solver.main")


def parse_puzzle(text: str) -> Puzzle:
    try:
        return Puzzle.parse(text)
    except FormatParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def split_commas(text: str) -> List[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Suggest the next hangman guess from a per-language dictionary",
    )
    parser.add_argument(
        "pos_format",
        type=parse_puzzle,
        metavar="FORMAT",
        help="Puzzle format: digits are runs of unknown letters, '-' and \"'\" are "
        "literal punctuation, '_' separates words (e.g. 4'1 or 4-5_3)",
    )
    parser.add_argument(
        "-l",
        "--language",
        type=split_commas,
        default=[DEFAULT_LANGUAGE],
        help="Comma-separated languages to find words in (default: english)",
    )
    parser.add_argument(
        "-u",
        "--update",
        type=split_commas,
        metavar="PATHS",
        help="Rebuild each selected language from a line-delimited word list (comma-separated, one per language)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Directory holding the persisted dictionaries (default: data)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if not args.language:
        parser.error("--language needs at least one language")
    if args.update is not None and len(args.update) != len(args.language):
        parser.error(
            f"--update needs one path per language ({len(args.language)} languages, "
            f"{len(args.update)} paths)"
        )

    config = SolverConfig(
        puzzle=args.pos_format,
        languages=args.language,
        update_paths=[Path(p) for p in args.update] if args.update is not None else None,
        data_dir=args.data_dir,
        log_level=level,
    )

    try:
        dictionaries = config.load_dictionaries()
    except HangmanError as exc:
        LOGGER.error("Could not prepare dictionaries: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if len(config.puzzle) > 1:
        LOGGER.warning(
            "Puzzle has %s words; only the first one (%s) is solved",
            len(config.puzzle),
            config.puzzle.primary_word,
        )

    session = SolveSession(config.puzzle.primary_word, dictionaries[0])
    prompter = ConsolePrompter(puzzle=config.puzzle)
    try:
        final_state = run_session(session, prompter)
    except InputClosedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0 if final_state == SolveState.SOLVED else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
