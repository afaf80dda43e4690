import io
import unittest
from typing import Callable, List

from hangman_solver.core.constants import SolveState
from hangman_solver.core.exceptions import InputClosedError, InputParseError
from hangman_solver.core.models import Feedback
from hangman_solver.data.dictionary import LanguageDictionary
from hangman_solver.engine.pattern import Puzzle
from hangman_solver.engine.solver import SolveSession, run_session
from hangman_solver.io.console import ConsolePrompter, parse_feedback


def scripted_input(lines: List[str]) -> Callable[[str], str]:
    pending = list(lines)

    def _input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _input


class ParseFeedbackTests(unittest.TestCase):
    def test_hit_with_positions(self) -> None:
        self.assertEqual(parse_feedback("t,(0,3)"), Feedback("t", (0, 3)))

    def test_whitespace_case_and_duplicates_are_tolerated(self) -> None:
        self.assertEqual(parse_feedback("  E , ( 3, 1 ,3 ) "), Feedback("e", (1, 3)))

    def test_empty_group_is_a_miss(self) -> None:
        feedback = parse_feedback("x,()")
        self.assertTrue(feedback.is_miss)
        self.assertEqual(feedback.letter, "x")

    def test_malformed_lines_raise(self) -> None:
        for line in ("", "t", "t (0)", "tt,(0)", "-,(0)", "t,0", "t,(a)", "t,(-1)", "t,(0", "t,(²)"):
            with self.subTest(line=line):
                with self.assertRaises(InputParseError):
                    parse_feedback(line)


class ConsolePrompterTests(unittest.TestCase):
    def test_malformed_feedback_reprompts(self) -> None:
        stream = io.StringIO()
        prompter = ConsolePrompter(
            input_fn=scripted_input(["nonsense", "t,(0,x)", "t,(0,3)"]), stream=stream
        )
        session = SolveSession(Puzzle.parse("4").primary_word, LanguageDictionary.load(["test"]))
        session.advance()
        self.assertEqual(prompter.request_feedback(session), Feedback("t", (0, 3)))
        self.assertEqual(stream.getvalue().count("error:"), 2)

    def test_superscript_position_reprompts(self) -> None:
        stream = io.StringIO()
        prompter = ConsolePrompter(
            input_fn=scripted_input(["t,(²)", "t,(0,3)"]), stream=stream
        )
        session = SolveSession(Puzzle.parse("4").primary_word, LanguageDictionary.load(["test"]))
        session.advance()
        self.assertEqual(prompter.request_feedback(session), Feedback("t", (0, 3)))
        self.assertIn("is not a non-negative position", stream.getvalue())

    def test_closed_input_raises(self) -> None:
        prompter = ConsolePrompter(input_fn=scripted_input([]), stream=io.StringIO())
        session = SolveSession(Puzzle.parse("4").primary_word, LanguageDictionary.load(["test"]))
        session.advance()
        with self.assertRaises(InputClosedError):
            prompter.request_feedback(session)

    def test_full_console_session(self) -> None:
        puzzle = Puzzle.parse("4")
        stream = io.StringIO()
        prompter = ConsolePrompter(
            puzzle=puzzle,
            input_fn=scripted_input(["t,(0,3)", "e,(9)", "e,(1)", "x,()", "s,(2)"]),
            stream=stream,
        )
        session = SolveSession(puzzle.primary_word, LanguageDictionary.load(["test", "text", "exam"]))
        state = run_session(session, prompter)

        output = stream.getvalue()
        self.assertEqual(state, SolveState.SOLVED)
        self.assertIn("best option: t", output)
        self.assertIn("word is      t__t", output)
        self.assertIn("outside a word of length 4", output)
        self.assertIn("solved: test (4 guesses)", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
