import unittest

from hangman_solver.core.exceptions import (
    ConflictingRevealError,
    FormatParseError,
    ImmutablePositionError,
    PositionOutOfRangeError,
)
from hangman_solver.core.models import LetterFragment, PunctuationFragment
from hangman_solver.engine.pattern import Puzzle, Word


class FragmentTests(unittest.TestCase):
    def test_fragment_comparison(self) -> None:
        self.assertTrue(LetterFragment("c").accepts("c"))
        self.assertTrue(LetterFragment().accepts("c"))
        self.assertTrue(LetterFragment().accepts("7"))
        self.assertFalse(LetterFragment().accepts("-"))
        self.assertFalse(PunctuationFragment("-").accepts("a"))
        self.assertTrue(PunctuationFragment("'").accepts("'"))


class WordMatchTests(unittest.TestCase):
    def test_blank_word_matches_any_word_of_same_length(self) -> None:
        self.assertEqual(Word.from_pattern("____"), "test")
        self.assertTrue(Word.from_pattern("____").matches("t3st"))

    def test_punctuation_must_line_up(self) -> None:
        self.assertNotEqual(Word.from_pattern("__-_"), "test")
        self.assertTrue(Word.from_pattern("__-_").matches("ad-x"))
        self.assertFalse(Word.from_pattern("___").matches("ad-"))

    def test_length_mismatch_never_matches(self) -> None:
        word = Word.from_pattern("t__t")
        self.assertFalse(word.matches("nau"))
        self.assertFalse(word.matches("tests"))
        self.assertFalse(word.matches(""))

    def test_revealed_letter_must_match(self) -> None:
        word = Word.from_pattern("t__t")
        self.assertTrue(word.matches("test"))
        self.assertFalse(word.matches("tess"))
        self.assertFalse(word.matches("best"))

    def test_from_pattern_builds_blank_letters(self) -> None:
        self.assertEqual(Word.from_pattern("___"), Word([LetterFragment()] * 3))

    def test_from_pattern_reads_revealed_letters_and_punctuation(self) -> None:
        word = Word.from_pattern("don'_")
        self.assertEqual(word[0], LetterFragment("d"))
        self.assertEqual(word[3], PunctuationFragment("'"))
        self.assertEqual(word[4], LetterFragment())
        self.assertEqual(word.display(), "don'_")


class WordRevealTests(unittest.TestCase):
    def test_reveal_renders_letters(self) -> None:
        word = Word.from_pattern("____")
        word.reveal("t", [0, 3])
        self.assertEqual(word.display(), "t__t")
        self.assertTrue(word.matches("test"))
        self.assertEqual(word.revealed_letters(), {"t"})
        self.assertEqual(word.unknown_positions(), [1, 2])

    def test_reveal_punctuation_raises_and_leaves_word_unchanged(self) -> None:
        word = Word.from_format("2-2")
        with self.assertRaises(ImmutablePositionError):
            word.reveal("a", [0, 2])
        self.assertEqual(word.display(), "__-__")

    def test_reveal_same_letter_twice_is_noop(self) -> None:
        word = Word.from_pattern("t___")
        word.reveal("t", [0])
        self.assertEqual(word.display(), "t___")

    def test_reveal_different_letter_raises(self) -> None:
        word = Word.from_pattern("t___")
        with self.assertRaises(ConflictingRevealError) as ctx:
            word.reveal("s", [1, 0])
        self.assertEqual(ctx.exception.position, 0)
        self.assertEqual(word.display(), "t___")

    def test_reveal_out_of_range_raises(self) -> None:
        word = Word.from_format("3")
        with self.assertRaises(PositionOutOfRangeError):
            word.reveal("a", [1, 3])
        self.assertEqual(word.display(), "___")

    def test_reveal_lowercases_letter(self) -> None:
        word = Word.from_format("2")
        word.reveal("Q", [1])
        self.assertEqual(word.display(), "_q")

    def test_is_solved(self) -> None:
        word = Word.from_format("1'1")
        self.assertFalse(word.is_solved)
        word.reveal("a", [0])
        word.reveal("s", [2])
        self.assertTrue(word.is_solved)


class PuzzleParseTests(unittest.TestCase):
    def test_mixed_format_expands_fragments(self) -> None:
        puzzle = Puzzle.parse("2-7'1")
        self.assertEqual(len(puzzle), 1)
        expected = (
            [LetterFragment()] * 2
            + [PunctuationFragment("-")]
            + [LetterFragment()] * 7
            + [PunctuationFragment("'")]
            + [LetterFragment()]
        )
        self.assertEqual(puzzle.primary_word.fragments, expected)

    def test_separator_splits_words(self) -> None:
        puzzle = Puzzle.parse("4-5_3")
        self.assertEqual([len(word) for word in puzzle], [10, 3])
        self.assertEqual(puzzle.display(), "____-_____ ___")

    def test_each_digit_is_its_own_run(self) -> None:
        self.assertEqual(len(Puzzle.parse("12").primary_word), 3)

    def test_invalid_character_raises(self) -> None:
        with self.assertRaises(FormatParseError) as ctx:
            Puzzle.parse("4a")
        self.assertIn("'a'", str(ctx.exception))

    def test_empty_and_letterless_words_raise(self) -> None:
        for text in ("", "4__3", "-", "0"):
            with self.subTest(text=text):
                with self.assertRaises(FormatParseError):
                    Puzzle.parse(text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
