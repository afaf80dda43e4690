"""Per-language candidate dictionary with letter occurrence counts."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from ..core.exceptions import DictionaryParseError
from ..engine.pattern import Word
from ..utils.logger import get_logger
from .normalization import clean_word, invalid_char_index


LOGGER = get_logger(__name__)


class LanguageDictionary:
    """Maps each lowercase word to a ``Counter`` of its characters.

    The dictionary only ever shrinks: :meth:`filter_matching` returns a new
    subset and :meth:`remove_containing` drops entries in place. Nothing is
    inserted after :meth:`load`.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, Mapping[str, int]]] = None,
        language: str = "",
    ) -> None:
        self.language = language
        self._entries: Dict[str, Counter] = {
            word: Counter(counts) for word, counts in (entries or {}).items()
        }

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def load(cls, lines: Iterable[str], language: str = "") -> "LanguageDictionary":
        """Build a dictionary from a line-delimited word list.

        Blank lines are skipped and duplicate lines collapse into one entry.
        Raises :class:`DictionaryParseError` on the first disallowed character.
        """

        entries: Dict[str, Counter] = {}
        for line_number, line in enumerate(lines, start=1):
            word = clean_word(line)
            if not word:
                continue
            bad_index = invalid_char_index(word)
            if bad_index is not None:
                raise DictionaryParseError(line_number, bad_index, word[bad_index])
            entries[word] = Counter(word)
        LOGGER.debug("Parsed %s entries for %r", len(entries), language or "<unnamed>")
        return cls(entries, language=language)

    @classmethod
    def from_text(cls, text: str, language: str = "") -> "LanguageDictionary":
        return cls.load(text.splitlines(), language=language)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------
    def filter_matching(self, word: Word) -> "LanguageDictionary":
        """Return the entries consistent with ``word``; ``self`` is left untouched."""

        subset = {key: counts for key, counts in self._entries.items() if word.matches(key)}
        return LanguageDictionary(subset, language=self.language)

    def remove_containing(self, letter: str) -> int:
        """Drop every entry containing ``letter`` and return how many were removed."""

        doomed = [key for key in self._entries if letter in key]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    # ------------------------------------------------------------------
    # Letter statistics
    # ------------------------------------------------------------------
    def count_letters(self) -> Counter:
        totals: Counter = Counter()
        for counts in self._entries.values():
            totals.update(counts)
        return totals

    def rank_letters(self) -> List[str]:
        """Characters by descending total count, ties broken alphabetically."""

        totals = self.count_letters()
        ranked = sorted(
            ((char, count) for char, count in totals.items() if count > 0),
            key=lambda item: (-item[1], item[0]),
        )
        return [char for char, _ in ranked]

    # ------------------------------------------------------------------
    # Mapping helpers
    # ------------------------------------------------------------------
    def counts_for(self, word: str) -> Optional[Counter]:
        counts = self._entries.get(word)
        return Counter(counts) if counts is not None else None

    def words(self) -> List[str]:
        return sorted(self._entries)

    def copy(self) -> "LanguageDictionary":
        return LanguageDictionary(self._entries, language=self.language)

    def to_jsonable(self) -> Dict[str, Dict[str, int]]:
        return {word: dict(sorted(counts.items())) for word, counts in sorted(self._entries.items())}

    @classmethod
    def from_jsonable(
        cls, payload: Mapping[str, Mapping[str, int]], language: str = ""
    ) -> "LanguageDictionary":
        return cls(payload, language=language)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageDictionary):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LanguageDictionary(language={self.language!r}, entries={len(self._entries)})"
