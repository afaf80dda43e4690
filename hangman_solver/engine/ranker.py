"""Occurrence-count letter ranking."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from ..core.models import RankedLetter
from ..data.dictionary import LanguageDictionary
from ..data.normalization import is_guessable
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class LetterRanker:
    """Orders guessable letters by how often they occur in the candidate words.

    Letters already placed in the word or already attempted are excluded,
    and so is punctuation. Equal counts are ordered alphabetically.
    """

    def rank(
        self,
        dictionary: LanguageDictionary,
        excluded: Optional[Iterable[str]] = None,
    ) -> List[RankedLetter]:
        skip: Set[str] = set(excluded or ())
        totals = dictionary.count_letters()
        ranked = [
            RankedLetter(letter, count)
            for letter, count in totals.items()
            if count > 0 and is_guessable(letter) and letter not in skip
        ]
        ranked.sort(key=lambda item: (-item.count, item.letter))
        LOGGER.debug(
            "Ranked %s letters over %s candidates (excluded: %s)",
            len(ranked),
            len(dictionary),
            "".join(sorted(skip)) or "-",
        )
        return ranked
