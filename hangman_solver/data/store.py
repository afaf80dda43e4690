"""Persistent per-language dictionary store.

Each language is saved as a JSON document under ``data/<language>.json``::

    {
      "language": "english",
      "created_at": "2026-01-01T00:00:00+00:00",
      "word_count": 2,
      "words": {"exam": {"a": 1, "e": 1, "m": 1, "x": 1}, "test": {...}}
    }

Documents are written to a temporary sibling first and moved into place,
so an interrupted update never leaves a half-written dictionary behind.
"""

from __future__ import annotations

import json
import os
import re
import tempfile
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from ..core.constants import DEFAULT_DATA_DIR, DICTIONARY_SUFFIX
from ..core.exceptions import DictionaryParseError, PersistenceError
from ..utils.logger import get_logger
from .dictionary import LanguageDictionary
from .normalization import clean_word, invalid_char_index


LOGGER = get_logger(__name__)

_LANGUAGE_RE = re.compile(r"^[a-z0-9_-]+$")


class DictionaryStore:
    """Save and load :class:`LanguageDictionary` instances as JSON documents."""

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR) -> None:
        self.data_dir = Path(data_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def path_for(self, language: str) -> Path:
        key = language.strip().lower()
        if not _LANGUAGE_RE.match(key):
            raise PersistenceError(
                f"invalid language name {language!r}: use letters, digits, '-' or '_'"
            )
        return self.data_dir / f"{key}{DICTIONARY_SUFFIX}"

    def exists(self, language: str) -> bool:
        return self.path_for(language).exists()

    def save(self, language: str, dictionary: LanguageDictionary) -> Path:
        """Persist ``dictionary`` for ``language`` and return the written path."""

        path = self.path_for(language)
        doc = {
            "language": language.strip().lower(),
            "created_at": datetime.now(timezone.utc).isoformat(),
            "word_count": len(dictionary),
            "words": dictionary.to_jsonable(),
        }
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.stem}.", suffix=".tmp", dir=str(self.data_dir)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(doc, handle, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(f"could not write dictionary {path}: {exc}") from exc

        LOGGER.info("Dictionary saved: %s (%s words)", path, len(dictionary))
        return path

    def load(self, language: str) -> LanguageDictionary:
        path = self.path_for(language)
        if not path.exists():
            raise PersistenceError(
                f"no dictionary for {language!r} at {path}; build one with --update"
            )
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            raise PersistenceError(f"could not read dictionary {path}: {exc}") from exc

        words = self._validate_document(doc, path)
        dictionary = LanguageDictionary.from_jsonable(words, language=language.strip().lower())
        LOGGER.info("Dictionary loaded: %s (%s words)", path, len(dictionary))
        return dictionary

    def build_from_wordlist(self, language: str, source: Path | str) -> LanguageDictionary:
        """Parse a raw word list and persist it; nothing is written if parsing fails."""

        source = Path(source)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"could not read word list {source}: {exc}") from exc

        try:
            dictionary = LanguageDictionary.from_text(text, language=language.strip().lower())
        except DictionaryParseError as exc:
            raise DictionaryParseError(exc.line, exc.position, exc.char, source=str(source)) from exc
        self.save(language, dictionary)
        return dictionary

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _validate_document(doc: Any, path: Path) -> Dict[str, Dict[str, int]]:
        if not isinstance(doc, dict) or not isinstance(doc.get("words"), dict):
            raise PersistenceError(f"malformed dictionary {path}: missing 'words' mapping")

        words: Dict[str, Dict[str, int]] = {}
        for word, counts in doc["words"].items():
            if not word or clean_word(word) != word or invalid_char_index(word) is not None:
                raise PersistenceError(f"malformed dictionary {path}: invalid word {word!r}")
            if not isinstance(counts, dict):
                raise PersistenceError(f"malformed dictionary {path}: entry {word!r} is not a mapping")
            for char, count in counts.items():
                if len(char) != 1 or isinstance(count, bool) or not isinstance(count, int) or count < 1:
                    raise PersistenceError(
                        f"malformed dictionary {path}: bad count {char!r}={count!r} in {word!r}"
                    )
            if Counter(counts) != Counter(word):
                raise PersistenceError(f"malformed dictionary {path}: counts do not match {word!r}")
            words[word] = counts
        return words
