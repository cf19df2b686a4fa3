"""
Vocabulary membership oracle.

The dictionary only keeps identity hashes (see Word.identity_hash), never the
words themselves: the game needs "is this a legal guess?" and nothing else.
It is built once at startup and read-only afterwards, so one instance can be
shared freely. add_word/add_words exist for incremental construction; callers
that mutate after sharing must serialize writers themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

import numpy as np

from packages.engine.errors import DictionaryParseFailure, WordTooShort
from packages.engine.word import Word
from .io import read_hashes, read_text, write_hashes

logger = logging.getLogger(__name__)


class Dictionary:
    def __init__(self, hashes: Iterable[int] = ()):
        self._valid: Set[int] = {int(h) for h in hashes}

    def __len__(self) -> int:
        return len(self._valid)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, Word) and self.is_valid(word)

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words)"

    def add_word(self, word: Word) -> None:
        self._valid.add(word.identity_hash())

    def add_words(self, words: Iterable[Word]) -> None:
        # Hash everything first so a failing iterable leaves us untouched
        hashes: List[int] = [w.identity_hash() for w in words]
        self._valid.update(hashes)

    def is_valid(self, word: Word) -> bool:
        return word.identity_hash() in self._valid

    def hashes(self) -> np.ndarray:
        """Sorted uint64 array of every identity hash (a copy)."""
        return np.array(sorted(self._valid), dtype=np.uint64)

    @classmethod
    def parse(cls, text: str) -> "Dictionary":
        """
        Build from whitespace-separated tokens.

        All-or-nothing: the first token shorter than a Word raises
        DictionaryParseFailure and no dictionary is returned. Empty text gives
        an empty dictionary.
        """
        hashes: Set[int] = set()
        for token in text.split():
            try:
                hashes.add(Word.from_text(token).identity_hash())
            except WordTooShort as e:
                raise DictionaryParseFailure(token) from e
        return cls(hashes)

    @classmethod
    def from_source(cls, path: Path | str) -> "Dictionary":
        """
        Read a vocabulary text file and parse it.

        Raises DictionaryIoFailure if the file can't be read and
        DictionaryParseFailure if it contains a malformed token.
        """
        d = cls.parse(read_text(path))
        logger.info("Loaded %s words from %s", len(d), path)
        return d

    @classmethod
    def from_hash_file(cls, path: Path | str) -> "Dictionary":
        """Load a pre-hashed vocabulary written by save_hash_file."""
        d = cls(read_hashes(path).tolist())
        logger.info("Loaded %s pre-hashed words from %s", len(d), path)
        return d

    def save_hash_file(self, path: Path | str) -> str:
        return write_hashes(self.hashes().tolist(), path)
