"""
Error kinds raised by the engine and the dictionary layer.

Everything derives from WordleError so callers (e.g. the CLI) can catch the
whole family at the top level.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for all wordle errors."""


class WordTooShort(WordleError):
    """Raw text had fewer characters than a Word needs."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Word too short: got {length} character(s)")


class DictionaryError(WordleError):
    """Base class for vocabulary loading failures."""


class DictionaryIoFailure(DictionaryError):
    """The vocabulary source could not be read."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Could not read vocabulary source: {self.path}")


class DictionaryParseFailure(DictionaryError):
    """A token in the vocabulary source is not a valid Word."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid vocabulary token: {token!r}")


class GameFinished(WordleError):
    """A guess was submitted after the game ended."""
