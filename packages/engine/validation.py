"""
Guess validation against a vocabulary.

A guess is acceptable iff its identity hash is in the dictionary. Shape
(length) problems are already reported by Word.from_text, so this module only
answers the membership question the game loop needs before scoring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .word import Word

if TYPE_CHECKING:
    from packages.datasets.dictionary import Dictionary


def validate_guess(word: Word, dictionary: "Dictionary") -> bool:
    """Return True if `word` may be played as a guess."""
    return dictionary.is_valid(word)
