"""
Pattern-string view of an evaluation.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

The duplicate-letter rules live in Word.evaluate; this module only adapts
raw strings in and a compact pattern out, which is handy for logs and tests.
"""

from __future__ import annotations

from typing import Iterable

from .word import LetterMatch, Word


def to_pattern(matches: Iterable[LetterMatch]) -> str:
    """Join the per-position hints, e.g. (CORRECT, ABSENT, ...) -> 'G-...'."""
    return "".join(m.hint for m in matches)


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Both strings go through Word.from_text, so they are case-sensitive and
    WordTooShort propagates for short input.

    Examples:
      score("testy", "fuzzy") -> "----G"
      score("u00u0", "fuzzy") -> "Y----"
    """
    answer_word = Word.from_text(answer)
    guess_word = Word.from_text(guess)
    return to_pattern(answer_word.evaluate(guess_word))
