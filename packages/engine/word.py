"""
Fixed-length word type and the guess evaluation algorithm.

A Word is exactly WORD_LENGTH characters, case-sensitive, stored as a tuple so
it behaves as an immutable value. Evaluation follows the canonical Wordle
rules:

  1) Exact match short-circuits to all CORRECT.
  2) Count every letter of the hidden word.
  3) Pass 1 marks exact positions CORRECT and consumes one count each.
  4) Pass 2 marks PRESENT only while the letter still has remaining count.

Pass 1 must finish before pass 2 starts, otherwise a later green can be
starved by an earlier yellow.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from colorama import Fore, Style

from .errors import WordTooShort

WORD_LENGTH = 5


class LetterMatch(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    def is_correct(self) -> bool:
        return self is LetterMatch.CORRECT

    def is_present(self) -> bool:
        return self is LetterMatch.PRESENT

    def is_absent(self) -> bool:
        return self is LetterMatch.ABSENT

    @property
    def hint(self) -> str:
        """Pattern character: 'G' green, 'Y' yellow, '-' gray."""
        return _HINTS[self]

    def format_char(self, c: str) -> str:
        """Paint a single character for the terminal (ABSENT stays plain)."""
        if self is LetterMatch.CORRECT:
            return f"{Fore.GREEN}{c}{Style.RESET_ALL}"
        if self is LetterMatch.PRESENT:
            return f"{Fore.YELLOW}{c}{Style.RESET_ALL}"
        return c


_HINTS = {
    LetterMatch.CORRECT: "G",
    LetterMatch.PRESENT: "Y",
    LetterMatch.ABSENT: "-",
}

# One status per position of the guess
MatchList = Tuple[LetterMatch, LetterMatch, LetterMatch, LetterMatch, LetterMatch]


def correct_all() -> MatchList:
    return (LetterMatch.CORRECT,) * WORD_LENGTH


def present_all() -> MatchList:
    return (LetterMatch.PRESENT,) * WORD_LENGTH


def absent_all() -> MatchList:
    return (LetterMatch.ABSENT,) * WORD_LENGTH


@dataclass(frozen=True)
class Word:
    letters: Tuple[str, str, str, str, str]

    def __post_init__(self):
        chars = tuple(self.letters)
        if len(chars) != WORD_LENGTH or any(not isinstance(c, str) or len(c) != 1 for c in chars):
            raise ValueError(f"expected {WORD_LENGTH} single characters, got {chars!r}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "letters", chars)

    @classmethod
    def from_letters(cls, letters: Iterable[str]) -> "Word":
        """Build from exactly WORD_LENGTH single characters."""
        return cls(tuple(letters))

    @classmethod
    def from_text(cls, text: str) -> "Word":
        """
        Build a Word from raw text.

        Raises WordTooShort if fewer than WORD_LENGTH characters are supplied.
        Anything past the fifth character is ignored.
        """
        if len(text) < WORD_LENGTH:
            raise WordTooShort(len(text))
        return cls(tuple(text[:WORD_LENGTH]))

    def __str__(self) -> str:
        return "".join(self.letters)

    def contains(self, ch: str) -> bool:
        return ch in self.letters

    def contains_at(self, ch: str, idx: int) -> bool:
        return self.letters[idx] == ch

    def identity_hash(self) -> int:
        """
        Stable 64-bit membership key: code point i goes in bits [8*i, 8*i+8).

        Lanes are disjoint for code points below 256, so ASCII words never
        collide. Wider code points spill into the next lane and are OR-ed in.
        """
        h = 0
        for i, c in enumerate(self.letters):
            h |= ord(c) << (8 * i)
        return h

    def evaluate(self, guess: "Word") -> MatchList:
        """
        Score `guess` against this (hidden) word.

        Examples:
          Word.from_text("fuzzy").evaluate(Word.from_text("testy"))
            -> (ABSENT, ABSENT, ABSENT, ABSENT, CORRECT)
        """
        if guess == self:
            return correct_all()

        remaining = Counter(self.letters)
        matches = list(absent_all())

        # Pass 1: greens consume their letter first
        for i, (h, g) in enumerate(zip(self.letters, guess.letters)):
            if h == g:
                matches[i] = LetterMatch.CORRECT
                remaining[h] -= 1

        # Pass 2: yellows are capped by what is left
        for i, g in enumerate(guess.letters):
            if matches[i].is_correct():
                continue
            if self.contains(g) and remaining[g] > 0:
                matches[i] = LetterMatch.PRESENT
                remaining[g] -= 1

        return tuple(matches)

    def format(self, matches: Iterable[LetterMatch]) -> str:
        """Render this word with one painted character per status."""
        return "".join(m.format_char(c) for m, c in zip(matches, self.letters))
