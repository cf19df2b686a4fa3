"""
Game session primitives.

- GameSession: one hidden word, one dictionary, turn-taking and win detection.
- play:        drive a session from an iterable of raw guesses.

Kept UI-agnostic so the interactive CLI and the tests share one loop. Guesses
outside the dictionary are rejected without consuming a turn; guesses that are
too short raise WordTooShort so the caller can decide to re-prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from packages.datasets.dictionary import Dictionary
from packages.engine import GameFinished, MatchList, Word, WordTooShort, to_pattern, validate_guess

logger = logging.getLogger(__name__)

# Classic Wordle turn budget; sessions default to unlimited
WORDLE_MAX_TURNS = 6


@dataclass(frozen=True)
class GuessResult:
    word: Word
    accepted: bool
    matches: Optional[MatchList] = None

    @property
    def solved(self) -> bool:
        return self.matches is not None and all(m.is_correct() for m in self.matches)


class GameSession:
    def __init__(self, hidden: Word, dictionary: Dictionary, *, max_turns: int | None = None):
        if max_turns is not None and max_turns < 1:
            raise ValueError(f"max_turns must be positive or None; got {max_turns}")
        self.hidden = hidden
        self.dictionary = dictionary
        self.max_turns = max_turns
        self.history: List[GuessResult] = []

    @property
    def turns(self) -> int:
        return len(self.history)

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1].solved

    @property
    def finished(self) -> bool:
        if self.solved:
            return True
        return self.max_turns is not None and self.turns >= self.max_turns

    def submit(self, raw: str) -> GuessResult:
        """
        Play one raw guess.

        Raises:
          WordTooShort  - raw text can't form a Word
          GameFinished  - the session is already won or out of turns
        """
        if self.finished:
            raise GameFinished(f"game already finished after {self.turns} turn(s)")

        word = Word.from_text(raw)
        if not validate_guess(word, self.dictionary):
            logger.debug("Rejected guess %r (not in vocabulary)", str(word))
            return GuessResult(word=word, accepted=False)

        result = GuessResult(word=word, accepted=True, matches=self.hidden.evaluate(word))
        self.history.append(result)
        logger.debug("Turn %s: %s -> %s", self.turns, word, to_pattern(result.matches))
        return result


def play(
        hidden: Word,
        dictionary: Dictionary,
        guesses: Iterable[str],
        *,
        max_turns: int | None = None,
) -> GameSession:
    """
    Feed guesses until the game finishes or the input runs out.

    Too-short and out-of-vocabulary guesses are skipped, the same way the
    interactive loop re-prompts for them.
    """
    session = GameSession(hidden, dictionary, max_turns=max_turns)
    for raw in guesses:
        if session.finished:
            break
        try:
            session.submit(raw)
        except WordTooShort as e:
            logger.debug("Skipped guess %r: %s", raw, e)
    return session
