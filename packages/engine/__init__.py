from .errors import (
    WordleError,
    WordTooShort,
    DictionaryError,
    DictionaryIoFailure,
    DictionaryParseFailure,
    GameFinished,
)
from .word import WORD_LENGTH, LetterMatch, MatchList, Word, correct_all, present_all, absent_all
from .scoring import score, to_pattern
from .validation import validate_guess

__all__ = [
    "WordleError", "WordTooShort", "DictionaryError", "DictionaryIoFailure",
    "DictionaryParseFailure", "GameFinished",
    "WORD_LENGTH", "LetterMatch", "MatchList", "Word",
    "correct_all", "present_all", "absent_all",
    "score", "to_pattern", "validate_guess",
]
