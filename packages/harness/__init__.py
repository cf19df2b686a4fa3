from .core import GameSession, GuessResult, play, WORDLE_MAX_TURNS
from .log import setup_logging

__all__ = ["GameSession", "GuessResult", "play", "WORDLE_MAX_TURNS", "setup_logging"]
