# apps/cli/play.py
"""
Interactive Wordle in the terminal.

This script:
  1) Loads the vocabulary (text file, or a pre-hashed .npy from prehash.py).
  2) Picks the hidden word: --hidden, or a seeded random pick from --answers.
  3) Prompts for guesses, re-prompting on short or unknown words, and prints
     each accepted guess painted green/yellow until solved or out of turns.

Usage:
    python -m apps.cli.play --dict dict.txt --hidden fuzzy
    python -m apps.cli.play --dict dict.npy --answers answers.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from colorama import just_fix_windows_console

from packages.datasets import Dictionary, read_text
from packages.engine import Word, WordleError, WordTooShort
from packages.harness import GameSession, WORDLE_MAX_TURNS, setup_logging

logger = logging.getLogger("apps.cli.play")


def _load_dictionary(path: str) -> Dictionary:
    if Path(path).suffix == ".npy":
        return Dictionary.from_hash_file(path)
    return Dictionary.from_source(path)


def _pick_hidden(args) -> Word:
    if args.hidden:
        return Word.from_text(args.hidden)
    tokens = read_text(args.answers).split()
    if not tokens:
        raise WordleError(f"answers file is empty: {args.answers}")
    return Word.from_text(random.Random(args.seed).choice(tokens))


def main():
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal")
    ap.add_argument("--dict", default="dict.txt",
                    help="vocabulary of legal guesses (.txt words or .npy hashes)")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--hidden", help="the word to guess")
    src.add_argument("--answers", help="pick the hidden word at random from this file")
    ap.add_argument("--seed", type=int, help="RNG seed for --answers (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS,
                    help="turn budget; 0 means unlimited")
    ap.add_argument("--log-level", default="WARNING", help="logging level")
    args = ap.parse_args()
    if args.max_turns < 0:
        ap.error("--max-turns must be 0 (unlimited) or a positive number")

    setup_logging(args.log_level)
    just_fix_windows_console()

    try:
        dictionary = _load_dictionary(args.dict)
        hidden = _pick_hidden(args)
    except WordleError as e:
        logger.error("%s", e)
        sys.exit(1)

    if not dictionary.is_valid(hidden):
        logger.warning("Hidden word is not in the vocabulary; it can't be guessed")

    session = GameSession(hidden, dictionary, max_turns=args.max_turns or None)
    while not session.finished:
        try:
            raw = input("guess: ").strip()
        except EOFError:
            print()
            break
        try:
            result = session.submit(raw)
        except WordTooShort as e:
            print(e)
            continue
        if not result.accepted:
            print(f"{result.word} is not in the word list")
            continue
        print(result.word.format(result.matches))

    if session.solved:
        print(f"Solved in {session.turns} turn(s)")
    else:
        print(f"The word was {hidden}")


if __name__ == "__main__":
    main()
