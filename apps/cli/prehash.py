# apps/cli/prehash.py
"""
Hash a vocabulary text file into a .npy of uint64 identity hashes.

The identity hash is deterministic, so the output can be shipped alongside the
game and loaded with Dictionary.from_hash_file instead of re-parsing text.

Usage:
    python -m apps.cli.prehash --in dict.txt --out dict.npy
"""

from __future__ import annotations

import argparse
import logging
import sys

from tqdm import tqdm

from packages.datasets import Dictionary, pretty_summary, read_text, validate_vocabulary
from packages.engine import Word, WordleError
from packages.harness import setup_logging

logger = logging.getLogger("apps.cli.prehash")


def main():
    ap = argparse.ArgumentParser(description="Pre-hash a vocabulary file")
    ap.add_argument("--in", dest="inp", required=True, help="input vocabulary (.txt)")
    ap.add_argument("--out", required=True, help="output hash file (.npy)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show hashing progress (auto=bar when stderr is a terminal).",
    )
    ap.add_argument("--log-level", default="INFO", help="logging level")
    args = ap.parse_args()

    setup_logging(args.log_level)

    # 1) Validate and print a one-liner summary (counts, SHA, bad tokens)
    rep = validate_vocabulary(args.inp)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("%s", issue)
    if not rep["passed"]:
        sys.exit(1)

    # 2) Hash every token
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    try:
        tokens = read_text(args.inp).split()
        iterator = tqdm(tokens, ncols=80, desc="Hashing", unit="word") if mode == "bar" else tokens
        dictionary = Dictionary()
        dictionary.add_words(Word.from_text(t) for t in iterator)
    except WordleError as e:
        logger.error("%s", e)
        sys.exit(1)

    # 3) Write output
    path = dictionary.save_hash_file(args.out)
    print(f"Wrote: {path} ({len(dictionary)} hashes)")


if __name__ == "__main__":
    main()
