"""
Vocabulary file validator.

What this module does:
- Inspect a whitespace-separated vocabulary file before it is loaded.
- Count tokens, distinct identity hashes, and tokens that are too short
  (fatal for Dictionary.parse), too long (silently truncated) or non-alphabetic
  (accepted, but usually a preprocessing bug).
- Compute SHA-256 of the raw file so runs can record exactly which list they used.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_vocabulary, pretty_summary
    rep = validate_vocabulary("dict.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine.errors import DictionaryIoFailure
from packages.engine.word import WORD_LENGTH, Word
from .io import read_text


@dataclass
class VocabularyReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    token_count: int       # whitespace-separated tokens
    unique_count: int      # distinct identity hashes among loadable tokens
    short_tokens: int      # tokens shorter than WORD_LENGTH (parse would fail)
    long_tokens: int       # tokens longer than WORD_LENGTH (would be truncated)
    non_alpha_tokens: int  # tokens with anything other than letters
    passed: bool
    issues: List[str]      # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_vocabulary(path: str) -> Dict:
    """
    Validate a vocabulary file.

    `passed` is strict: the file must exist, hold at least one token, and
    contain no token that Dictionary.parse would reject. Long and non-alpha
    tokens are reported in `issues` but do not fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"vocabulary file not found: {path}")
        rep = VocabularyReport(path, False, "", 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    try:
        tokens = read_text(p).split()
    except DictionaryIoFailure as e:
        issues.append(f"vocabulary file unreadable: {e.__cause__ or e}")
        rep = VocabularyReport(str(p), True, "", 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    short = [t for t in tokens if len(t) < WORD_LENGTH]
    long_ = [t for t in tokens if len(t) > WORD_LENGTH]
    non_alpha = [t for t in tokens if not t.isalpha()]
    unique = {Word.from_text(t).identity_hash() for t in tokens if len(t) >= WORD_LENGTH}

    if not tokens:
        issues.append("vocabulary contains 0 tokens")
    if short:
        # Surface a few examples to debug quickly
        issues.append(f"{len(short)} token(s) shorter than {WORD_LENGTH} (e.g., {short[:5]})")
    if long_:
        issues.append(f"{len(long_)} token(s) longer than {WORD_LENGTH} will be truncated")
    if non_alpha:
        issues.append(f"{len(non_alpha)} non-alphabetic token(s) (e.g., {non_alpha[:5]})")
    if len(unique) != len(tokens) - len(short):
        issues.append("vocabulary contains duplicate words")

    rep = VocabularyReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        token_count=len(tokens),
        unique_count=len(unique),
        short_tokens=len(short),
        long_tokens=len(long_),
        non_alpha_tokens=len(non_alpha),
        passed=bool(tokens) and not short,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        dict.txt | tokens=2315 (uniq=2315, sha=abc123def456) | short=0 long=0 non-alpha=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | tokens={report['token_count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| short={report['short_tokens']} long={report['long_tokens']} "
        f"non-alpha={report['non_alpha_tokens']} | {status}"
    )
