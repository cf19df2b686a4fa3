from __future__ import annotations
from pathlib import Path
from typing import Iterable

import numpy as np

from packages.engine.errors import DictionaryIoFailure


def read_text(p: Path | str) -> str:
    """
    Read a whole UTF-8 vocabulary source.
    Any read or decode failure surfaces as DictionaryIoFailure.
    """
    p = Path(p)
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryIoFailure(p) from e


def read_hashes(p: Path | str) -> np.ndarray:
    """
    Load a pre-hashed vocabulary (.npy of uint64 identity hashes).
    """
    p = Path(p)
    try:
        arr = np.load(p, allow_pickle=False)
    except (OSError, ValueError) as e:
        raise DictionaryIoFailure(p) from e

    # .npz archives load as NpzFile, not ndarray
    if not isinstance(arr, np.ndarray) or arr.ndim != 1:
        raise DictionaryIoFailure(p)
    if arr.dtype.kind == "i":
        if arr.size and arr.min() < 0:
            raise DictionaryIoFailure(p)
    elif arr.dtype.kind != "u":
        raise DictionaryIoFailure(p)
    return arr.astype(np.uint64, copy=False)


def write_hashes(hashes: Iterable[int], p: Path | str) -> str:
    """
    Write identity hashes as a uint64 .npy file. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    arr = np.fromiter(hashes, dtype=np.uint64)
    # np.save appends .npy unless given an open file
    with p.open("wb") as f:
        np.save(f, arr, allow_pickle=False)
    return str(p)
