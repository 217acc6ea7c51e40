from __future__ import annotations
"""Suffix utilities for the file walker.

Each run mode processes a fixed set of extensions (".swift" and ".js" for
transform; those plus ".json" and ".strings" for copyright).

Semantics:
    * Tokens WITHOUT a dot are bare extensions and get a leading dot.
      Example: "swift" -> ".swift".
    * Tokens WITH a dot are kept as-is and matched as a filename tail.
    * `is_suffix_allowed` is a plain `str.endswith(...)` over the basename.
      Callers lowercase both sides when they want case-insensitive matching,
      as `SourceWalker` does.
"""

from typing import Iterable, Sequence


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize raw suffix tokens, dropping blanks and duplicates."""
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or '').strip()
        if not s:
            continue
        token = s if '.' in s else f'.{s}'
        if token not in out:
            out.append(token)
    return out


def is_suffix_allowed(filename: str, include: Iterable[str]) -> bool:
    """Return True if *filename* ends with any of *include*."""
    return any(filename.endswith(s) for s in include)
