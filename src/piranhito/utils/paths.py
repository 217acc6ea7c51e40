# src/piranhito/utils/paths.py
"""
paths – Small path helpers shared by the walker.

Provides:
  • is_hidden_path(Path)         – dot-segment detection
"""

from __future__ import annotations

from pathlib import Path


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component)."""
    return any(part.startswith('.') and part not in ('.', '..') for part in p.parts)
