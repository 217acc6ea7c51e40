"""
piranhito.utils – Small shared utilities (suffix matching, paths, imports).
"""
from .imports import load_object_from_ref
from .paths import is_hidden_path
from .suffixes import is_suffix_allowed, normalize_suffixes

__all__ = [
    "load_object_from_ref",
    "is_hidden_path",
    "is_suffix_allowed",
    "normalize_suffixes",
]
