"""
piranhito.profiles – Built-in project profiles and the immutable registry.
"""
from .builtin import BUILTIN_PROFILES, ORIENTAMENTO, SNIFFER_UTIL
from .registry import ProfileRegistry, build_registry, get_default_registry

__all__ = [
    "BUILTIN_PROFILES",
    "ORIENTAMENTO",
    "SNIFFER_UTIL",
    "ProfileRegistry",
    "build_registry",
    "get_default_registry",
]
