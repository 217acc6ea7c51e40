from __future__ import annotations

"""Typed failures raised by the engine and its batch runner.

Every failure is terminal for the single text or file it concerns. Callers
processing many files catch `PiranhitoError`, record it and move on.
"""

from pathlib import Path
from typing import Iterable


class PiranhitoError(Exception):
    """Base class for all expected, user-facing errors."""


class UnknownProfileError(PiranhitoError, LookupError):
    def __init__(self, profile_id: str, known: Iterable[str] = ()) -> None:
        self.profile_id = profile_id
        self.known = tuple(known)
        supported = ', '.join(self.known) or 'none'
        super().__init__(f'unknown project profile {profile_id!r} (supported: {supported})')


class InvalidRandomDirectiveError(PiranhitoError, ValueError):
    def __init__(self, directive: str, match: str) -> None:
        self.directive = directive
        self.match = match
        super().__init__(
            f'invalid random directive {directive!r} for {match!r}: '
            f'expected @Random(N) with N a positive integer'
        )


class EncodingFailureError(PiranhitoError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'{self.path}: not valid UTF-8 ({reason})')


class ProfileLoadError(PiranhitoError):
    """Raised when an external profile source cannot be parsed."""
