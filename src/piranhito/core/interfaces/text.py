from __future__ import annotations
"""Text pipeline protocol definitions."""

from typing import Optional, Protocol

from piranhito.core.models import ProjectProfile, StripStats


class TextPipelineProtocol(Protocol):
    """Whole-file text in, whole-file text out.

    Implementations are pure functions of (profile, text) apart from the
    random source they were built with. They must never touch the filesystem.
    """

    name: str

    def run(self, profile: ProjectProfile, text: str, *, stats: Optional[StripStats] = None) -> str:
        ...
