from __future__ import annotations
"""
markers – Sentinel token derivation and marker inventory.

A feature marker (id + eyecatcher) expands to three literal comment tokens:

    Start = "/*Piranhito?@-{id}-S{eyecatcher}*/"
    Leave = "/*Piranhito?@-{id}-L{eyecatcher}*/"
    End   = "/*Piranhito?@-{id}-E{eyecatcher}*/"

The inventory helpers count these tokens without changing the text; they
back the CLI check mode and let callers verify that stripping left nothing
behind.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List

from piranhito.constants import MARKER_PREFIX, MARKER_SUFFIX
from piranhito.core.models import FeatureMarker, MarkerTokens


@lru_cache(maxsize=256)
def marker_tokens(feature_id: str, eyecatcher: str) -> MarkerTokens:
    """Return the Start/Leave/End tokens for one (feature id, eyecatcher) pair."""
    head = f'{MARKER_PREFIX}{feature_id}-'
    return MarkerTokens(
        start=f'{head}S{eyecatcher}{MARKER_SUFFIX}',
        leave=f'{head}L{eyecatcher}{MARKER_SUFFIX}',
        end=f'{head}E{eyecatcher}{MARKER_SUFFIX}',
    )


class MarkerTokenBuilder:
    """Object seam over `marker_tokens` for components that take a builder."""

    def build(self, marker: FeatureMarker) -> MarkerTokens:
        return marker_tokens(marker.id, marker.eyecatcher)


@dataclass(frozen=True)
class MarkerCount:
    feature_id: str
    starts: int
    leaves: int
    ends: int

    @property
    def present(self) -> bool:
        return bool(self.starts or self.leaves or self.ends)

    @property
    def balanced(self) -> bool:
        return self.starts == self.ends and self.leaves <= self.starts


def inspect_markers(text: str, markers: Iterable[FeatureMarker]) -> List[MarkerCount]:
    """Count Start/Leave/End occurrences per feature, in profile order.

    Only features that actually occur in `text` are reported.
    """
    out: List[MarkerCount] = []
    for marker in markers:
        tokens = marker_tokens(marker.id, marker.eyecatcher)
        count = MarkerCount(
            feature_id=marker.id,
            starts=text.count(tokens.start),
            leaves=text.count(tokens.leave),
            ends=text.count(tokens.end),
        )
        if count.present:
            out.append(count)
    return out
