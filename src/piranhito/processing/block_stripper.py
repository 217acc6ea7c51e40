from __future__ import annotations
"""
BlockStripper

Remove feature-gated regions delimited by Start…[Leave]…End marker tokens,
always resolving each feature to its "disabled" branch:

  * Start X End             → ""                          (implementation dropped)
  * Start X Leave Y End     → FuncBegin + Y + FuncEnd     (fallback body kept)

Markers are processed in profile order. For one marker the text is rescanned
from the beginning after every rewrite, which is quadratic in the number of
occurrences; this is fine for hand-written sources.

A Start token with no End after it is left in place. The occurrence is
reported through the logger and `StripStats.unbalanced`.
"""

import logging
from typing import Iterable, Optional

from piranhito.constants import FUNC_BEGIN_SENTINEL, FUNC_END_SENTINEL
from piranhito.core.models import FeatureMarker, StripStats
from piranhito.logging.helpers import get_logger
from piranhito.processing.markers import MarkerTokenBuilder


class BlockStripper:
    def __init__(
        self,
        *,
        token_builder: Optional[MarkerTokenBuilder] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tokens = token_builder or MarkerTokenBuilder()
        self._log = logger or get_logger('processing.strip')

    def strip(
        self,
        text: str,
        markers: Iterable[FeatureMarker],
        *,
        stats: Optional[StripStats] = None,
    ) -> str:
        for marker in markers:
            text = self._strip_one(text, marker, stats)
        return text

    def _strip_one(self, text: str, marker: FeatureMarker, stats: Optional[StripStats]) -> str:
        tokens = self._tokens.build(marker)
        while True:
            s_pos = text.find(tokens.start)
            if s_pos == -1:
                return text
            body_from = s_pos + len(tokens.start)
            e_pos = text.find(tokens.end, body_from)
            if e_pos == -1:
                self._log.warning(
                    '⚠  unbalanced marker for feature %r: Start without End (left in place)',
                    marker.id,
                )
                if stats is not None:
                    stats.unbalanced.append(marker.id)
                return text
            e_end = e_pos + len(tokens.end)

            l_pos = text.find(tokens.leave, body_from, e_pos)
            if l_pos == -1:
                text = text[:s_pos] + text[e_end:]
                self._log.debug('feature %r removed (%d chars)', marker.id, e_end - s_pos)
                if stats is not None:
                    stats.removed.append(marker.id)
                continue

            fallback = text[l_pos + len(tokens.leave):e_pos]
            text = text[:s_pos] + FUNC_BEGIN_SENTINEL + fallback + FUNC_END_SENTINEL + text[e_end:]
            self._log.debug('feature %r resolved to its fallback branch', marker.id)
            if stats is not None:
                stats.fallbacks.append(marker.id)
