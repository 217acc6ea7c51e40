# src/piranhito/processing/line_ops.py
import logging
from typing import Iterable, List, Optional, Sequence

from piranhito.core.models import TokenPair
from piranhito.logging.helpers import get_logger


class LineProcessingService:
    """Line-level helpers applied after whole-text stages.

    Lines are plain strings without their trailing newline; callers split and
    join. Matching is substring-based, never whole-line or regex.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('processing.lineops')

    def filter_lines(self, lines: Iterable[str], forbidden: Sequence[str]) -> List[str]:
        """Drop every line containing any forbidden substring, keeping order."""
        needles = [f for f in forbidden if f]
        if not needles:
            return list(lines)
        out: List[str] = []
        dropped = 0
        for ln in lines:
            if any(n in ln for n in needles):
                dropped += 1
                continue
            out.append(ln)
        if dropped:
            self._log.debug('%d line(s) dropped by removable-line filter', dropped)
        return out

    def rewrite_line(
        self,
        line: str,
        remove_tokens: Sequence[str],
        replace_pairs: Sequence[TokenPair],
    ) -> str:
        """Delete removable tokens, then apply token pairs in order.

        Deletion repeats until the token no longer occurs, since removing
        one occurrence can splice together a new one.
        """
        for tok in remove_tokens:
            if not tok:
                continue
            while tok in line:
                line = line.replace(tok, '')
        for pair in replace_pairs:
            if pair.source:
                line = line.replace(pair.source, pair.target)
        return line

    def rewrite_lines(
        self,
        lines: Iterable[str],
        remove_tokens: Sequence[str],
        replace_pairs: Sequence[TokenPair],
    ) -> List[str]:
        return [self.rewrite_line(ln, remove_tokens, replace_pairs) for ln in lines]
