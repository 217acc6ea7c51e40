from __future__ import annotations
"""Post-strip syntax repair.

Stripping a feature often leaves its surrounding punctuation behind:

  * `foo(  \\n  )` – an argument or condition list whose content was removed.
    The whole whitespace-only group, parentheses included, is deleted.
  * `if ()` / `if()` – a conditional whose guard was removed. It becomes
    `if (!_CE_) /*Piranhito?@*/ `, an always-false placeholder flagged for
    manual review.

Empty groups `()` are left alone so ordinary calls survive. The condition
rule is applied before the blank-group rule, so `if ( )` becomes the
placeholder rather than a bare `if `. Both rewrites run to a fixpoint, so
`reformat(reformat(t)) == reformat(t)`.
"""

import logging
import re
from typing import Optional

from piranhito.constants import EMPTY_CONDITION_SENTINEL
from piranhito.logging.helpers import get_logger

# `if (  )` collapses to `if ()` before normalization, so blank guards are
# treated like empty ones.
_EMPTY_CONDITION_RX = re.compile(r'if ?\([ \t\r\n]*\)')
_BLANK_GROUP_RX = re.compile(r'\([ \t\r\n]+\)')


class Reformatter:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('processing.reformat')

    def reformat(self, text: str) -> str:
        passes = 0
        while True:
            out = _EMPTY_CONDITION_RX.sub(lambda _m: EMPTY_CONDITION_SENTINEL, text)
            out = _BLANK_GROUP_RX.sub('', out)
            if out == text:
                break
            text = out
            passes += 1
        if passes:
            self._log.debug('reformat converged after %d pass(es)', passes)
        return text
