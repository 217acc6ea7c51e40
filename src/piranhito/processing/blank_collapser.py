from __future__ import annotations
"""Final cosmetic pass of the transform pipeline.

Lines holding only spaces, tabs or a stray carriage return are emptied, then
every run of consecutive newlines is folded into one. The output therefore
contains no "\\n\\n" at all.
"""

import logging
import re
from typing import Optional

from piranhito.logging.helpers import get_logger

_WHITESPACE_LINE_RX = re.compile(r'(?m)^[ \t\r]+$')


class BlankCollapser:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('processing.collapse')

    def collapse(self, text: str) -> str:
        text = _WHITESPACE_LINE_RX.sub('', text)
        before = len(text)
        while '\n\n' in text:
            text = text.replace('\n\n', '\n')
        if len(text) != before:
            self._log.debug('%d blank line(s) collapsed', before - len(text))
        return text
