from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from piranhito.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Configure the 'piranhito' logger on first use and hand out scoped loggers.

    `from_env` honours PIRANHITO_JSON_LOGS=1 so callers that are not the CLI
    get the same output format.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, *, verbose: bool = False, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        return cls(
            json_logs=os.getenv("PIRANHITO_JSON_LOGS") == "1",
            level=logging.DEBUG if verbose else logging.INFO,
            stream=stream,
        )

    @property
    def json_logs(self) -> bool:
        return self._json

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
