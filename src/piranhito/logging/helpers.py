from __future__ import annotations

"""Small logging helpers to standardize piranhito logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'piranhito' logger.
    - get_logger: Namespaced logger factory ('piranhito.*').
    - trace_io utilities gated by PIRANHITO_TRACE_IO.

The package is named `piranhito.logging`; absolute imports keep the standard
library module reachable as `logging` inside it.
"""

import logging
import os
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'piranhito.strip').
        - msg: Formatted message string.
        - version: piranhito.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; the package __init__ imports this module.
            from piranhito import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("PIRANHITO_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_HANDLER_MARK = "_piranhito_handler"


def _owned_handler(base: logging.Logger) -> Optional[logging.StreamHandler]:
    for h in base.handlers:
        if getattr(h, _HANDLER_MARK, False):
            return h  # type: ignore[return-value]
    return None


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'piranhito' logger and return it.

    The handler installed here is reused on later calls; its formatter, level
    and (when given) stream are updated so that a second CLI run in the same
    process can switch between JSON and plain text. Handlers attached by
    other code are left alone.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).
    """
    import sys as _sys

    base = logging.getLogger("piranhito")
    base.setLevel(level)
    base.propagate = False

    handler = _owned_handler(base)
    if handler is None:
        handler = logging.StreamHandler(stream or _sys.stderr)
        setattr(handler, _HANDLER_MARK, True)
        base.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT))
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'piranhito'."""
    if not name or name == "piranhito":
        return logging.getLogger("piranhito")
    if name.startswith("piranhito"):
        return logging.getLogger(name)
    return logging.getLogger(f"piranhito.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("PIRANHITO_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context attached to the record.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
