from __future__ import annotations
"""Strict UTF-8 file access for the batch runner.

Files are read and written as raw bytes so line endings survive untouched.
Writes go through a temporary file in the target directory followed by
`os.replace`, so an interrupted run never leaves a truncated source file.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from piranhito.core.errors import EncodingFailureError
from piranhito.logging.helpers import get_logger, trace_io


class TextFileService:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.textfiles')

    def read_text(self, path: Path) -> str:
        """Return the decoded contents of *path*.

        Raises:
            EncodingFailureError: If the bytes are not valid UTF-8.
            OSError: If the file cannot be read.
        """
        data = Path(path).read_bytes()
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise EncodingFailureError(path, str(exc)) from exc
        trace_io(self._log, 'read', path=str(path), bytes=len(data))
        return text

    def write_text(self, path: Path, text: str) -> None:
        """Atomically replace *path* with *text* encoded as UTF-8."""
        path = Path(path)
        try:
            data = text.encode('utf-8')
        except UnicodeEncodeError as exc:
            raise EncodingFailureError(path, str(exc)) from exc

        tf = tempfile.NamedTemporaryFile(delete=False, dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
        tmp = Path(tf.name)
        try:
            with tf:
                tf.write(data)
            try:
                os.chmod(tmp, path.stat().st_mode & 0o7777)
            except FileNotFoundError:
                pass
            os.replace(tmp, path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        trace_io(self._log, 'write', path=str(path), bytes=len(data))
