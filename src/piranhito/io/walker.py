from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Set

from piranhito.core.interfaces import WalkerProtocol
from piranhito.logging.helpers import get_logger
from piranhito.utils.paths import is_hidden_path
from piranhito.utils.suffixes import is_suffix_allowed, normalize_suffixes


class SourceWalker(WalkerProtocol):
    """Collect the files of one project directory that a run should touch.

    Only the top level is scanned unless `recursive` is set. Hidden files and
    directories (leading dot, relative to the root) are always skipped.
    Suffix matching is case-insensitive.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.walker')

    def gather_files(
        self,
        root: Path,
        suffixes: Sequence[str],
        *,
        recursive: bool = False,
    ) -> List[Path]:
        root = Path(root)
        inc_set = {s.lower() for s in normalize_suffixes(suffixes)}
        if not root.is_dir():
            self._log.error('⚠  %s is not a directory – skipped', root)
            return []

        collected: Set[Path] = set()
        for dirpath, dirnames, filenames in os.walk(root):
            if recursive:
                dirnames[:] = [d for d in dirnames if not d.startswith('.')]
            else:
                dirnames[:] = []
            for fn in filenames:
                fp = Path(dirpath, fn)
                if is_hidden_path(fp.relative_to(root)):
                    continue
                if not is_suffix_allowed(fn.lower(), inc_set):
                    continue
                if not fp.is_file():
                    continue
                collected.add(fp)

        return sorted(collected, key=str)
