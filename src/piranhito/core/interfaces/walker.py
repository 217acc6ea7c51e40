from __future__ import annotations
from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract source-tree walker."""

    def gather_files(
        self,
        root: Path,
        suffixes: Sequence[str],
        *,
        recursive: bool = False,
    ) -> List[Path]:
        """Collect candidate files under `root` whose name ends with one of `suffixes`."""
        ...
