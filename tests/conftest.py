from __future__ import annotations

import sys
from pathlib import Path

# Make `piranhito` importable from a plain checkout and `tools.*` from tests.
_TESTS = Path(__file__).resolve().parent
_SRC = _TESTS.parent / "src"
for _p in (str(_SRC), str(_TESTS)):
    if _p not in sys.path:
        sys.path.insert(0, _p)
