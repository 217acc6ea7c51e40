from __future__ import annotations

"""Public surface for piranhito.core.

Domain models, typed errors and the execution report live here; protocols
are under `piranhito.core.interfaces`.
"""

from piranhito.core.errors import (
    EncodingFailureError,
    InvalidRandomDirectiveError,
    PiranhitoError,
    ProfileLoadError,
    UnknownProfileError,
)
from piranhito.core.models import (
    FeatureMarker,
    MarkerTokens,
    ProjectProfile,
    StripStats,
    SubstitutionRule,
    TokenPair,
)
from piranhito.core.report import ExecutionReport, FileOutcome, StageTimer

__all__ = [
    # Errors
    "EncodingFailureError",
    "InvalidRandomDirectiveError",
    "PiranhitoError",
    "ProfileLoadError",
    "UnknownProfileError",
    # Models
    "FeatureMarker",
    "MarkerTokens",
    "ProjectProfile",
    "StripStats",
    "SubstitutionRule",
    "TokenPair",
    # Reporting
    "ExecutionReport",
    "FileOutcome",
    "StageTimer",
]
