from __future__ import annotations

from piranhito.constants import (
    EMPTY_CONDITION_SENTINEL,
    FUNC_BEGIN_SENTINEL,
    FUNC_END_SENTINEL,
)
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
from piranhito.processing.pipelines import (
    CopyrightPipeline,
    TransformPipeline,
    run_copyright_pipeline,
    run_transform_pipeline,
)
from piranhito.profiles.registry import (
    ProfileRegistry,
    build_registry,
    get_default_registry,
)
from piranhito.runtime.runner import ProjectRunner

__version__ = '1.0.0'

__all__ = [
    "__version__",
    "EMPTY_CONDITION_SENTINEL",
    "FUNC_BEGIN_SENTINEL",
    "FUNC_END_SENTINEL",
    "EncodingFailureError",
    "InvalidRandomDirectiveError",
    "PiranhitoError",
    "ProfileLoadError",
    "UnknownProfileError",
    "FeatureMarker",
    "MarkerTokens",
    "ProjectProfile",
    "StripStats",
    "SubstitutionRule",
    "TokenPair",
    "CopyrightPipeline",
    "TransformPipeline",
    "run_copyright_pipeline",
    "run_transform_pipeline",
    "ProfileRegistry",
    "build_registry",
    "get_default_registry",
    "ProjectRunner",
]
