from __future__ import annotations
"""
PipelineRegistry

Data-driven table mapping (mode, file suffix) to the text pipeline that
handles it, so the runner never branches on file types.

Built-ins:
    - transform: ".swift" and ".js" go through `TransformPipeline`.
    - copyright: ".swift", ".js", ".json" and ".strings" go through
      `CopyrightPipeline`.

Pipelines are registered lazily: a builder callback runs on first access
with the random source and logger the registry was created with.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from piranhito.constants import (
    COPYRIGHT_SUFFIXES,
    MODE_COPYRIGHT,
    MODE_TRANSFORM,
    TRANSFORM_SUFFIXES,
)
from piranhito.core.interfaces.rng import RandomSourceProtocol
from piranhito.core.interfaces.text import TextPipelineProtocol
from piranhito.processing.pipelines import CopyrightPipeline, TransformPipeline
from piranhito.utils.suffixes import normalize_suffixes

PipelineBuilder = Callable[[], TextPipelineProtocol]


class PipelineRegistry:
    def __init__(
        self,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._rng = rng
        self._logger = logger
        self._by_key: Dict[Tuple[str, str], TextPipelineProtocol] = {}
        self._lazy_builders: Dict[Tuple[str, str], PipelineBuilder] = {}

    @classmethod
    def default(
        cls,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> 'PipelineRegistry':
        reg = cls(rng=rng, logger=logger)
        # One shared instance per mode keeps a single random source per run.
        shared: Dict[str, TextPipelineProtocol] = {}

        def _builder(mode: str, factory) -> PipelineBuilder:
            def build() -> TextPipelineProtocol:
                if mode not in shared:
                    shared[mode] = factory(rng=reg._rng, logger=reg._logger)
                return shared[mode]
            return build

        for suf in TRANSFORM_SUFFIXES:
            reg.register_lazy(MODE_TRANSFORM, suf, builder=_builder(MODE_TRANSFORM, TransformPipeline))
        for suf in COPYRIGHT_SUFFIXES:
            reg.register_lazy(MODE_COPYRIGHT, suf, builder=_builder(MODE_COPYRIGHT, CopyrightPipeline))
        return reg

    @staticmethod
    def _key(mode: str, suffix: str) -> Tuple[str, str]:
        norm = normalize_suffixes([suffix])
        if not norm:
            raise ValueError(f'empty suffix for mode {mode!r}')
        return (mode, norm[0].lower())

    def register(self, mode: str, suffix: str, pipeline: TextPipelineProtocol) -> None:
        key = self._key(mode, suffix)
        self._by_key[key] = pipeline
        self._lazy_builders.pop(key, None)

    def register_lazy(self, mode: str, suffix: str, *, builder: PipelineBuilder) -> None:
        self._lazy_builders[self._key(mode, suffix)] = builder

    def suffixes(self, mode: str) -> Tuple[str, ...]:
        """Suffixes handled in `mode`, sorted."""
        keys = {suf for (m, suf) in self._by_key if m == mode}
        keys.update(suf for (m, suf) in self._lazy_builders if m == mode)
        return tuple(sorted(keys))

    def for_suffix(self, mode: str, suffix: str) -> Optional[TextPipelineProtocol]:
        key = (mode, (suffix or '').lower())
        pipeline = self._by_key.get(key)
        if pipeline is not None:
            return pipeline
        builder = self._lazy_builders.get(key)
        if builder is not None:
            pipeline = builder()
            self.register(mode, key[1], pipeline)
            return pipeline
        return None
