from __future__ import annotations
"""
Text pipelines

Two fixed compositions over one in-memory text:

  * TransformPipeline – strip features, substitute, reformat, filter and
    rewrite lines, collapse blank lines. Used for source and script files.
  * CopyrightPipeline – strip copyright features, apply copyright
    substitutions, filter lines. Used for every file type, including data
    and localization files.

Neither pipeline reads or writes files. The module-level entry points look
the profile up by id and raise `UnknownProfileError` when it is missing.
"""

import logging
from typing import Optional

from piranhito.core.interfaces.rng import RandomSourceProtocol
from piranhito.core.interfaces.text import TextPipelineProtocol
from piranhito.core.models import ProjectProfile, StripStats
from piranhito.logging.helpers import get_logger
from piranhito.processing.blank_collapser import BlankCollapser
from piranhito.processing.block_stripper import BlockStripper
from piranhito.processing.line_ops import LineProcessingService
from piranhito.processing.reformatter import Reformatter
from piranhito.processing.substitution import SubstitutionEngine
from piranhito.profiles.registry import ProfileRegistry, get_default_registry


class TransformPipeline(TextPipelineProtocol):
    name = 'transform'

    def __init__(
        self,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('pipeline.transform')
        self._stripper = BlockStripper(logger=logger)
        self._subst = SubstitutionEngine(rng=rng, logger=logger)
        self._reformatter = Reformatter(logger=logger)
        self._lines = LineProcessingService(logger=logger)
        self._collapser = BlankCollapser(logger=logger)

    def run(self, profile: ProjectProfile, text: str, *, stats: Optional[StripStats] = None) -> str:
        self._log.debug('transform with profile %r (%d chars)', profile.id, len(text))
        text = self._stripper.strip(text, profile.features, stats=stats)
        text = self._subst.substitute(text, profile.substitutions)
        text = self._reformatter.reformat(text)
        lines = self._lines.filter_lines(text.split('\n'), profile.removable_lines)
        lines = self._lines.rewrite_lines(lines, profile.removable_tokens, profile.token_replacements)
        return self._collapser.collapse('\n'.join(lines))


class CopyrightPipeline(TextPipelineProtocol):
    name = 'copyright'

    def __init__(
        self,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('pipeline.copyright')
        self._stripper = BlockStripper(logger=logger)
        self._subst = SubstitutionEngine(rng=rng, logger=logger)
        self._lines = LineProcessingService(logger=logger)

    def run(self, profile: ProjectProfile, text: str, *, stats: Optional[StripStats] = None) -> str:
        self._log.debug('copyright alignment with profile %r (%d chars)', profile.id, len(text))
        text = self._stripper.strip(text, profile.copyright_features, stats=stats)
        text = self._subst.substitute(text, profile.copyright_substitutions)
        lines = self._lines.filter_lines(text.split('\n'), profile.removable_lines)
        return '\n'.join(lines)


def _resolve(profile_id: str, registry: Optional[ProfileRegistry]) -> ProjectProfile:
    reg = registry if registry is not None else get_default_registry()
    return reg.get_profile(profile_id)


def run_transform_pipeline(
    profile_id: str,
    text: str,
    *,
    registry: Optional[ProfileRegistry] = None,
    rng: Optional[RandomSourceProtocol] = None,
    logger: Optional[logging.Logger] = None,
    stats: Optional[StripStats] = None,
) -> str:
    """Run the full transform for `profile_id` over `text`.

    Raises:
        UnknownProfileError: If `profile_id` is not registered.
        InvalidRandomDirectiveError: If a substitution carries a bad `@Random(N)`.
    """
    profile = _resolve(profile_id, registry)
    return TransformPipeline(rng=rng, logger=logger).run(profile, text, stats=stats)


def run_copyright_pipeline(
    profile_id: str,
    text: str,
    *,
    registry: Optional[ProfileRegistry] = None,
    rng: Optional[RandomSourceProtocol] = None,
    logger: Optional[logging.Logger] = None,
    stats: Optional[StripStats] = None,
) -> str:
    """Align copyright notices in `text` for `profile_id`."""
    profile = _resolve(profile_id, registry)
    return CopyrightPipeline(rng=rng, logger=logger).run(profile, text, stats=stats)
