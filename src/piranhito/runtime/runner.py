from __future__ import annotations
"""
ProjectRunner

Batch orchestration over one project directory: select files by suffix,
run the mode's pipeline on each, write results back atomically and collect
a per-file `ExecutionReport`.

Modes:
    - transform / copyright: rewrite files through the registered pipeline.
    - check: count marker tokens per feature and report unbalanced ones;
      never writes.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from piranhito.constants import MODE_CHECK, MODE_COPYRIGHT, MODE_TRANSFORM
from piranhito.core.errors import PiranhitoError
from piranhito.core.interfaces import RandomSourceProtocol, WalkerProtocol
from piranhito.core.models import FeatureMarker, ProjectProfile, StripStats
from piranhito.core.report import (
    STATUS_CHANGED,
    STATUS_FAILED,
    STATUS_UNCHANGED,
    ExecutionReport,
    FileOutcome,
    StageTimer,
)
from piranhito.io.text_files import TextFileService
from piranhito.io.walker import SourceWalker
from piranhito.logging.helpers import get_logger
from piranhito.processing.markers import inspect_markers
from piranhito.processing.pipeline_registry import PipelineRegistry
from piranhito.profiles.registry import ProfileRegistry

MODES = (MODE_TRANSFORM, MODE_COPYRIGHT, MODE_CHECK)


class ProjectRunner:
    def __init__(
        self,
        registry: ProfileRegistry,
        mode: str,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        dry_run: bool = False,
        recursive: bool = False,
        logger: Optional[logging.Logger] = None,
        walker: Optional[WalkerProtocol] = None,
        files: Optional[TextFileService] = None,
        pipelines: Optional[PipelineRegistry] = None,
    ) -> None:
        if mode not in MODES:
            raise ValueError(f'unknown mode {mode!r} (expected one of {", ".join(MODES)})')
        self._registry = registry
        self._mode = mode
        self._dry_run = bool(dry_run)
        self._recursive = bool(recursive)
        self._log = logger or get_logger('runner')
        self._walker: WalkerProtocol = walker or SourceWalker(logger=logger)
        self._files = files or TextFileService(logger=logger)
        self._pipelines = pipelines or PipelineRegistry.default(rng=rng, logger=logger)

    @property
    def mode(self) -> str:
        return self._mode

    def _suffixes(self) -> Sequence[str]:
        if self._mode == MODE_CHECK:
            both = set(self._pipelines.suffixes(MODE_TRANSFORM)) | set(self._pipelines.suffixes(MODE_COPYRIGHT))
            return tuple(sorted(both))
        return self._pipelines.suffixes(self._mode)

    def run(self, profile_id: str, directory: Path) -> ExecutionReport:
        """Process every eligible file in `directory` with `profile_id`.

        Raises:
            UnknownProfileError: Before any file is touched.
        """
        profile = self._registry.get_profile(profile_id)
        directory = Path(directory)
        report = ExecutionReport(
            profile_id=profile.id,
            mode=self._mode,
            directory=str(directory),
            dry_run=self._dry_run,
        )

        if not directory.is_dir():
            report.add_error(f'{directory} is not a directory')
            self._log.error('⚠  %s is not a directory', directory)
            report.finish()
            return report

        with StageTimer(report, 'discovery'):
            paths = self._walker.gather_files(directory, self._suffixes(), recursive=self._recursive)
        self._log.info('%s: %d candidate file(s) in %s', self._mode, len(paths), directory)

        for path in paths:
            if self._mode == MODE_CHECK:
                outcome = self._check_file(profile, path)
            else:
                outcome = self._process_file(profile, path, report)
            report.add_outcome(outcome)

        report.finish()
        self._log.info(
            '✔ %s done: %d changed, %d unchanged, %d failed',
            self._mode,
            report.files_changed,
            report.files_unchanged,
            report.files_failed,
        )
        return report

    def _process_file(self, profile: ProjectProfile, path: Path, report: ExecutionReport) -> FileOutcome:
        pipeline = self._pipelines.for_suffix(self._mode, path.suffix)
        if pipeline is None:
            return FileOutcome(path=str(path), status=STATUS_UNCHANGED)

        stats = StripStats()
        try:
            with StageTimer(report, 'process'):
                original = self._files.read_text(path)
                result = pipeline.run(profile, original, stats=stats)
            changed = result != original
            if changed and not self._dry_run:
                with StageTimer(report, 'write'):
                    self._files.write_text(path, result)
        except (PiranhitoError, OSError) as exc:
            self._log.error('⚠  %s: %s', path, exc)
            return FileOutcome(path=str(path), status=STATUS_FAILED, error=str(exc))

        for feature_id in stats.unbalanced:
            self._log.debug('%s: unbalanced marker for feature %r', path, feature_id)
        status = STATUS_CHANGED if changed else STATUS_UNCHANGED
        self._log.info('%s %s%s', status, path, ' (dry run)' if self._dry_run and changed else '')
        return FileOutcome(
            path=str(path),
            status=status,
            unbalanced=list(stats.unbalanced),
            removed=list(stats.removed),
            fallbacks=list(stats.fallbacks),
        )

    def _check_file(self, profile: ProjectProfile, path: Path) -> FileOutcome:
        markers: List[FeatureMarker] = [*profile.features, *profile.copyright_features]
        try:
            text = self._files.read_text(path)
        except (PiranhitoError, OSError) as exc:
            self._log.error('⚠  %s: %s', path, exc)
            return FileOutcome(path=str(path), status=STATUS_FAILED, error=str(exc))

        unbalanced: List[str] = []
        for count in inspect_markers(text, markers):
            if count.balanced:
                self._log.debug('%s: %r S=%d L=%d E=%d', path, count.feature_id, count.starts, count.leaves, count.ends)
                continue
            self._log.warning(
                '⚠  %s: feature %r unbalanced (S=%d L=%d E=%d)',
                path,
                count.feature_id,
                count.starts,
                count.leaves,
                count.ends,
            )
            unbalanced.append(count.feature_id)
        return FileOutcome(path=str(path), status=STATUS_UNCHANGED, unbalanced=unbalanced)
