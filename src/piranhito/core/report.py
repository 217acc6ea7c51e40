from __future__ import annotations

"""
Detailed runtime execution report.

One report covers one runner invocation (one profile, one directory, one
mode). Every candidate file gets a `FileOutcome`; failures are recorded and
never abort the batch.
"""

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

STATUS_CHANGED = 'changed'
STATUS_UNCHANGED = 'unchanged'
STATUS_FAILED = 'failed'


@dataclass
class FileOutcome:
    path: str
    status: str
    error: Optional[str] = None
    unbalanced: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    fallbacks: List[str] = field(default_factory=list)


@dataclass
class ExecutionReport:
    profile_id: str = ''
    mode: str = ''
    directory: str = ''
    dry_run: bool = False

    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files: List[FileOutcome] = field(default_factory=list)
    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "discovery": 0.0,
            "process": 0.0,
            "write": 0.0,
        }
    )
    errors: List[str] = field(default_factory=list)

    @property
    def files_total(self) -> int:
        return len(self.files)

    def _count(self, status: str) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def files_changed(self) -> int:
        return self._count(STATUS_CHANGED)

    @property
    def files_unchanged(self) -> int:
        return self._count(STATUS_UNCHANGED)

    @property
    def files_failed(self) -> int:
        return self._count(STATUS_FAILED)

    @property
    def has_failures(self) -> bool:
        return self.files_failed > 0

    @property
    def has_unbalanced(self) -> bool:
        return any(f.unbalanced for f in self.files)

    def add_outcome(self, outcome: FileOutcome) -> None:
        self.files.append(outcome)
        if outcome.error:
            self.errors.append(f'{outcome.path}: {outcome.error}')

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_dict(self) -> dict:
        return {
            "profile_id": self.profile_id,
            "mode": self.mode,
            "directory": self.directory,
            "dry_run": self.dry_run,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "duration_s": self.duration_s,
            "files_total": self.files_total,
            "files_changed": self.files_changed,
            "files_unchanged": self.files_unchanged,
            "files_failed": self.files_failed,
            "time_by_stage": self.time_by_stage,
            "files": [asdict(f) for f in self.files],
            "errors": self.errors,
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def write_json(self, path: Path) -> None:
        Path(path).write_text(self.to_json() + "\n", encoding="utf-8")


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
