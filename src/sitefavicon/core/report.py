from __future__ import annotations

"""
Runtime execution report for one pipeline run.

Counters are filled as the sweep progresses; a fatal error leaves the report
in a partial but consistent state, which is what `--report FILE` writes.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from sitefavicon.core.models import MergeAction, MergeOutcome


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    site_root: Optional[str] = None
    metadata_path: Optional[str] = None

    directories_scanned: int = 0
    directories_with_pages: int = 0
    directories_skipped: int = 0
    directories_merged: int = 0

    pages_staged: int = 0
    merge_actions: Dict[str, int] = field(
        default_factory=lambda: {a.value: 0 for a in MergeAction}
    )

    injector_calls: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "scan": 0.0,
            "generate": 0.0,
            "stage": 0.0,
            "inject": 0.0,
            "merge": 0.0,
        }
    )

    failed_directories: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def add_scan(self, *, scanned: int, with_pages: int) -> None:
        self.directories_scanned += scanned
        self.directories_with_pages += with_pages
        self.directories_skipped += scanned - with_pages

    def add_merge(self, outcomes: Iterable[MergeOutcome]) -> None:
        for outcome in outcomes:
            key = outcome.action.value
            self.merge_actions[key] = self.merge_actions.get(key, 0) + 1
        self.directories_merged += 1

    @property
    def pages_written(self) -> int:
        return self.merge_actions.get(MergeAction.CREATED.value, 0) + self.merge_actions.get(
            MergeAction.UPDATED.value, 0
        )

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str, *, directory: Optional[Path] = None) -> None:
        self.errors.append(message)
        if directory is not None:
            self.failed_directories.append(str(directory))

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "site_root": self.site_root,
                "metadata_path": self.metadata_path,
                "directories_scanned": self.directories_scanned,
                "directories_with_pages": self.directories_with_pages,
                "directories_skipped": self.directories_skipped,
                "directories_merged": self.directories_merged,
                "pages_staged": self.pages_staged,
                "pages_written": self.pages_written,
                "merge_actions": self.merge_actions,
                "injector_calls": self.injector_calls,
                "time_by_stage": self.time_by_stage,
                "failed_directories": self.failed_directories,
                "errors": self.errors,
            },
            indent=indent,
        )


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
