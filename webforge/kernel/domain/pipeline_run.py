"""Domain model for per-target pipeline run tracking."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from webforge.kernel.domain.stage import Stage


class RunStatus(StrEnum):
    """Lifecycle status of a target run."""

    CREATED = "created"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineRun:
    """Execution state of one target, from composition to settlement."""

    target_name: str
    output_dir: Path
    stages: tuple[Stage, ...] = ()
    status: RunStatus = RunStatus.CREATED
    assets_written: int = 0
    service_worker: bool = False
    created_at: float = field(default_factory=time.time)
    started_at: float | None = None
    completed_at: float | None = None
    duration_ms: float | None = None
    error: str | None = None

    def mark_running(self) -> None:
        self.status = RunStatus.RUNNING
        self.started_at = time.time()

    def mark_completed(self) -> None:
        self._settle(RunStatus.COMPLETED)

    def mark_failed(self, error: BaseException) -> None:
        self.error = f"{type(error).__name__}: {error}"
        self._settle(RunStatus.FAILED)

    def _settle(self, status: RunStatus) -> None:
        self.status = status
        self.completed_at = time.time()
        self.duration_ms = (self.completed_at - (self.started_at or self.created_at)) * 1000

    @property
    def settled(self) -> bool:
        return self.status in (RunStatus.COMPLETED, RunStatus.FAILED)


@dataclass(slots=True)
class BuildReport:
    """Outcome of one coordinator invocation, for in-process callers."""

    build_root: Path
    runs: list[PipelineRun] = field(default_factory=list)

    @property
    def succeeded(self) -> list[PipelineRun]:
        return [run for run in self.runs if run.status == RunStatus.COMPLETED]

    @property
    def failed(self) -> list[PipelineRun]:
        return [run for run in self.runs if run.status == RunStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed
