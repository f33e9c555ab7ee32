"""Build coordinator - top-level driver of a multi-target build.

States: ``IDLE -> CLEARING -> RUNNING -> DONE``.

- CLEARING removes the aggregate build directory once, before any target
  starts. Failure here aborts the run.
- RUNNING starts every target concurrently with asyncio.gather(); each target
  goes compose -> execute -> post-build on its own. A target's failure is
  logged and recorded on its run, never propagated to its siblings.
- DONE is reached once every target has settled, success or failure.
"""

from __future__ import annotations

import asyncio
import os
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from webforge.kernel.domain.pipeline_run import BuildReport, PipelineRun
from webforge.kernel.exceptions import OutputClearError
from webforge.kernel.logging import get_logger
from webforge.kernel.orchestration.composer import compose_pipeline

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.domain.target_spec import TargetSpec
    from webforge.kernel.orchestration.post_build import PostBuildStepRunner
    from webforge.kernel.orchestration.target_executor import TargetExecutor
    from webforge.kernel.ports.filesystem import OutputFilesystem

__all__ = ["BuildCoordinator", "CoordinatorState"]

logger = get_logger(__name__)


class CoordinatorState(StrEnum):
    """Lifecycle of one coordinator invocation."""

    IDLE = "idle"
    CLEARING = "clearing"
    RUNNING = "running"
    DONE = "done"


class BuildCoordinator:
    """Clears prior output, fans targets out, and waits for all to settle.

    Parameters
    ----------
    project : ProjectConfig
        Resolved project configuration; ``project.targets`` are built
    executor : TargetExecutor
        Runs one composed pipeline
    post_build : PostBuildStepRunner
        Runs the service-worker step after a successful pipeline
    filesystem : OutputFilesystem
        Owner of the clearing operation
    build_root : Path | None
        Aggregate output directory (default: ``<root>/build``)

    Examples
    --------
    Basic usage::

        coordinator = BuildCoordinator(project, executor, post_build, LocalFilesystem())
        report = await coordinator.arun()
        for run in report.failed:
            print(run.target_name, run.error)
    """

    def __init__(
        self,
        project: ProjectConfig,
        executor: TargetExecutor,
        post_build: PostBuildStepRunner,
        filesystem: OutputFilesystem,
        build_root: Path | None = None,
    ) -> None:
        self._project = project
        self._executor = executor
        self._post_build = post_build
        self._filesystem = filesystem
        self.build_root = build_root if build_root is not None else project.root / "build"
        self.state = CoordinatorState.IDLE

    async def arun(self) -> BuildReport:
        """Build every target and return their settled runs.

        Raises
        ------
        OutputClearError
            If the aggregate build directory could not be removed
        """
        self.state = CoordinatorState.CLEARING
        logger.info("Clearing {}{} directory...", self.build_root.name, os.sep)
        try:
            await self._filesystem.aremove_tree(self.build_root)
        except OSError as e:
            raise OutputClearError(self.build_root, e) from e

        self.state = CoordinatorState.RUNNING
        targets = self._project.targets
        runs = [
            PipelineRun(
                target_name=target.build_name, output_dir=self.build_root / target.build_name
            )
            for target in targets
        ]
        outcomes = await asyncio.gather(
            *(self._abuild_target(target, run) for target, run in zip(targets, runs)),
            return_exceptions=True,
        )
        for run, outcome in zip(runs, outcomes):
            # Cancellation and other BaseExceptions slip past the per-target handler
            if isinstance(outcome, BaseException) and not run.settled:
                run.mark_failed(outcome)

        self.state = CoordinatorState.DONE
        report = BuildReport(build_root=self.build_root, runs=runs)
        logger.debug(
            "Build finished: {} succeeded, {} failed", len(report.succeeded), len(report.failed)
        )
        return report

    async def _abuild_target(self, target: TargetSpec, run: PipelineRun) -> PipelineRun:
        name = target.build_name
        logger.info("({}) Building...", name)
        try:
            run.stages = compose_pipeline(target, self.build_root)
            await self._executor.aexecute(run)
            run.service_worker = await self._post_build.arun(target, run.output_dir)
        except Exception as e:
            logger.error("({}) Build failed: {}", name, e)
            run.mark_failed(e)
            return run

        run.mark_completed()
        logger.info("({}) Build complete!", name)
        return run
