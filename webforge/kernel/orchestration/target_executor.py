"""Target executor: interprets a composed stage tuple against the asset source.

Each run builds a fresh transform chain over a fresh read of the shared
source, so no mutable state crosses target boundaries. The run settles when
the chain is drained (end of stream) or raises (the originating error is
propagated unchanged).
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import TYPE_CHECKING

from webforge.kernel.domain.asset import Asset
from webforge.kernel.domain.stage import Stage, StageKind
from webforge.kernel.logging import get_logger
from webforge.kernel.utils.streams import merge_streams, when

if TYPE_CHECKING:
    from webforge.kernel.domain.pipeline_run import PipelineRun
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.ports.assets import AssetSource, AssetStream, AssetTransform, HtmlSplitter
    from webforge.kernel.ports.filesystem import OutputFilesystem
    from webforge.kernel.ports.toolkit import BuildToolkit

__all__ = ["TargetExecutor"]

logger = get_logger(__name__)


class TargetExecutor:
    """Runs composed pipelines, one target at a time per call.

    Parameters
    ----------
    project : ProjectConfig
        Resolved project configuration
    source : AssetSource
        Shared, read-only asset source
    toolkit : BuildToolkit
        Concrete stage transforms
    filesystem : OutputFilesystem
        Destination for the terminal write stage
    splitter_factory : Callable[[], HtmlSplitter]
        Creates the per-run splitter shared by the split and rejoin stages

    Examples
    --------
    Basic usage::

        executor = TargetExecutor(project, LocalAssetSource(project), MockToolkit(),
                                  LocalFilesystem(), RegexHtmlSplitter)
        run = PipelineRun("default", Path("build/default"), compose_pipeline(target))
        await executor.aexecute(run)
    """

    def __init__(
        self,
        project: ProjectConfig,
        source: AssetSource,
        toolkit: BuildToolkit,
        filesystem: OutputFilesystem,
        splitter_factory: Callable[[], HtmlSplitter],
    ) -> None:
        self._project = project
        self._source = source
        self._toolkit = toolkit
        self._filesystem = filesystem
        self._splitter_factory = splitter_factory

    def build_stream(self, stages: tuple[Stage, ...]) -> AssetStream:
        """Chain the stages over a fresh merge of sources and dependencies."""
        splitter = self._splitter_factory()
        stream: AssetStream = merge_streams(self._source.sources(), self._source.dependencies())
        for stage in stages:
            stream = self._interpret(stage, splitter)(stream)
        return stream

    async def aexecute(self, run: PipelineRun) -> PipelineRun:
        """Drain the run's pipeline to end of stream.

        Raises
        ------
        Exception
            Whatever a stage or the source raised; the run is left RUNNING
            for the caller to settle
        """
        run.mark_running()
        logger.debug(
            "({}) Stages: {}", run.target_name, ", ".join(stage.kind for stage in run.stages)
        )
        async for _ in self.build_stream(run.stages):
            run.assets_written += 1
        return run

    # ========================================================================
    # Stage interpretation
    # ========================================================================

    def _interpret(self, stage: Stage, splitter: HtmlSplitter) -> AssetTransform:
        if stage.kind == StageKind.SPLIT:
            return splitter.split
        if stage.kind == StageKind.REJOIN:
            return splitter.rejoin
        if stage.kind == StageKind.WRITE:
            return self._writer(Path(stage.options["directory"]))
        if stage.is_content:
            return self._content_transform(stage)
        return self._toolkit.stream_transform(stage, self._project)

    def _content_transform(self, stage: Stage) -> AssetTransform:
        async def apply(asset: Asset) -> Asset:
            return await self._toolkit.atransform_asset(stage, asset, self._project)

        return when(lambda asset: stage.matches(asset.path), apply)

    def _writer(self, directory: Path) -> AssetTransform:
        async def write(stream: AssetStream) -> AsyncIterator[Asset]:
            async for asset in stream:
                await self._filesystem.awrite(directory / asset.path, asset.contents)
                yield asset

        return write
