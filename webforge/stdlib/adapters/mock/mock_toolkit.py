"""Mock build toolkit for testing and dry runs."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from webforge.kernel.domain.stage import StageKind
from webforge.kernel.exceptions import StageError

if TYPE_CHECKING:
    from webforge.kernel.domain.asset import Asset
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.domain.stage import Stage
    from webforge.kernel.ports.assets import AssetStream, AssetTransform


@dataclass(frozen=True)
class RecordedTransform:
    """A stage application recorded for test assertions."""

    stage: StageKind
    path: str


class MockToolkit:
    """BuildToolkit that leaves every asset unchanged and records each call.

    Parameters
    ----------
    fail_on : Iterable[StageKind | str]
        Stage kinds that raise ``StageError`` on the first asset they see

    Examples
    --------
    Basic usage::

        toolkit = MockToolkit()
        ...
        assert RecordedTransform(StageKind.MINIFY_JS, "src/app.js") in toolkit.calls

    Failing a stage::

        toolkit = MockToolkit(fail_on=["minify-js"])
    """

    def __init__(self, fail_on: Iterable[StageKind | str] = ()) -> None:
        self.fail_on = frozenset(StageKind(kind) for kind in fail_on)
        self.calls: list[RecordedTransform] = []

    def paths_for(self, kind: StageKind | str) -> list[str]:
        """Paths a stage kind was applied to, in call order."""
        return [call.path for call in self.calls if call.stage == StageKind(kind)]

    def _record(self, stage: Stage, path: str) -> None:
        self.calls.append(RecordedTransform(stage=stage.kind, path=path))
        if stage.kind in self.fail_on:
            raise StageError(stage.kind, path, "configured to fail")

    async def atransform_asset(self, stage: Stage, asset: Asset, project: ProjectConfig) -> Asset:
        self._record(stage, asset.path)
        return asset

    def stream_transform(self, stage: Stage, project: ProjectConfig) -> AssetTransform:
        async def passthrough(stream: AssetStream) -> AsyncIterator[Asset]:
            async for asset in stream:
                self._record(stage, asset.path)
                yield asset

        return passthrough
