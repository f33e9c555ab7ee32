"""Tests for webforge.stdlib.adapters.mock.mock_toolkit."""

from __future__ import annotations

import pytest

from webforge.kernel.domain import Asset, ProjectConfig, Stage, StageKind
from webforge.kernel.exceptions import StageError
from webforge.kernel.utils.streams import iterate
from webforge.stdlib.adapters import MockToolkit, RecordedTransform


class TestMockToolkit:
    """Tests for MockToolkit."""

    @pytest.mark.asyncio
    async def test_records_content_stage(self) -> None:
        toolkit = MockToolkit()
        asset = Asset("src/app.js", b"var a;")

        result = await toolkit.atransform_asset(
            Stage(StageKind.MINIFY_JS), asset, ProjectConfig()
        )

        assert result is asset
        assert toolkit.calls == [RecordedTransform(StageKind.MINIFY_JS, "src/app.js")]

    @pytest.mark.asyncio
    async def test_records_document_stage_per_asset(self) -> None:
        toolkit = MockToolkit()
        transform = toolkit.stream_transform(Stage(StageKind.BUNDLE), ProjectConfig())

        assets = iterate([Asset("a.html", b""), Asset("b.js", b"")])
        paths = [a.path async for a in transform(assets)]

        assert paths == ["a.html", "b.js"]
        assert toolkit.paths_for("bundle") == ["a.html", "b.js"]

    @pytest.mark.asyncio
    async def test_fail_on(self) -> None:
        toolkit = MockToolkit(fail_on=[StageKind.MINIFY_CSS])
        with pytest.raises(StageError, match="minify-css"):
            await toolkit.atransform_asset(
                Stage(StageKind.MINIFY_CSS), Asset("a.css", b""), ProjectConfig()
            )

    def test_fail_on_rejects_unknown_kinds(self) -> None:
        with pytest.raises(ValueError):
            MockToolkit(fail_on=["not-a-stage"])
