"""Port interface for the concrete transform implementations.

Compilers, minifiers, prefixers, bundlers and document rewriters live behind
this port. The engine decides *which* stages run and in what order; a toolkit
decides *how* each stage edits assets.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from webforge.kernel.domain.asset import Asset
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.domain.stage import Stage
    from webforge.kernel.ports.assets import AssetTransform


@runtime_checkable
class BuildToolkit(Protocol):
    """Port for stage transform implementations.

    Content stages (compile, minify-js, prefix-css, minify-css, minify-html)
    are called once per matching asset. Document stages (inject-compile-helpers,
    bundle, insert-prefetch-links, update-base-tag, add-push-manifest) receive
    the whole stream.
    """

    @abstractmethod
    async def atransform_asset(
        self, stage: "Stage", asset: "Asset", project: "ProjectConfig"
    ) -> "Asset":
        """Apply a content stage to one asset.

        Parameters
        ----------
        stage : Stage
            The content stage being applied
        asset : Asset
            An asset matching the stage pattern; inline ``<script>`` and
            ``<style>`` blocks arrive as sub-assets split out of their HTML
        project : ProjectConfig
            Resolved project configuration

        Returns
        -------
        Asset
            The transformed asset
        """
        ...

    @abstractmethod
    def stream_transform(self, stage: "Stage", project: "ProjectConfig") -> "AssetTransform":
        """Build the stream transform for a document stage."""
        ...
