"""Port interfaces for asset streams.

The build engine never reads files itself. It consumes an ``AssetSource``
and reshapes the stream with an ``HtmlSplitter``; both are swappable.
"""

from collections.abc import AsyncIterator, Callable
from typing import Protocol, runtime_checkable

from webforge.kernel.domain.asset import Asset

AssetStream = AsyncIterator[Asset]
AssetTransform = Callable[[AssetStream], AssetStream]


@runtime_checkable
class AssetSource(Protocol):
    """Port for the shared project asset source.

    Every call returns a fresh iterator, so each target pipeline reads the
    project independently of its siblings.
    """

    def sources(self) -> AssetStream:
        """Stream the project's own source files."""
        ...

    def dependencies(self) -> AssetStream:
        """Stream the project's third-party dependency files."""
        ...


@runtime_checkable
class HtmlSplitter(Protocol):
    """Port for splitting inline scripts and styles out of HTML and back.

    One splitter instance serves one pipeline run: ``rejoin`` only knows the
    sub-assets that the same instance's ``split`` produced.
    """

    def split(self, stream: AssetStream) -> AssetStream:
        """Emit each HTML asset followed by its inline blocks as sub-assets."""
        ...

    def rejoin(self, stream: AssetStream) -> AssetStream:
        """Fold sub-assets back into their parent HTML assets."""
        ...
