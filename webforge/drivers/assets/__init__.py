"""Asset source and splitter drivers."""

from webforge.drivers.assets.html_splitter import RegexHtmlSplitter
from webforge.drivers.assets.local import LocalAssetSource

__all__ = ["LocalAssetSource", "RegexHtmlSplitter"]
