"""Regex-based HTML splitter.

Lifts inline ``<script>`` and ``<style>`` blocks out of HTML assets into
sub-assets (``index.html_script_0.js``, ``index.html_style_1.css``) so that
per-language stages can address them by path, then folds them back in.
"""

from __future__ import annotations

import re
from collections.abc import AsyncIterator, Iterator

from webforge.kernel.domain.asset import Asset
from webforge.kernel.ports.assets import AssetStream
from webforge.kernel.utils.markup import is_inline_javascript

_INLINE_BLOCK = re.compile(
    r"(<(script|style)\b([^>]*)>)(.*?)(</\2\s*>)", re.IGNORECASE | re.DOTALL
)


def _inline_blocks(html: str) -> Iterator[re.Match[str]]:
    """Inline script and style blocks, in document order."""
    for match in _INLINE_BLOCK.finditer(html):
        if match.group(2).lower() == "style" or is_inline_javascript(match.group(3)):
            yield match


class RegexHtmlSplitter:
    """Splits and rejoins inline blocks for one pipeline run.

    Without any stage in between, ``rejoin(split(stream))`` yields the
    original assets byte for byte.
    """

    def __init__(self) -> None:
        self._owners: dict[str, tuple[str, int]] = {}
        self._block_counts: dict[str, int] = {}

    async def split(self, stream: AssetStream) -> AsyncIterator[Asset]:
        async for asset in stream:
            yield asset
            if asset.suffix != ".html":
                continue
            try:
                html = asset.text
            except UnicodeDecodeError:
                continue

            count = 0
            for index, match in enumerate(_inline_blocks(html)):
                tag = match.group(2).lower()
                extension = "css" if tag == "style" else "js"
                path = f"{asset.path}_{tag}_{index}.{extension}"
                self._owners[path] = (asset.path, index)
                count += 1
                yield Asset(path=path, contents=match.group(4).encode("utf-8"))
            if count:
                self._block_counts[asset.path] = count

    async def rejoin(self, stream: AssetStream) -> AsyncIterator[Asset]:
        pending: dict[str, tuple[Asset, dict[int, str]]] = {}

        async for asset in stream:
            if asset.path in self._block_counts:
                pending[asset.path] = (asset, {})
                continue

            owner = self._owners.get(asset.path)
            if owner is None or owner[0] not in pending:
                yield asset
                continue

            parent_path, index = owner
            parent, parts = pending[parent_path]
            parts[index] = asset.text
            if len(parts) == self._block_counts[parent_path]:
                del pending[parent_path]
                yield self._join(parent, parts)

        # A stage dropped some sub-assets; keep the parent's own blocks for those
        for parent, parts in pending.values():
            yield self._join(parent, parts)

    def _join(self, parent: Asset, parts: dict[int, str]) -> Asset:
        html = parent.text
        pieces: list[str] = []
        last = 0
        for index, match in enumerate(_inline_blocks(html)):
            pieces.append(html[last : match.start(4)])
            pieces.append(parts.get(index, match.group(4)))
            last = match.end(4)
        pieces.append(html[last:])

        joined = "".join(pieces)
        return parent if joined == html else parent.with_text(joined)
