"""Build toolkit backed by external commands.

Content stages pipe each asset through a command configured under
``tools`` in the project file, keyed by stage kind::

    tools:
      compile: [npx, babel, --filename, "{path}"]
      minify-js: [npx, terser, --compress, --mangle]
      minify-css: [npx, csso]
      minify-html: [npx, html-minifier, --collapse-whitespace, --remove-comments]

The asset is written to the command's stdin and its stdout becomes the new
contents. ``{path}`` is replaced with the asset path and ``{options}`` with
the stage options as JSON. Stages without a command pass assets through
unchanged, with one warning per stage kind.

Base-tag rewriting, prefetch links and the push manifest are built in.
Compile-helper injection and bundling need a command; when configured it is
run once per entry document.
"""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping, Sequence
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from webforge.kernel.domain.asset import Asset
from webforge.kernel.domain.stage import StageKind
from webforge.kernel.exceptions import StageError
from webforge.kernel.logging import get_logger
from webforge.kernel.utils.streams import on_paths

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.domain.stage import Stage
    from webforge.kernel.ports.assets import AssetStream, AssetTransform

logger = get_logger(__name__)

PUSH_MANIFEST_FILENAME = "push-manifest.json"

_BASE_HREF = re.compile(r"""(<base\b[^>]*\bhref\s*=\s*)(["'])[^"']*\2""", re.IGNORECASE)
_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)

_PUSH_TYPES: dict[str, str] = {
    ".html": "document",
    ".js": "script",
    ".mjs": "script",
    ".css": "style",
    ".png": "image",
    ".jpg": "image",
    ".jpeg": "image",
    ".gif": "image",
    ".svg": "image",
    ".webp": "image",
    ".woff": "font",
    ".woff2": "font",
    ".ttf": "font",
    ".json": "fetch",
}


class CommandToolkit:
    """BuildToolkit running configured external tools.

    Parameters
    ----------
    tools : Mapping[str, Sequence[str]] | None
        Command argv per stage kind, usually ``project.tools``

    Examples
    --------
    From the project file::

        toolkit = CommandToolkit(project.tools)
    """

    def __init__(self, tools: Mapping[str, Sequence[str]] | None = None) -> None:
        self._tools = {str(kind): list(argv) for kind, argv in (tools or {}).items()}
        self._warned: set[StageKind] = set()

    # ========================================================================
    # Content stages
    # ========================================================================

    async def atransform_asset(self, stage: Stage, asset: Asset, project: ProjectConfig) -> Asset:
        argv = self._tools.get(stage.kind)
        if not argv:
            self._warn_unconfigured(stage.kind)
            return asset
        output = await self._arun_command(stage, argv, asset, project)
        return asset.with_contents(output)

    # ========================================================================
    # Document stages
    # ========================================================================

    def stream_transform(self, stage: Stage, project: ProjectConfig) -> AssetTransform:
        if stage.kind == StageKind.UPDATE_BASE_TAG:
            updater = self._base_tag_updater(stage.options["base_path"])
            return on_paths([project.entrypoint], updater)
        if stage.kind == StageKind.INSERT_PREFETCH_LINKS:
            return on_paths([project.entrypoint], self._prefetch_inserter(project))
        if stage.kind == StageKind.ADD_PUSH_MANIFEST:
            return self._push_manifest(project)

        argv = self._tools.get(stage.kind)
        if not argv:
            self._warn_unconfigured(stage.kind)
            return _passthrough

        async def run_on_entry_document(asset: Asset) -> Asset:
            return asset.with_contents(await self._arun_command(stage, argv, asset, project))

        return on_paths(project.entry_documents, run_on_entry_document)

    def _base_tag_updater(self, base_path: str) -> Callable[[Asset], Awaitable[Asset]]:
        async def update(asset: Asset) -> Asset:
            html, count = _BASE_HREF.subn(
                lambda m: f"{m.group(1)}{m.group(2)}{base_path}{m.group(2)}", asset.text, count=1
            )
            if not count:
                logger.debug("No <base> tag in {}, leaving it unchanged", asset.path)
                return asset
            return asset.with_text(html)

        return update

    def _prefetch_inserter(self, project: ProjectConfig) -> Callable[[Asset], Awaitable[Asset]]:
        documents = [doc for doc in project.entry_documents if doc != project.entrypoint]

        async def insert(asset: Asset) -> Asset:
            html = asset.text
            links = "".join(
                f'<link rel="prefetch" href="/{doc}">'
                for doc in documents
                if f'href="/{doc}"' not in html
            )
            if not links:
                return asset
            html, count = _HEAD_CLOSE.subn(lambda m: links + m.group(0), html, count=1)
            if not count:
                html = links + html
            return asset.with_text(html)

        return insert

    def _push_manifest(self, project: ProjectConfig) -> AssetTransform:
        async def add_manifest(stream: AssetStream) -> AsyncIterator[Asset]:
            resources: dict[str, dict[str, Any]] = {}
            async for asset in stream:
                push_type = _PUSH_TYPES.get(PurePosixPath(asset.path).suffix.lower())
                if push_type and asset.path != project.entrypoint:
                    resources[f"/{asset.path}"] = {"type": push_type, "weight": 1}
                yield asset

            manifest = {project.entrypoint: dict(sorted(resources.items()))}
            yield Asset(
                path=PUSH_MANIFEST_FILENAME,
                contents=json.dumps(manifest, indent=2).encode("utf-8"),
            )

        return add_manifest

    # ========================================================================
    # Helpers
    # ========================================================================

    async def _arun_command(
        self, stage: Stage, argv: list[str], asset: Asset, project: ProjectConfig
    ) -> bytes:
        options = json.dumps(stage.options, default=str)
        args = [part.replace("{path}", asset.path).replace("{options}", options) for part in argv]
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=project.root,
            )
        except OSError as e:
            raise StageError(stage.kind, asset.path, f"cannot run '{args[0]}': {e}") from e

        stdout, stderr = await process.communicate(asset.contents)
        if process.returncode != 0:
            reason = stderr.decode("utf-8", errors="replace").strip()
            raise StageError(
                stage.kind, asset.path, reason or f"'{args[0]}' exited with {process.returncode}"
            )
        return stdout

    def _warn_unconfigured(self, kind: StageKind) -> None:
        if kind not in self._warned:
            self._warned.add(kind)
            logger.warning("No tool configured for stage '{}', passing assets through", kind)


async def _passthrough(stream: AssetStream) -> AsyncIterator[Asset]:
    async for asset in stream:
        yield asset
