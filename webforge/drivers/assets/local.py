"""Local disk asset source driver."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable

import aiofiles

from webforge.kernel.domain.asset import Asset
from webforge.kernel.domain.project_config import ProjectConfig
from webforge.kernel.logging import get_logger

logger = get_logger(__name__)


class LocalAssetSource:
    """Reads project sources and dependencies from disk by glob.

    Every call to :meth:`sources` or :meth:`dependencies` re-reads the
    files, so concurrent targets never share an iterator. Files are yielded
    in sorted path order; a file matched by several globs is yielded once.
    Dependency files already matched as sources are skipped.

    Parameters
    ----------
    project : ProjectConfig
        Supplies ``root``, ``source_globs`` and ``dependency_globs``
    """

    def __init__(self, project: ProjectConfig) -> None:
        self._root = project.root
        self._source_globs = project.source_globs
        self._dependency_globs = project.dependency_globs

    def sources(self) -> AsyncIterator[Asset]:
        return self._aread(self._source_globs)

    def dependencies(self) -> AsyncIterator[Asset]:
        return self._aread(self._dependency_globs, exclude=self._source_globs)

    async def _aread(
        self, globs: Iterable[str], exclude: Iterable[str] = ()
    ) -> AsyncIterator[Asset]:
        paths = await asyncio.to_thread(self._expand, tuple(globs), tuple(exclude))
        for path in paths:
            async with aiofiles.open(self._root / path, "rb") as f:
                contents = await f.read()
            yield Asset(path=path, contents=contents)

    def _expand(self, globs: tuple[str, ...], exclude: tuple[str, ...]) -> list[str]:
        excluded = self._match(exclude)
        return sorted(self._match(globs) - excluded)

    def _match(self, globs: tuple[str, ...]) -> set[str]:
        matched: set[str] = set()
        for pattern in globs:
            pattern = pattern.lstrip("/")
            for path in self._root.glob(pattern):
                if path.is_file():
                    matched.add(path.relative_to(self._root).as_posix())
        if globs and not matched:
            logger.debug("No files matched {} under {}", ", ".join(globs), self._root)
        return matched
