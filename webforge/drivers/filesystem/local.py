"""Local disk output filesystem driver."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

import aiofiles
import aiofiles.os

from webforge.kernel.logging import get_logger

logger = get_logger(__name__)


class LocalFilesystem:
    """Writes build output to the local disk.

    Examples
    --------
    Basic usage::

        fs = LocalFilesystem()
        await fs.aremove_tree(Path("build"))
        await fs.awrite(Path("build/default/index.html"), b"<!doctype html>")
    """

    async def aremove_tree(self, path: Path) -> None:
        """Delete ``path`` recursively; a missing path is not an error."""
        if not await aiofiles.os.path.exists(path):
            return
        logger.debug("Removing {}", path)
        await asyncio.to_thread(shutil.rmtree, path)

    async def awrite(self, path: Path, contents: bytes) -> None:
        """Write ``contents`` to ``path``, creating parent directories."""
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        async with aiofiles.open(path, "wb") as f:
            await f.write(contents)
