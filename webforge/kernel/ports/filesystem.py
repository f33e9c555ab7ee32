"""Output filesystem port definition."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputFilesystem(Protocol):
    """Port for the destructive filesystem operations of a build."""

    async def aremove_tree(self, path: Path) -> None:
        """Delete a directory recursively.

        A missing directory is not an error.
        """
        ...

    async def awrite(self, path: Path, contents: bytes) -> None:
        """Write a file, creating parent directories as needed."""
        ...
