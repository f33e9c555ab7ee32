"""Asset value type flowing through target pipelines."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import PurePosixPath


@dataclass(frozen=True, slots=True)
class Asset:
    """One file in a build stream.

    Assets are immutable: every transform returns a new instance, so the
    same source asset can be consumed by several concurrently running
    targets without any of them observing another's edits.

    Attributes
    ----------
    path : str
        POSIX path relative to the project root (e.g. ``src/app.html``)
    contents : bytes
        Raw file contents
    """

    path: str
    contents: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", PurePosixPath(self.path).as_posix())

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.path).suffix.lower()

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")

    def with_text(self, text: str) -> Asset:
        return replace(self, contents=text.encode("utf-8"))

    def with_contents(self, contents: bytes) -> Asset:
        return replace(self, contents=contents)
