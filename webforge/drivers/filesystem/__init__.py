"""Output filesystem drivers."""

from webforge.drivers.filesystem.local import LocalFilesystem

__all__ = ["LocalFilesystem"]
