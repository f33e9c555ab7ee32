"""Local infrastructure implementations of the kernel ports."""

from webforge.drivers.assets import LocalAssetSource, RegexHtmlSplitter
from webforge.drivers.filesystem import LocalFilesystem
from webforge.drivers.service_worker import (
    SERVICE_WORKER_FILENAME,
    FileServiceWorkerConfigLoader,
    PrecacheServiceWorkerGenerator,
)

__all__ = [
    "SERVICE_WORKER_FILENAME",
    "FileServiceWorkerConfigLoader",
    "LocalAssetSource",
    "LocalFilesystem",
    "PrecacheServiceWorkerGenerator",
    "RegexHtmlSplitter",
]
