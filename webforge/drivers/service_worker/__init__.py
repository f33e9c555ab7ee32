"""Service-worker config loading and generation drivers."""

from webforge.drivers.service_worker.config_loader import FileServiceWorkerConfigLoader
from webforge.drivers.service_worker.precache import (
    SERVICE_WORKER_FILENAME,
    PrecacheServiceWorkerGenerator,
)

__all__ = [
    "SERVICE_WORKER_FILENAME",
    "FileServiceWorkerConfigLoader",
    "PrecacheServiceWorkerGenerator",
]
