"""Port interfaces for the build engine's external collaborators."""

from webforge.kernel.ports.assets import AssetSource, AssetStream, AssetTransform, HtmlSplitter
from webforge.kernel.ports.filesystem import OutputFilesystem
from webforge.kernel.ports.service_worker import ServiceWorkerConfigLoader, ServiceWorkerGenerator
from webforge.kernel.ports.toolkit import BuildToolkit

__all__ = [
    "AssetSource",
    "AssetStream",
    "AssetTransform",
    "BuildToolkit",
    "HtmlSplitter",
    "OutputFilesystem",
    "ServiceWorkerConfigLoader",
    "ServiceWorkerGenerator",
]
