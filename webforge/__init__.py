"""webforge - configuration-driven multi-target web asset builds.

Turns a declarative description of build targets into per-target pipelines
of asset transforms, runs them concurrently, and generates a service worker
for each finished target.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("webforge")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from webforge.compiler import CliOverrides, load_project_config, resolve_project_config
from webforge.kernel.domain import (
    Asset,
    BuildReport,
    PipelineRun,
    ProjectConfig,
    RunStatus,
    Stage,
    StageKind,
    TargetSpec,
)
from webforge.kernel.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    OutputClearError,
    StageError,
    WebforgeError,
)
from webforge.kernel.orchestration import (
    BuildCoordinator,
    PostBuildStepRunner,
    TargetExecutor,
    compose_pipeline,
)

__all__ = [
    "Asset",
    "BuildCoordinator",
    "BuildReport",
    "CliOverrides",
    "ConfigLoadError",
    "ConfigurationError",
    "OutputClearError",
    "PipelineRun",
    "PostBuildStepRunner",
    "ProjectConfig",
    "RunStatus",
    "Stage",
    "StageError",
    "StageKind",
    "TargetExecutor",
    "TargetSpec",
    "WebforgeError",
    "__version__",
    "compose_pipeline",
    "load_project_config",
    "resolve_project_config",
]
