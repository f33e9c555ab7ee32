"""Multi-target pipeline composition and execution."""

from webforge.kernel.orchestration.composer import compose_pipeline, resolve_base_path
from webforge.kernel.orchestration.coordinator import BuildCoordinator, CoordinatorState
from webforge.kernel.orchestration.post_build import DEFAULT_SW_CONFIG, PostBuildStepRunner
from webforge.kernel.orchestration.target_executor import TargetExecutor

__all__ = [
    "DEFAULT_SW_CONFIG",
    "BuildCoordinator",
    "CoordinatorState",
    "PostBuildStepRunner",
    "TargetExecutor",
    "compose_pipeline",
    "resolve_base_path",
]
