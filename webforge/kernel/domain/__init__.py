"""Domain models for the build engine."""

from webforge.kernel.domain.asset import Asset
from webforge.kernel.domain.pipeline_run import BuildReport, PipelineRun, RunStatus
from webforge.kernel.domain.presets import ALLOWED_PRESETS, PRESETS, expand_preset
from webforge.kernel.domain.project_config import ProjectConfig
from webforge.kernel.domain.stage import Stage, StageKind
from webforge.kernel.domain.target_spec import (
    DEFAULT_BUILD_NAME,
    CssOptions,
    HtmlOptions,
    JsOptions,
    TargetSpec,
)

__all__ = [
    "ALLOWED_PRESETS",
    "DEFAULT_BUILD_NAME",
    "PRESETS",
    "Asset",
    "BuildReport",
    "CssOptions",
    "HtmlOptions",
    "JsOptions",
    "PipelineRun",
    "ProjectConfig",
    "RunStatus",
    "Stage",
    "StageKind",
    "TargetSpec",
    "expand_preset",
]
