"""Configuration resolver: declarative config + command-line overrides.

Exactly one source decides the target list:

1. ``presets`` given: keep the allow-listed names (unknown ones are dropped
   silently); each reuses the declared build with the same ``preset`` if
   there is one, otherwise becomes a stub holding only the preset name.
2. any other recognized flag given: the declared builds are discarded and a
   single custom build is synthesized from the flags. ``fragment`` values are
   appended to the declared fragments.
3. nothing given: the declarative configuration is used as is.

Presets are then expanded on every target. An empty target list is rejected.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from webforge.kernel.domain.presets import ALLOWED_PRESETS, expand_preset
from webforge.kernel.domain.project_config import ProjectConfig
from webforge.kernel.domain.target_spec import CssOptions, HtmlOptions, JsOptions, TargetSpec
from webforge.kernel.exceptions import ConfigurationError
from webforge.kernel.logging import get_logger

logger = get_logger(__name__)


class CliOverrides(BaseModel):
    """Parsed command-line overrides. None means "flag not given"."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    presets: tuple[str, ...] | None = None
    add_service_worker: bool | None = None
    bundle: bool | None = None
    css_minify: bool | None = None
    html_minify: bool | None = None
    js_compile: bool | None = None
    js_minify: bool | None = None
    insert_prefetch_links: bool | None = None
    entrypoint: str | None = None
    shell: str | None = None
    fragment: tuple[str, ...] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def custom_target(self) -> TargetSpec:
        """The single build described by the stage flags."""
        return TargetSpec(
            add_service_worker=bool(self.add_service_worker),
            insert_prefetch_links=bool(self.insert_prefetch_links),
            bundle=bool(self.bundle),
            css=CssOptions(minify=bool(self.css_minify)),
            html=HtmlOptions(minify=bool(self.html_minify)),
            js=JsOptions(compile=bool(self.js_compile), minify=bool(self.js_minify)),
        )


def select_preset_targets(
    declared: tuple[TargetSpec, ...], presets: tuple[str, ...]
) -> tuple[TargetSpec, ...]:
    """Map requested preset names to targets, dropping names not allow-listed."""
    allowed = [preset for preset in dict.fromkeys(presets) if preset in ALLOWED_PRESETS]
    dropped = [preset for preset in presets if preset not in ALLOWED_PRESETS]
    if dropped:
        logger.debug("Ignoring unknown presets: {}", ", ".join(dropped))

    configured = {}
    for target in declared:
        if target.preset is not None:
            configured.setdefault(target.preset, target)

    return tuple(configured.get(preset) or TargetSpec(preset=preset) for preset in allowed)


def resolve_project_config(
    declared: ProjectConfig, overrides: CliOverrides | None = None
) -> ProjectConfig:
    """Merge the declarative configuration with command-line overrides.

    Parameters
    ----------
    declared : ProjectConfig
        Configuration as loaded from the project file
    overrides : CliOverrides | None
        Parsed command-line flags

    Returns
    -------
    ProjectConfig
        A new configuration with a non-empty, preset-expanded target list

    Raises
    ------
    ConfigurationError
        If no targets remain, a preset is unknown, or build names collide
    """
    overrides = overrides or CliOverrides()
    changes: dict[str, Any] = {}

    if overrides.presets is not None:
        changes["targets"] = select_preset_targets(declared.targets, overrides.presets)
    elif not overrides.is_empty:
        changes["targets"] = (overrides.custom_target(),)
        if overrides.entrypoint:
            changes["entrypoint"] = overrides.entrypoint
        if overrides.shell:
            changes["shell"] = overrides.shell
        if overrides.fragment:
            changes["fragments"] = (*declared.fragments, *overrides.fragment)

    targets = tuple(expand_preset(target) for target in changes.get("targets", declared.targets))
    if not targets:
        raise ConfigurationError("builds", "no build targets resolved")
    changes["targets"] = targets

    fields = {name: getattr(declared, name) for name in ProjectConfig.model_fields}
    return ProjectConfig(**{**fields, **changes})
