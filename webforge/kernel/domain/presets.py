"""Named, pre-tuned bundles of stage flags.

A target naming a ``preset`` is expanded by deep-merging the preset's flags
under the target's own explicit options, so anything the target sets wins.
"""

from __future__ import annotations

import copy
from typing import Any

from webforge.kernel.domain.target_spec import TargetSpec
from webforge.kernel.exceptions import ConfigurationError

_SHARED_FLAGS: dict[str, Any] = {
    "css": {"minify": True},
    "html": {"minify": True},
    "addServiceWorker": True,
    "addPushManifest": True,
    "insertPrefetchLinks": True,
}

PRESETS: dict[str, dict[str, Any]] = {
    "es5-bundled": {
        **_SHARED_FLAGS,
        "name": "es5-bundled",
        "js": {"compile": True, "minify": True},
        "bundle": True,
    },
    "es6-bundled": {
        **_SHARED_FLAGS,
        "name": "es6-bundled",
        "js": {"minify": True},
        "bundle": True,
    },
    "es6-unbundled": {
        **_SHARED_FLAGS,
        "name": "es6-unbundled",
        "js": {"minify": True},
        "bundle": False,
    },
}

ALLOWED_PRESETS: tuple[str, ...] = tuple(PRESETS)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_preset(target: TargetSpec) -> TargetSpec:
    """Return ``target`` with its preset's flags filled in.

    Raises
    ------
    ConfigurationError
        If the target names a preset that is not in ``PRESETS``
    """
    if target.preset is None:
        return target

    preset = PRESETS.get(target.preset)
    if preset is None:
        raise ConfigurationError(
            "builds",
            f"unknown preset '{target.preset}' (known: {', '.join(ALLOWED_PRESETS)})",
        )

    explicit = target.model_dump(by_alias=True, exclude_unset=True)
    return TargetSpec.model_validate(_deep_merge(preset, explicit))
