"""Tests for webforge.compiler.resolver."""

from __future__ import annotations

import pytest

from webforge.compiler import CliOverrides, resolve_project_config
from webforge.compiler.resolver import select_preset_targets
from webforge.kernel.domain import ProjectConfig, TargetSpec
from webforge.kernel.exceptions import ConfigurationError


@pytest.fixture
def declared() -> ProjectConfig:
    return ProjectConfig.model_validate({
        "entrypoint": "index.html",
        "shell": "src/app-shell.html",
        "fragments": ["a.html"],
        "builds": [
            {"name": "modern", "js": {"minify": True}},
            {"preset": "es5-bundled", "basePath": True},
        ],
    })


class TestCliOverrides:
    """Tests for CliOverrides."""

    def test_empty(self) -> None:
        assert CliOverrides().is_empty
        assert not CliOverrides(bundle=True).is_empty

    def test_custom_target_from_flags(self) -> None:
        target = CliOverrides(js_minify=True, bundle=True).custom_target()
        assert target.js.minify is True
        assert target.js.compile is False
        assert target.bundle is True
        assert target.add_service_worker is False
        assert target.name is None

    def test_unknown_override_rejected(self) -> None:
        with pytest.raises(ValueError):
            CliOverrides(not_a_flag=True)  # type: ignore[call-arg]


class TestResolveProjectConfig:
    """Tests for resolve_project_config."""

    def test_no_overrides_keeps_declared_builds(self, declared) -> None:
        resolved = resolve_project_config(declared)
        assert [t.build_name for t in resolved.targets] == ["modern", "es5-bundled"]
        assert resolved.fragments == ("a.html",)

    def test_no_overrides_expands_presets(self, declared) -> None:
        es5 = resolve_project_config(declared).targets[1]
        assert es5.js.compile is True
        assert es5.base_path is True

    def test_unknown_presets_are_dropped(self, declared) -> None:
        overrides = CliOverrides(presets=("es5-bundled", "unknown-preset"))
        resolved = resolve_project_config(declared, overrides)
        assert [t.build_name for t in resolved.targets] == ["es5-bundled"]

    def test_preset_reuses_declared_target(self, declared) -> None:
        resolved = resolve_project_config(declared, CliOverrides(presets=("es5-bundled",)))
        # basePath came from the declared build, not the preset table
        assert resolved.targets[0].base_path is True

    def test_preset_without_declaration_is_synthesized(self, declared) -> None:
        resolved = resolve_project_config(declared, CliOverrides(presets=("es6-unbundled",)))
        target = resolved.targets[0]
        assert target.name == "es6-unbundled"
        assert target.preset == "es6-unbundled"
        assert target.bundle is False
        assert target.base_path is False

    def test_presets_win_over_stage_flags(self, declared) -> None:
        overrides = CliOverrides(presets=("es6-bundled",), js_compile=True)
        resolved = resolve_project_config(declared, overrides)
        assert [t.build_name for t in resolved.targets] == ["es6-bundled"]
        assert resolved.targets[0].js.compile is False

    def test_duplicate_presets_collapse(self, declared) -> None:
        overrides = CliOverrides(presets=("es6-bundled", "es6-bundled"))
        assert len(resolve_project_config(declared, overrides).targets) == 1

    def test_flags_replace_declared_builds(self, declared) -> None:
        resolved = resolve_project_config(declared, CliOverrides(css_minify=True))
        assert len(resolved.targets) == 1
        target = resolved.targets[0]
        assert target.build_name == "default"
        assert target.css.minify is True
        assert target.js.minify is False

    def test_fragment_is_appended(self, declared) -> None:
        resolved = resolve_project_config(declared, CliOverrides(fragment=("extra.html",)))
        assert resolved.fragments == ("a.html", "extra.html")

    def test_entrypoint_and_shell_replace(self, declared) -> None:
        overrides = CliOverrides(entrypoint="app.html", shell="src/shell.html")
        resolved = resolve_project_config(declared, overrides)
        assert resolved.entrypoint == "app.html"
        assert resolved.shell == "src/shell.html"

    def test_declared_config_is_not_mutated(self, declared) -> None:
        resolve_project_config(declared, CliOverrides(fragment=("extra.html",)))
        assert declared.fragments == ("a.html",)
        assert len(declared.targets) == 2

    def test_only_unknown_presets_is_an_error(self, declared) -> None:
        with pytest.raises(ConfigurationError, match="no build targets"):
            resolve_project_config(declared, CliOverrides(presets=("nope",)))

    def test_no_declared_builds_is_an_error(self) -> None:
        with pytest.raises(ConfigurationError, match="no build targets"):
            resolve_project_config(ProjectConfig())

    def test_unknown_declared_preset_is_an_error(self) -> None:
        declared = ProjectConfig(targets=(TargetSpec(preset="es2049"),))
        with pytest.raises(ConfigurationError, match="es2049"):
            resolve_project_config(declared)


class TestSelectPresetTargets:
    """Tests for select_preset_targets."""

    def test_first_declared_match_wins(self) -> None:
        first = TargetSpec(name="one", preset="es6-bundled")
        second = TargetSpec(name="two", preset="es6-bundled")
        assert select_preset_targets((first, second), ("es6-bundled",)) == (first,)

    def test_stub_holds_only_the_preset(self) -> None:
        (stub,) = select_preset_targets((), ("es5-bundled",))
        assert stub == TargetSpec(preset="es5-bundled")
