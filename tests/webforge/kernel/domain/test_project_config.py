"""Tests for webforge.kernel.domain.project_config."""

from __future__ import annotations

from pathlib import Path

import pytest

from webforge.kernel.domain import ProjectConfig, TargetSpec
from webforge.kernel.exceptions import ConfigurationError, ValidationError


class TestProjectConfig:
    """Tests for the ProjectConfig model."""

    def test_defaults(self) -> None:
        config = ProjectConfig()
        assert config.root == Path(".")
        assert config.entrypoint == "index.html"
        assert config.shell is None
        assert config.fragments == ()
        assert config.targets == ()
        assert config.logging.level == "INFO"

    def test_builds_alias(self) -> None:
        config = ProjectConfig.model_validate({
            "shell": "src/app-shell.html",
            "fragments": ["src/view-one.html"],
            "builds": [{"name": "a"}, {"preset": "es6-bundled"}],
        })
        assert [target.name for target in config.targets] == ["a", None]

    def test_duplicate_build_names_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="duplicate build name 'same'"):
            ProjectConfig(targets=(TargetSpec(name="same"), TargetSpec(name="same")))

    def test_two_unnamed_builds_collide_on_default(self) -> None:
        with pytest.raises(ConfigurationError, match="'default'"):
            ProjectConfig(targets=(TargetSpec(), TargetSpec()))

    def test_entry_documents_are_deduplicated_in_order(self) -> None:
        config = ProjectConfig(
            entrypoint="index.html",
            shell="src/shell.html",
            fragments=("src/a.html", "index.html", "src/b.html"),
        )
        assert config.entry_documents == (
            "index.html",
            "src/shell.html",
            "src/a.html",
            "src/b.html",
        )

    def test_default_source_globs_include_entry_documents(self) -> None:
        config = ProjectConfig(fragments=("src/a.html",))
        assert config.source_globs == ("src/**/*", "index.html", "src/a.html")

    def test_explicit_sources(self) -> None:
        config = ProjectConfig.model_validate({"sources": ["app/**/*", "index.html"]})
        assert config.source_globs == ("app/**/*", "index.html")

    def test_extra_dependencies_extend_defaults(self) -> None:
        config = ProjectConfig.model_validate({"extraDependencies": ["vendor/*.js"]})
        assert config.dependency_globs[-1] == "vendor/*.js"
        assert "bower_components/**/*" in config.dependency_globs

    def test_tools_mapping(self) -> None:
        config = ProjectConfig.model_validate({"tools": {"minify-js": ["terser"]}})
        assert config.tools == {"minify-js": ["terser"]}

    def test_absolute_fragment_rejected(self) -> None:
        with pytest.raises(ValidationError, match="fragments"):
            ProjectConfig(fragments=("/srv/app/view.html",))

    def test_absolute_entrypoint_rejected(self) -> None:
        with pytest.raises(ValidationError, match="entrypoint"):
            ProjectConfig(entrypoint="/index.html")
