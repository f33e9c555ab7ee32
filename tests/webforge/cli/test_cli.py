"""Tests for the webforge command-line interface."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from webforge import __version__
from webforge.cli.main import app
from webforge.kernel.logging import configure_logging

PROJECT_YAML = """\
entrypoint: index.html
fragments:
  - src/view-one.html
builds:
  - name: modern
    js:
      minify: true
  - preset: es5-bundled
    addServiceWorker: false
"""


@pytest.fixture
def runner() -> CliRunner:
    """Fixture providing a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    # Commands point loguru at the runner's captured stderr
    configure_logging(force_reconfigure=True)


@pytest.fixture
def config_file(project_dir: Path) -> Path:
    path = project_dir / "webforge.yaml"
    path.write_text(PROJECT_YAML)
    return path


class TestMain:
    """Tests for global options."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [])
        assert "build" in result.output
        assert "presets" in result.output

    def test_unknown_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--log-level", "loud", "presets"])
        assert result.exit_code != 0


class TestPresetsCommand:
    """Tests for `webforge presets`."""

    def test_lists_every_preset(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        for name in ("es5-bundled", "es6-bundled", "es6-unbundled"):
            assert name in result.output


class TestConfigCommand:
    """Tests for `webforge config`."""

    def test_prints_resolved_yaml(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(app, ["config", "--config", str(config_file)])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert [build["name"] for build in data["builds"]] == ["modern", "es5-bundled"]
        assert data["builds"][1]["js"] == {"compile": True, "minify": True}
        assert data["fragments"] == ["src/view-one.html"]

    def test_presets_filter(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(
            app, ["config", "--config", str(config_file), "--presets", "es6-unbundled"]
        )
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert [build["name"] for build in data["builds"]] == ["es6-unbundled"]

    def test_presets_filter_takes_several_names(
        self, runner: CliRunner, config_file: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["config", "--config", str(config_file), "--presets", "es6-unbundled", "es5-bundled"],
        )
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert [build["name"] for build in data["builds"]] == ["es6-unbundled", "es5-bundled"]

    def test_missing_config(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["config", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "config file not found" in result.output


class TestBuildCommand:
    """Tests for `webforge build`."""

    def test_builds_declared_targets(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app, ["build", "--config", str(config_file), "--toolkit", "mock"]
        )

        assert result.exit_code == 0, result.output
        build = project_dir / "build"
        assert {p.name for p in build.iterdir()} == {"modern", "es5-bundled"}
        assert (build / "modern" / "src" / "app.js").is_file()

    def test_presets_option(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "build",
                "--config",
                str(config_file),
                "--toolkit",
                "mock",
                "--presets",
                "es5-bundled",
                "--presets",
                "unknown-preset",
            ],
        )

        assert result.exit_code == 0, result.output
        assert {p.name for p in (project_dir / "build").iterdir()} == {"es5-bundled"}

    def test_presets_option_takes_several_names(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "build",
                "--config",
                str(config_file),
                "--toolkit",
                "mock",
                "--presets",
                "es5-bundled",
                "unknown-preset",
            ],
        )

        assert result.exit_code == 0, result.output
        assert {p.name for p in (project_dir / "build").iterdir()} == {"es5-bundled"}

    def test_stray_argument_without_presets_is_rejected(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(app, ["build", "--config", str(config_file), "es5-bundled"])

        assert result.exit_code == 2
        assert not (project_dir / "build").exists()

    def test_stage_flags_build_a_single_custom_target(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "build",
                "--config",
                str(config_file),
                "--toolkit",
                "mock",
                "--js-minify",
                "--fragment",
                "index.html",
            ],
        )

        assert result.exit_code == 0, result.output
        assert {p.name for p in (project_dir / "build").iterdir()} == {"default"}

    def test_custom_build_dir(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["build", "--config", str(config_file), "--toolkit", "mock", "--build-dir", "dist"],
        )

        assert result.exit_code == 0, result.output
        assert (project_dir / "dist" / "modern" / "index.html").is_file()

    def test_target_failure_still_exits_zero(
        self, runner: CliRunner, project_dir: Path
    ) -> None:
        config = project_dir / "webforge.yaml"
        config.write_text(
            "builds:\n"
            "  - name: ok\n"
            "  - name: broken\n"
            "    addServiceWorker: true\n"
            "    swPrecacheConfig: missing.js\n"
        )

        result = runner.invoke(app, ["build", "--config", str(config), "--toolkit", "mock"])

        assert result.exit_code == 0, result.output
        assert "broken" in result.output
        assert (project_dir / "build" / "ok" / "index.html").is_file()

    def test_no_targets_exits_non_zero(
        self, runner: CliRunner, config_file: Path, project_dir: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["build", "--config", str(config_file), "--toolkit", "mock", "--presets", "nope"],
        )

        assert result.exit_code == 1
        assert "no build targets resolved" in result.output
        assert not (project_dir / "build").exists()

    def test_missing_config_exits_non_zero(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["build", "--config", str(tmp_path / "absent.yaml")])
        assert result.exit_code == 1
        assert "Error" in result.output
