"""Shared fixtures for webforge tests.

- project_dir: a small project tree on disk
- log_messages: loguru records captured as plain message strings
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from webforge.kernel.domain import ProjectConfig, TargetSpec

INDEX_HTML = """<!doctype html>
<html>
<head>
  <base href="/">
  <style>body { margin: 0; }</style>
</head>
<body>
  <script>window.app = true;</script>
  <script src="src/app.js"></script>
</body>
</html>
"""


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with an entrypoint, a fragment, sources and one dependency."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.js").write_text("console.log('app');\n")
    (tmp_path / "src" / "theme.css").write_text("h1 { color: red; }\n")
    (tmp_path / "src" / "view-one.html").write_text("<p>one</p>\n")
    (tmp_path / "index.html").write_text(INDEX_HTML)
    dependency = tmp_path / "node_modules" / "@webcomponents" / "webcomponentsjs"
    dependency.mkdir(parents=True)
    (dependency / "loader.js").write_text("/* polyfill */\n")
    return tmp_path


@pytest.fixture
def make_project(project_dir: Path):
    """Factory for a ProjectConfig rooted at ``project_dir``."""

    def factory(*targets: TargetSpec, **fields: object) -> ProjectConfig:
        fields.setdefault("fragments", ("src/view-one.html",))
        return ProjectConfig(root=project_dir, targets=targets, **fields)

    return factory


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture log messages emitted through loguru."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    logger.remove(handler_id)
