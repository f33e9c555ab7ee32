"""Stage descriptors.

A composed pipeline is a tuple of ``Stage`` values: a tagged variant keyed by
``StageKind``, carrying the asset-path predicate and any options. The
descriptors hold no behavior; the target executor interprets them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class StageKind(StrEnum):
    """Kinds of pipeline stage, in their fixed pipeline order."""

    SPLIT = "split"
    COMPILE_JS = "compile"
    MINIFY_JS = "minify-js"
    PREFIX_CSS = "prefix-css"
    MINIFY_CSS = "minify-css"
    MINIFY_HTML = "minify-html"
    REJOIN = "rejoin"
    INJECT_COMPILE_HELPERS = "inject-compile-helpers"
    BUNDLE = "bundle"
    INSERT_PREFETCH_LINKS = "insert-prefetch-links"
    UPDATE_BASE_TAG = "update-base-tag"
    ADD_PUSH_MANIFEST = "add-push-manifest"
    WRITE = "write"


STRUCTURAL_STAGES = frozenset({StageKind.SPLIT, StageKind.REJOIN, StageKind.WRITE})

# Per-file edits, applied only to assets whose path matches the stage pattern
CONTENT_STAGES = frozenset({
    StageKind.COMPILE_JS,
    StageKind.MINIFY_JS,
    StageKind.PREFIX_CSS,
    StageKind.MINIFY_CSS,
    StageKind.MINIFY_HTML,
})

# Whole-stream edits on the rejoined documents
DOCUMENT_STAGES = frozenset({
    StageKind.INJECT_COMPILE_HELPERS,
    StageKind.BUNDLE,
    StageKind.INSERT_PREFETCH_LINKS,
    StageKind.UPDATE_BASE_TAG,
    StageKind.ADD_PUSH_MANIFEST,
})


@dataclass(frozen=True, slots=True)
class Stage:
    """One active step of a target pipeline.

    Attributes
    ----------
    kind : StageKind
        What the stage does
    pattern : str | None
        Regex searched against the asset path; None matches every asset
    options : dict[str, Any]
        Stage-specific options (bundler overrides, base path, output directory)
    """

    kind: StageKind
    pattern: str | None = None
    # Not part of the hash; equality still compares options
    options: dict[str, Any] = field(default_factory=dict, hash=False)

    def matches(self, path: str) -> bool:
        return self.pattern is None or re.search(self.pattern, path) is not None

    @property
    def is_content(self) -> bool:
        return self.kind in CONTENT_STAGES

    @property
    def is_document(self) -> bool:
        return self.kind in DOCUMENT_STAGES
