"""Build target models.

A ``TargetSpec`` is one requested build output. Declarative configs use the
camelCase keys (``insertPrefetchLinks``, ``basePath`` ...); Python code uses
the snake_case attribute names. Both spellings are accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_BUILD_NAME = "default"


class JsOptions(BaseModel):
    """JavaScript stage flags."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    compile: bool = Field(default=False, description="Compile to baseline (ES5) JavaScript")
    minify: bool = Field(default=False, description="Minify JavaScript")


class CssOptions(BaseModel):
    """CSS stage flags. Both apply to raw CSS and to CSS embedded in markup."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    prefix: bool = Field(default=False, description="Add vendor prefixes")
    minify: bool = Field(default=False, description="Minify CSS")


class HtmlOptions(BaseModel):
    """HTML stage flags."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    minify: bool = Field(default=False, description="Minify HTML")


class TargetSpec(BaseModel):
    """One build target.

    Constructed once per run by the configuration resolver and never
    mutated afterwards; preset expansion produces a new instance.

    Examples
    --------
    YAML declaration::

        builds:
          - name: es6-unbundled
            js: {minify: true}
            basePath: true
            addPushManifest: true
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str | None = Field(default=None, description="Output subdirectory name")
    preset: str | None = Field(default=None, description="Preset identifier to expand")
    js: JsOptions = Field(default_factory=JsOptions)
    css: CssOptions = Field(default_factory=CssOptions)
    html: HtmlOptions = Field(default_factory=HtmlOptions)
    bundle: bool | dict[str, Any] = Field(
        default=False, description="Bundle dependencies; a mapping overrides bundler defaults"
    )
    insert_prefetch_links: bool = False
    add_push_manifest: bool = False
    add_service_worker: bool = False
    sw_precache_config: str | None = Field(
        default=None, description="Service-worker config path, relative to the project root"
    )
    base_path: bool | str = Field(
        default=False, description="Base tag path; true means use the build name"
    )

    @property
    def build_name(self) -> str:
        """Name of the output subdirectory (``default`` when unnamed)."""
        return self.name or DEFAULT_BUILD_NAME

    @property
    def is_bundled(self) -> bool:
        return bool(self.bundle)

    @property
    def stage_flags(self) -> dict[str, Any]:
        """Flags that decide stage activation, keyed by their declarative names."""
        return {
            "js": self.js.model_dump(),
            "css": self.css.model_dump(),
            "html": self.html.model_dump(),
            "bundle": self.bundle,
            "insertPrefetchLinks": self.insert_prefetch_links,
            "addPushManifest": self.add_push_manifest,
            "addServiceWorker": self.add_service_worker,
            "basePath": self.base_path,
        }
