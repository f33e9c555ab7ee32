"""Process-wide resolved project configuration.

The resolved ``ProjectConfig`` is built once at startup and passed by
reference into every component's entry point; nothing looks it up
implicitly.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from webforge.kernel.config.models import LoggingConfig
from webforge.kernel.domain.target_spec import TargetSpec
from webforge.kernel.exceptions import ConfigurationError, ValidationError

DEFAULT_DEPENDENCY_GLOBS: tuple[str, ...] = (
    "bower_components/**/*",
    "node_modules/@webcomponents/**/*",
)


class ProjectConfig(BaseModel):
    """Resolved project configuration.

    Attributes
    ----------
    root : Path
        Project root; every other path is relative to it
    entrypoint : str
        Entry document served for every route
    shell : str | None
        Application shell document
    fragments : tuple[str, ...]
        Lazily loaded entry documents, in declaration order
    sources : tuple[str, ...] | None
        Source globs; defaults to ``src/**/*`` plus the entry documents
    extra_dependencies : tuple[str, ...]
        Additional dependency globs copied into every build
    targets : tuple[TargetSpec, ...]
        Build targets (``builds`` in declarative files)
    tools : dict[str, list[str]]
        External command per stage kind, used by the command toolkit
    logging : LoggingConfig
        Logging settings
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    root: Path = Path(".")
    entrypoint: str = "index.html"
    shell: str | None = None
    fragments: tuple[str, ...] = ()
    sources: tuple[str, ...] | None = None
    extra_dependencies: tuple[str, ...] = ()
    targets: tuple[TargetSpec, ...] = Field(default=(), alias="builds")
    tools: dict[str, list[str]] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_unique_build_names(self) -> "ProjectConfig":
        seen: set[str] = set()
        for target in self.targets:
            if target.build_name in seen:
                raise ConfigurationError(
                    "builds", f"duplicate build name '{target.build_name}'"
                )
            seen.add(target.build_name)
        return self

    @model_validator(mode="after")
    def _check_relative_documents(self) -> "ProjectConfig":
        for field, documents in (
            ("entrypoint", [self.entrypoint]),
            ("shell", [self.shell] if self.shell else []),
            ("fragments", self.fragments),
        ):
            for document in documents:
                if Path(document).is_absolute():
                    raise ValidationError(field, "must be relative to the project root", document)
        return self

    @property
    def entry_documents(self) -> tuple[str, ...]:
        """Entrypoint, shell and fragments, without duplicates."""
        docs = [self.entrypoint, *([self.shell] if self.shell else []), *self.fragments]
        return tuple(dict.fromkeys(docs))

    @property
    def source_globs(self) -> tuple[str, ...]:
        if self.sources is not None:
            return tuple(dict.fromkeys([*self.sources, *self.entry_documents]))
        return ("src/**/*", *self.entry_documents)

    @property
    def dependency_globs(self) -> tuple[str, ...]:
        return (*DEFAULT_DEPENDENCY_GLOBS, *self.extra_dependencies)
