"""Port interfaces for the post-build service-worker step.

Loading the worker configuration and generating the worker are separate
collaborators, so a bad configuration file is reported as a
``ConfigLoadError`` before generation is attempted.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig


@runtime_checkable
class ServiceWorkerConfigLoader(Protocol):
    """Port for loading a service-worker configuration file by path."""

    async def aload(self, path: Path) -> dict[str, Any] | None:
        """Load the configuration at ``path``.

        Returns
        -------
        dict[str, Any] | None
            The configuration mapping, or None for an empty file

        Raises
        ------
        ConfigLoadError
            If the file is absent or malformed
        """
        ...


@runtime_checkable
class ServiceWorkerGenerator(Protocol):
    """Port for generating the service-worker artifact of a build."""

    async def agenerate(
        self,
        *,
        project: "ProjectConfig",
        build_root: Path,
        bundled: bool,
        sw_config: dict[str, Any] | None,
    ) -> Path:
        """Generate the worker into ``build_root`` and return its path.

        ``sw_config`` is None when no override configuration applies.
        """
        ...
