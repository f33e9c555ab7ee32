"""Post-build step runner: the service-worker artifact step."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from webforge.kernel.logging import get_logger

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig
    from webforge.kernel.domain.target_spec import TargetSpec
    from webforge.kernel.ports.service_worker import (
        ServiceWorkerConfigLoader,
        ServiceWorkerGenerator,
    )

__all__ = ["DEFAULT_SW_CONFIG", "PostBuildStepRunner"]

logger = get_logger(__name__)

DEFAULT_SW_CONFIG = "sw-precache-config.js"


class PostBuildStepRunner:
    """Runs the artifact steps that depend on a finished pipeline.

    Only invoked after a target's pipeline drained successfully. Errors
    (``ConfigLoadError``, generation failures) propagate to the caller, which
    isolates them to the one target.
    """

    def __init__(
        self,
        project: ProjectConfig,
        config_loader: ServiceWorkerConfigLoader,
        generator: ServiceWorkerGenerator,
    ) -> None:
        self._project = project
        self._config_loader = config_loader
        self._generator = generator

    def sw_config_path(self, target: TargetSpec) -> Path:
        """Worker config path; absolute overrides are used as given."""
        return self._project.root / (target.sw_precache_config or DEFAULT_SW_CONFIG)

    async def arun(self, target: TargetSpec, build_dir: Path) -> bool:
        """Run the post-build steps for ``target``.

        Returns
        -------
        bool
            True if a service worker was generated
        """
        if not target.add_service_worker:
            return False

        sw_config = await self._config_loader.aload(self.sw_config_path(target))

        logger.info("({}) Generating the Service Worker...", target.build_name)
        await self._generator.agenerate(
            project=self._project,
            build_root=build_dir,
            bundled=target.is_bundled,
            sw_config=sw_config or None,
        )
        return True
