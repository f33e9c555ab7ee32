"""Precache service-worker generator.

Renders ``service-worker.js`` into a target's build directory. The worker
precaches the build's files, each keyed by an MD5 revision so a changed file
busts its cache entry, and serves ``navigateFallback`` for navigations.

Config keys honored (sw-precache names): ``staticFileGlobs``,
``navigateFallback``, ``cacheId``.
"""

from __future__ import annotations

import asyncio
import fnmatch
import hashlib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
from jinja2 import Environment

from webforge.kernel.logging import get_logger

if TYPE_CHECKING:
    from webforge.kernel.domain.project_config import ProjectConfig

logger = get_logger(__name__)

SERVICE_WORKER_FILENAME = "service-worker.js"

_TEMPLATE = """\
/* Generated by webforge. Do not edit. */
'use strict';

var precacheConfig = {{ precache | tojson }};
var cacheName = {{ cache_name | tojson }};
var navigateFallback = {{ navigate_fallback | tojson }};

var urlsToCache = precacheConfig.map(function(entry) {
  return entry[0] + '?__wf_revision=' + entry[1];
});

self.addEventListener('install', function(event) {
  event.waitUntil(
    caches.open(cacheName)
      .then(function(cache) { return cache.addAll(urlsToCache); })
      .then(function() { return self.skipWaiting(); })
  );
});

self.addEventListener('activate', function(event) {
  event.waitUntil(
    caches.keys().then(function(names) {
      return Promise.all(names.filter(function(name) {
        return name !== cacheName;
      }).map(function(name) { return caches.delete(name); }));
    }).then(function() { return self.clients.claim(); })
  );
});

self.addEventListener('fetch', function(event) {
  if (event.request.method !== 'GET') {
    return;
  }
  var url = new URL(event.request.url);
  var path = url.pathname;
  if (navigateFallback && event.request.mode === 'navigate') {
    path = navigateFallback;
  }
  var entry = precacheConfig.find(function(e) { return e[0] === path; });
  if (!entry) {
    return;
  }
  event.respondWith(
    caches.open(cacheName).then(function(cache) {
      return cache.match(entry[0] + '?__wf_revision=' + entry[1]).then(function(response) {
        return response || fetch(event.request);
      });
    })
  );
});
"""

_environment = Environment(autoescape=False, keep_trailing_newline=True)


class PrecacheServiceWorkerGenerator:
    """Writes a precaching ``service-worker.js`` for one build directory.

    Without ``staticFileGlobs``, an unbundled build precaches every file; a
    bundled build precaches its entry documents plus every non-HTML file,
    since the other HTML has been inlined into those documents.
    """

    async def agenerate(
        self,
        *,
        project: ProjectConfig,
        build_root: Path,
        bundled: bool,
        sw_config: dict[str, Any] | None,
    ) -> Path:
        config = sw_config or {}
        files = await asyncio.to_thread(self._list_files, build_root)
        files = self._select(files, project, bundled, config.get("staticFileGlobs"))

        precache = [[f"/{path}", await self._arevision(build_root / path)] for path in files]
        fallback = config.get("navigateFallback")
        rendered = _environment.from_string(_TEMPLATE).render(
            precache=precache,
            cache_name=f"webforge-{config.get('cacheId') or project.root.name}",
            navigate_fallback=f"/{fallback.lstrip('/')}" if fallback else None,
        )

        worker_path = build_root / SERVICE_WORKER_FILENAME
        async with aiofiles.open(worker_path, "w", encoding="utf-8") as f:
            await f.write(rendered)
        logger.debug("Wrote {} with {} precached files", worker_path, len(precache))
        return worker_path

    def _list_files(self, build_root: Path) -> list[str]:
        if not build_root.is_dir():
            return []
        return sorted(
            path.relative_to(build_root).as_posix()
            for path in build_root.rglob("*")
            if path.is_file() and path.name != SERVICE_WORKER_FILENAME
        )

    def _select(
        self,
        files: list[str],
        project: ProjectConfig,
        bundled: bool,
        static_globs: list[str] | None,
    ) -> list[str]:
        if static_globs:
            patterns = [pattern.lstrip("/") for pattern in static_globs]
            return [
                path for path in files if any(fnmatch.fnmatch(path, p) for p in patterns)
            ]
        if bundled:
            entry_documents = set(project.entry_documents)
            return [
                path for path in files if path in entry_documents or not path.endswith(".html")
            ]
        return files

    async def _arevision(self, path: Path) -> str:
        async with aiofiles.open(path, "rb") as f:
            return hashlib.md5(await f.read()).hexdigest()
