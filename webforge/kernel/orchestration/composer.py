"""Pipeline composition.

``compose_pipeline`` is a pure function of a target's stage flags: the same
flags always produce the same stages in the same order. The order is fixed
regardless of which subset is active:

 1. split             (always)
 2. compile           js.compile
 3. minify-js         js.minify
 4. prefix-css        css.prefix, raw CSS and split-out <style> blocks
 5. minify-css        css.minify, raw CSS and split-out <style> blocks
 6. minify-html       html.minify
 7. rejoin            (always)
 8. inject-compile-helpers   only when compile is active
 9. bundle            bundle
10. insert-prefetch-links    insertPrefetchLinks
11. update-base-tag   basePath
12. add-push-manifest addPushManifest
13. write             (always, terminal)
"""

from __future__ import annotations

from pathlib import Path

from webforge.kernel.domain.stage import Stage, StageKind
from webforge.kernel.domain.target_spec import TargetSpec

# JavaScript outside the web-components polyfills, which ship pre-built
JS_OUTSIDE_POLYFILLS = r"^((?!(webcomponentsjs/|webcomponentsjs\\)).)*\.js$"
STYLESHEET = r"\.css$"
MARKUP = r"\.html$"

DEFAULT_BUNDLER_OPTIONS: dict[str, object] = {"rewrite_urls_in_templates": True}


def resolve_base_path(base_path: bool | str, build_name: str) -> str | None:
    """Normalize a target's ``basePath`` setting.

    ``True`` means "use the build name". The result always begins and ends
    with ``/``. Falsy settings resolve to None (stage inactive).

    Examples
    --------
    >>> resolve_base_path(True, "es6-unbundled")
    '/es6-unbundled/'
    >>> resolve_base_path("assets", "default")
    '/assets/'
    >>> resolve_base_path(False, "default") is None
    True
    """
    if not base_path:
        return None
    path = build_name if base_path is True else str(base_path)
    if not path.startswith("/"):
        path = "/" + path
    if not path.endswith("/"):
        path = path + "/"
    return path


def compose_pipeline(target: TargetSpec, build_root: Path = Path("build")) -> tuple[Stage, ...]:
    """Return the ordered active stages for ``target``.

    Parameters
    ----------
    target : TargetSpec
        The (preset-expanded) build target
    build_root : Path
        Aggregate output directory; the write stage targets
        ``build_root / target.build_name``

    Returns
    -------
    tuple[Stage, ...]
        Stages bracketed by split/rejoin and terminated by write
    """
    stages: list[Stage] = [Stage(StageKind.SPLIT)]

    if target.js.compile:
        stages.append(Stage(StageKind.COMPILE_JS, pattern=JS_OUTSIDE_POLYFILLS))
    if target.js.minify:
        stages.append(Stage(StageKind.MINIFY_JS, pattern=JS_OUTSIDE_POLYFILLS))
    if target.css.prefix:
        stages.append(Stage(StageKind.PREFIX_CSS, pattern=STYLESHEET))
    if target.css.minify:
        stages.append(Stage(StageKind.MINIFY_CSS, pattern=STYLESHEET))
    if target.html.minify:
        stages.append(Stage(StageKind.MINIFY_HTML, pattern=MARKUP))

    stages.append(Stage(StageKind.REJOIN))

    if target.js.compile:
        stages.append(Stage(StageKind.INJECT_COMPILE_HELPERS))

    if target.bundle:
        bundler_options = dict(DEFAULT_BUNDLER_OPTIONS)
        if isinstance(target.bundle, dict):
            bundler_options.update(target.bundle)
        stages.append(Stage(StageKind.BUNDLE, options=bundler_options))

    if target.insert_prefetch_links:
        stages.append(Stage(StageKind.INSERT_PREFETCH_LINKS))

    base_path = resolve_base_path(target.base_path, target.build_name)
    if base_path is not None:
        stages.append(Stage(StageKind.UPDATE_BASE_TAG, options={"base_path": base_path}))

    if target.add_push_manifest:
        stages.append(Stage(StageKind.ADD_PUSH_MANIFEST))

    stages.append(
        Stage(StageKind.WRITE, options={"directory": build_root / target.build_name})
    )
    return tuple(stages)
