"""The svgicon transform pass: scan, render, dedupe, emit."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path

from svgicon.cache import IconCache, IconKey
from svgicon.config import SvgIconConfig
from svgicon.css import Root, parse_stylesheet, serialize_stylesheet
from svgicon.emitter import emit_rules
from svgicon.loader import read_icon, resolve_icon_path
from svgicon.recolor import recolor_icon
from svgicon.scanner import IconRequest, remove_declaration, scan_declarations

logger = logging.getLogger(__name__)


class SvgIconTransform:
    """Replace marker declarations with inline, recoloured icon rules.

    Each :meth:`apply` call is one independent pass with its own cache, so a
    single transform can be shared between threads.

    A pass runs in four steps:
        1. Scan the tree for marker declarations (read-only).
        2. Render every distinct (name, color, media) icon once, on a
           thread pool, and wait for all of them.
        3. Fill the cache and remove the marker declarations in tree order.
        4. Append the new rules, unconditional ones before ``@media`` ones.

    Any error in steps 1 or 2 propagates before the tree is touched.
    """

    def __init__(self, config: SvgIconConfig | None = None) -> None:
        self.config = config or SvgIconConfig()

    def render(self, request: IconRequest) -> str:
        """Read, recolour and encode the icon for *request*."""
        path = resolve_icon_path(self.config, request.name)
        text = read_icon(path)
        return recolor_icon(
            text,
            request.color,
            source=str(path),
            colorable_tags=self.config.colorable_tags,
            strip_styles=self.config.strip_styles,
        )

    def apply(self, root: Root) -> Root:
        requests = list(scan_declarations(root, self.config.function_name))
        if not requests:
            logger.info("No %s() declarations found", self.config.function_name)
            return root

        cache = IconCache()
        codes = self._render_all(requests)

        for request in requests:
            if cache.has(request.name, request.color, request.media):
                logger.debug("Duplicate icon request %r for %r", request.key, request.selector)
            cache.add(
                request.name,
                request.color,
                codes[request.key],
                request.selector,
                request.media,
            )
            remove_declaration(request.declaration)

        emitted = emit_rules(root, cache)
        logger.info(
            "Inlined %d icon request(s) as %d distinct icon(s), %d rule(s) emitted",
            len(requests),
            len(cache),
            emitted,
        )
        return root

    def _render_all(self, requests: list[IconRequest]) -> dict[IconKey, str]:
        """Render each distinct identity once and wait for every task."""
        futures: dict[IconKey, Future[str]] = {}
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            for request in requests:
                if request.key in futures:
                    continue
                futures[request.key] = pool.submit(self.render, request)
            wait(futures.values())
        # result() re-raises the first failure in discovery order.
        return {key: future.result() for key, future in futures.items()}


def process_stylesheet(source: str, config: SvgIconConfig | None = None) -> str:
    """Parse CSS *source*, run the transform, and return the new CSS text."""
    root = parse_stylesheet(source)
    SvgIconTransform(config).apply(root)
    return serialize_stylesheet(root)


def process_file(path: str | Path, config: SvgIconConfig | None = None) -> str:
    """Like :func:`process_stylesheet` for a stylesheet on disk."""
    source = Path(path).read_text(encoding="utf-8")
    return process_stylesheet(source, config)
