"""Rule emitter: append cached icons to the stylesheet as new rules."""

from __future__ import annotations

import logging

from svgicon.cache import CacheEntry, IconCache
from svgicon.css.model import AtRule, Container, Declaration, Rule

logger = logging.getLogger(__name__)

ICON_PROPERTY = "background-image"


def build_rule(entry: CacheEntry) -> Rule:
    rule = Rule(selector=entry.selector)
    rule.append(Declaration(prop=ICON_PROPERTY, value=entry.code))
    return rule


def emit_rules(root: Container, cache: IconCache) -> int:
    """Append one rule per cache entry to *root* and return how many.

    Entries without media come first, then one ``@media`` block per media
    entry. Each group keeps the cache's insertion order.
    """
    entries = list(cache.entries())
    emitted = 0
    for entry in entries:
        if entry.media is not None:
            continue
        root.append(build_rule(entry))
        logger.debug("Emitted rule %r", entry.selector)
        emitted += 1
    for entry in entries:
        if entry.media is None:
            continue
        at_rule = AtRule(name="media", params=entry.media)
        at_rule.append(build_rule(entry))
        root.append(at_rule)
        logger.debug("Emitted rule %r under @media %s", entry.selector, entry.media)
        emitted += 1
    return emitted
