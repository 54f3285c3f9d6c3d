"""Icon cache: one entry per distinct (name, color, media) request."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

IconKey = tuple[str, Optional[str], Optional[str]]


def split_selectors(selector: str) -> list[str]:
    """Split a selector list at top-level commas.

    Commas nested in parentheses or brackets (``:is(.a, .b)``,
    ``[data-x="a,b"]``) do not split.
    """
    parts: list[str] = []
    depth = 0
    quote = ""
    start = 0
    for i, ch in enumerate(selector):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            parts.append(selector[start:i])
            start = i + 1
    parts.append(selector[start:])
    return [p.strip() for p in parts if p.strip()]


@dataclass
class CacheEntry:
    """A rendered icon and every selector that asked for it."""

    code: str
    media: str | None = None
    instances: list[str] = field(default_factory=list)

    @property
    def selector(self) -> str:
        return ", ".join(self.instances)


class IconCache:
    """Deduplicates icon requests for a single transform pass.

    Entries keep insertion order. The first ``add`` for a key stores the
    rendered code; later calls for the same key only append selectors.
    """

    def __init__(self) -> None:
        self._entries: dict[IconKey, CacheEntry] = {}

    @staticmethod
    def key(name: str, color: str | None, media: str | None) -> IconKey:
        return (name, color, media)

    def has(self, name: str, color: str | None, media: str | None) -> bool:
        return self.key(name, color, media) in self._entries

    def get(self, name: str, color: str | None, media: str | None) -> CacheEntry | None:
        return self._entries.get(self.key(name, color, media))

    def add(
        self,
        name: str,
        color: str | None,
        code: str,
        selector: str,
        media: str | None,
    ) -> CacheEntry:
        """Record *selector* against the icon, creating the entry if needed."""
        key = self.key(name, color, media)
        entry = self._entries.get(key)
        if entry is None:
            if not code:
                raise ValueError(f"Cannot cache icon {name!r} without rendered code")
            entry = CacheEntry(code=code, media=media)
            self._entries[key] = entry
        entry.instances.extend(split_selectors(selector))
        return entry

    def entries(self) -> Iterator[CacheEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"IconCache(entries={len(self._entries)})"
