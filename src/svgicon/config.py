from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger(__name__)

# Option names accepted by from_options() in addition to the field names.
_OPTION_ALIASES: dict[str, str] = {
    "functionName": "function_name",
    "stripStyles": "strip_styles",
    "colorableTags": "colorable_tags",
    "maxWorkers": "max_workers",
}


@dataclass(frozen=True)
class SvgIconConfig:
    path: str = "./svgs"  # directory holding the icon files
    prefix: str = ""  # prepended to the icon name when building the file name
    function_name: str = "svgicon"
    strip_styles: bool = False
    colorable_tags: tuple[str, ...] = ("path", "polygon")
    max_workers: int | None = None  # None lets the thread pool pick

    def __post_init__(self) -> None:
        if not self.function_name:
            raise ValueError("function_name must be a non-empty string")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        # Accept any iterable of tag names but store a hashable tuple.
        object.__setattr__(self, "colorable_tags", tuple(self.colorable_tags))

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> SvgIconConfig:
        """Build a config from a loose options mapping.

        Both the field names and the camelCase option names
        (``functionName``, ``stripStyles``, ...) are understood. Unknown keys
        are ignored with a warning; missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown svgicon option %r", key)
                continue
            values[name] = value
        return cls(**values)
