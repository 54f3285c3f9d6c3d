"""svgicon: inline recoloured SVG icons into stylesheets."""
from __future__ import annotations

__version__ = "0.3.0"

from svgicon.cache import CacheEntry, IconCache
from svgicon.config import SvgIconConfig
from svgicon.errors import (
    CssSyntaxError,
    FileAccessError,
    MalformedMarkerError,
    MarkupParseError,
    SvgIconError,
)
from svgicon.transform import SvgIconTransform, process_file, process_stylesheet

__all__ = [
    "__version__",
    "CacheEntry",
    "IconCache",
    "SvgIconConfig",
    "SvgIconTransform",
    "process_file",
    "process_stylesheet",
    "SvgIconError",
    "FileAccessError",
    "MarkupParseError",
    "MalformedMarkerError",
    "CssSyntaxError",
]
