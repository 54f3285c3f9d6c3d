"""Resolve and read icon source files."""

from __future__ import annotations

import logging
from pathlib import Path

from svgicon.config import SvgIconConfig
from svgicon.errors import FileAccessError

logger = logging.getLogger(__name__)


def resolve_icon_path(config: SvgIconConfig, name: str) -> Path:
    """Return ``<resolved path>/<prefix><name>.svg``.

    The prefix and name are concatenated as plain text, so a prefix such as
    ``"brand/ic-"`` selects a subdirectory.
    """
    source_dir = Path(config.path).resolve()
    return Path(f"{source_dir}/{config.prefix}{name}.svg")


def read_icon(path: Path) -> str:
    """Read an icon file as UTF-8 text.

    Raises FileAccessError naming *path* when the file is missing, is not
    readable or is not valid UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileAccessError(
            f"Icon file not found: {path}", path=str(path), cause=exc
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(
            f"Cannot read icon file {path}: {exc}", path=str(path), cause=exc
        ) from exc
    logger.debug("Read icon %s (%d chars)", path, len(text))
    return text
