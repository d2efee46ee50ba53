"""File discovery and skill naming helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from skillmart.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillmart.utils import join_name_segments

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path) -> list[Path]:
    """Discover SKILL.md files anywhere below *root*.

    A missing or unreadable root yields an empty list rather than an error.
    """
    if not root.is_dir():
        return []

    discovered: set[Path] = set()
    try:
        for path in root.rglob(SKILL_MARKDOWN_FILENAME):
            # rglob is case-insensitive on some platforms.
            if path.name != SKILL_MARKDOWN_FILENAME or not path.is_file():
                continue
            discovered.add(path)
    except OSError as exc:
        logger.warning("Cannot scan %s: %s", root, exc)
        return []

    return sorted(discovered, key=lambda path: _stable_path_key(path, root))


def derive_skill_name(skill_root: Path, root: Path) -> str:
    """Derive the catalog name for a skill directory.

    The relative path from *root* is split into segments, ``skills``
    segments are dropped and adjacent repeats collapsed before joining with
    ``-``. A skill root equal to *root* yields an empty name.
    """
    try:
        relative = skill_root.relative_to(root)
    except ValueError:
        return ""
    return join_name_segments(relative.parts)


def _stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
