"""Build the sorted skill catalog for a source tree."""

from __future__ import annotations

import logging
from pathlib import Path

from skillmart.model import Catalog, SkillEntry
from skillmart.parsers import read_skill_description
from skillmart.scanner.discovery import derive_skill_name, discover_skill_files
from skillmart.utils import locale_sort_key

logger = logging.getLogger(__name__)


def build_catalog(root: Path) -> Catalog:
    """Scan *root* and return every discovered skill sorted by name.

    The catalog is rebuilt from the filesystem on every call. Markers whose
    path yields an empty name, such as one sitting directly in *root*, are
    skipped.
    """
    root = root.resolve()
    entries: list[SkillEntry] = []

    for skill_file in discover_skill_files(root):
        skill_root = skill_file.parent
        name = derive_skill_name(skill_root, root)
        if not name:
            logger.warning("Skipping %s: its path derives an empty skill name", skill_file)
            continue
        entries.append(
            SkillEntry(
                name=name,
                source_path=skill_root,
                description=read_skill_description(skill_file),
            )
        )

    catalog = tuple(sorted(entries, key=lambda entry: locale_sort_key(entry.name)))

    for name, duplicates in find_duplicate_names(catalog).items():
        logger.warning(
            "Skill name %r is derived from %d directories; %s takes precedence",
            name,
            len(duplicates),
            duplicates[0].source_path,
        )

    return catalog


def find_skill(catalog: Catalog, name: str) -> SkillEntry | None:
    """Return the first catalog entry named exactly *name*."""
    for entry in catalog:
        if entry.name == name:
            return entry
    return None


def find_duplicate_names(catalog: Catalog) -> dict[str, tuple[SkillEntry, ...]]:
    """Group entries sharing a derived name, keeping catalog order within each group."""
    by_name: dict[str, list[SkillEntry]] = {}
    for entry in catalog:
        by_name.setdefault(entry.name, []).append(entry)
    return {name: tuple(entries) for name, entries in by_name.items() if len(entries) > 1}
