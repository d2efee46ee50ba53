"""Filesystem discovery of skill marker files."""

from .discovery import derive_skill_name, discover_skill_files

__all__ = ["derive_skill_name", "discover_skill_files"]
