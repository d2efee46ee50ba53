"""Skill catalog construction and lookup."""

from .builder import build_catalog, find_duplicate_names, find_skill

__all__ = ["build_catalog", "find_duplicate_names", "find_skill"]
