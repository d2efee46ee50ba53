"""Shared utility helpers."""

from __future__ import annotations

from .naming import collapse_adjacent_duplicates, join_name_segments, locale_sort_key

__all__ = ["collapse_adjacent_duplicates", "join_name_segments", "locale_sort_key"]
