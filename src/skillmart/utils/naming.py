"""String helpers for skill-name derivation and ordering."""

from __future__ import annotations

import locale
from collections.abc import Iterable

from skillmart.constants.discovery import ORGANIZATIONAL_SEGMENT, SKILL_NAME_SEPARATOR


def collapse_adjacent_duplicates(segments: Iterable[str]) -> list[str]:
    """Drop each segment equal to the previously kept one."""
    kept: list[str] = []
    for segment in segments:
        if kept and kept[-1] == segment:
            continue
        kept.append(segment)
    return kept


def join_name_segments(segments: Iterable[str]) -> str:
    """Build a skill name from relative path segments.

    Organizational ``skills`` segments are removed first, then adjacent
    repeats are collapsed, so ``demo/skills/demo`` becomes ``demo``.
    """
    filtered = (segment for segment in segments if segment != ORGANIZATIONAL_SEGMENT)
    return SKILL_NAME_SEPARATOR.join(collapse_adjacent_duplicates(filtered))


def locale_sort_key(value: str) -> str:
    """Return a key ordering strings by the active locale's collation.

    Under the default C locale this is plain code-point order.
    """
    return locale.strxfrm(value)
