"""Parsing-related exceptions."""

from __future__ import annotations

from skillmart.exceptions.base import SkillmartError


class SkillParseError(SkillmartError, ValueError):
    """Raised when a SKILL.md metadata header cannot be parsed."""
