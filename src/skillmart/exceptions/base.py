"""Base exception type."""

from __future__ import annotations


class SkillmartError(Exception):
    """Base class for all Skillmart errors."""
