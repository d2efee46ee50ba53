"""Configuration-related exceptions."""

from __future__ import annotations

from skillmart.exceptions.base import SkillmartError


class ConfigError(SkillmartError, ValueError):
    """Raised when configuration is invalid."""
