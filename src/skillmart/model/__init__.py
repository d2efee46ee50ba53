"""Core data models for Skillmart."""

from .entities import Catalog, InstallOutcome, SkillEntry

__all__ = ["Catalog", "InstallOutcome", "SkillEntry"]
