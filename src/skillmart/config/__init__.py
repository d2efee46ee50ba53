"""Configuration loading for Skillmart."""

from __future__ import annotations

from skillmart.config.loader import load_config
from skillmart.config.model import SkillmartConfig, default_skills_root

__all__ = ["SkillmartConfig", "default_skills_root", "load_config"]
