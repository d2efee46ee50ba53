"""Shared exception hierarchy for Skillmart."""

from __future__ import annotations

from .base import SkillmartError
from .config import ConfigError
from .parsing import SkillParseError
from .request import ToolRequestError

__all__ = ["ConfigError", "SkillParseError", "SkillmartError", "ToolRequestError"]
