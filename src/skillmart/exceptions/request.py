"""Tool request exceptions."""

from __future__ import annotations

from skillmart.exceptions.base import SkillmartError


class ToolRequestError(SkillmartError, ValueError):
    """Raised when a tool call is malformed (unknown tool or invalid arguments)."""
