"""Constants for filesystem discovery and skill-name derivation."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
ORGANIZATIONAL_SEGMENT: str = "skills"
SKILL_NAME_SEPARATOR: str = "-"
DEFAULT_DESCRIPTION: str = "No description available."
