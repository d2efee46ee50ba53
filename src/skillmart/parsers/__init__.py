"""Parsers for skill marker files."""

from .skill_markdown import extract_description, parse_frontmatter_lines, read_skill_description

__all__ = ["extract_description", "parse_frontmatter_lines", "read_skill_description"]
