"""Branding constants for terminal output and tool listings."""

from __future__ import annotations

SERVER_NAME: str = "skills-marketplace"
CATALOG_TITLE: str = "# Available Skills"
EMPTY_CATALOG_MESSAGE: str = "No skills found in the plugins directory."
CLI_DESCRIPTION: str = "Discover and install SKILL.md bundles"
