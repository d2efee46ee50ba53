"""Constants for the installed-skills location."""

from __future__ import annotations

INSTALL_ROOT_PARTS: tuple[str, ...] = (".gemini", "skills")
