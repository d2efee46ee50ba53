"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillmart.yaml"
DEFAULT_PLUGINS_DIRNAME: str = "plugins"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"skills_root", "install_root"})
