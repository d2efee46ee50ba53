"""Config loading and normalization."""

from __future__ import annotations

import difflib
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from skillmart.config.model import SkillmartConfig
from skillmart.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME
from skillmart.exceptions import ConfigError


def load_config(config_path: Path | None = None, *, base_dir: Path | None = None) -> SkillmartConfig:
    """Load config from ``skillmart.yaml`` in *base_dir* or an explicit path.

    Relative paths in the file resolve against the file's own directory.
    """
    base_dir = (base_dir or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (base_dir / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillmartConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(set(raw) - CONFIG_ALLOWED_KEYS, key=str):
        hint = _suggest_key(str(key), CONFIG_ALLOWED_KEYS)
        raise ConfigError(f"Unknown config key {key!r} in {path}" + (f" ({hint})" if hint else ""))

    config = SkillmartConfig()
    if "skills_root" in raw:
        config = replace(config, skills_root=_resolve_path(raw["skills_root"], "skills_root", path.parent))
    if "install_root" in raw:
        config = replace(config, install_root=_resolve_path(raw["install_root"], "install_root", path.parent))
    return config


def _resolve_path(value: Any, key_name: str, relative_to: Path) -> Path:
    """Coerce a config value to an absolute path, raising ConfigError on type mismatch."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    candidate = Path(value.strip()).expanduser()
    if not candidate.is_absolute():
        candidate = relative_to / candidate
    return candidate.resolve()


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
