"""Config data model for Skillmart."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from skillmart.constants.config import DEFAULT_PLUGINS_DIRNAME
from skillmart.installer import default_install_root


def default_skills_root() -> Path:
    """Return the ``plugins`` directory at the root of a source checkout.

    The path is two levels above the ``skillmart`` package directory, which
    is the repository root for source and editable installs only. From an
    installed wheel it points inside the environment's ``lib`` directory,
    so such installs should set ``skills_root`` in ``skillmart.yaml`` or pass
    ``--root``.
    """
    return Path(__file__).resolve().parents[3] / DEFAULT_PLUGINS_DIRNAME


@dataclass(frozen=True)
class SkillmartConfig:
    """Resolved discovery and install locations."""

    skills_root: Path = field(default_factory=default_skills_root)
    install_root: Path = field(default_factory=default_install_root)
