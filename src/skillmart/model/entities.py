"""Catalog entries and install outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillmart.types import InstallStatus, JsonObject


@dataclass(frozen=True)
class SkillEntry:
    """One discovered skill: derived name, source directory, and description."""

    name: str
    source_path: Path
    description: str

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "source_path": str(self.source_path),
            "description": self.description,
        }


type Catalog = tuple[SkillEntry, ...]


@dataclass(frozen=True)
class InstallOutcome:
    """Result of an install request.

    ``destination`` is set for every status except ``not_found``. Error
    outcomes carry the underlying failure text in ``reason`` and the step
    that failed in ``stage`` (``"prepare"`` or ``"copy"``).
    """

    status: InstallStatus
    skill_name: str
    destination: Path | None = None
    reason: str | None = None
    stage: str | None = None

    @classmethod
    def not_found(cls, skill_name: str) -> InstallOutcome:
        return cls(status="not_found", skill_name=skill_name)

    @classmethod
    def already_installed(cls, skill_name: str, destination: Path) -> InstallOutcome:
        return cls(status="already_installed", skill_name=skill_name, destination=destination)

    @classmethod
    def installed(cls, skill_name: str, destination: Path) -> InstallOutcome:
        return cls(status="installed", skill_name=skill_name, destination=destination)

    @classmethod
    def failed(cls, skill_name: str, destination: Path, reason: str, *, stage: str) -> InstallOutcome:
        return cls(status="error", skill_name=skill_name, destination=destination, reason=reason, stage=stage)

    @property
    def ok(self) -> bool:
        """Whether the skill is present at the destination after this call."""
        return self.status in ("installed", "already_installed")
