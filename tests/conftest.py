"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def plugins_root(fixtures_root: Path) -> Path:
    """Return the fixture plugin tree."""
    return fixtures_root / "plugins"


@pytest.fixture()
def write_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a SKILL.md under ``tmp_path / "plugins"``."""

    def _write(relative_dir: str, content: str = "# Skill\n", **extra_files: str) -> Path:
        skill_dir = tmp_path / "plugins" / relative_dir
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        for name, text in extra_files.items():
            (skill_dir / name).write_text(text, encoding="utf-8")
        return skill_dir

    return _write
