"""One-shot skill installation."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from skillmart.catalog import build_catalog, find_skill
from skillmart.constants.install import INSTALL_ROOT_PARTS
from skillmart.model import InstallOutcome

logger = logging.getLogger(__name__)


def default_install_root() -> Path:
    """Return the per-user installed-skills root, ``~/.gemini/skills``."""
    return Path.home().joinpath(*INSTALL_ROOT_PARTS)


def install_skill(root: Path, requested_name: str, *, install_root: Path) -> InstallOutcome:
    """Install the skill named *requested_name* from the catalog under *root*.

    An existing destination is never touched: the call reports
    ``already_installed`` instead. Filesystem failures are reported as
    ``error`` outcomes and a failed copy is not rolled back.
    """
    entry = find_skill(build_catalog(root), requested_name)
    if entry is None:
        return InstallOutcome.not_found(requested_name)

    destination = install_root / requested_name
    if destination.exists() or destination.is_symlink():
        return InstallOutcome.already_installed(requested_name, destination)

    try:
        install_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Cannot create skills directory %s: %s", install_root, exc)
        return InstallOutcome.failed(requested_name, destination, str(exc), stage="prepare")

    # Claim the destination before copying so a concurrent install of the
    # same name sees it as already installed.
    try:
        destination.mkdir()
    except FileExistsError:
        return InstallOutcome.already_installed(requested_name, destination)
    except OSError as exc:
        return InstallOutcome.failed(requested_name, destination, str(exc), stage="copy")

    try:
        shutil.copytree(entry.source_path, destination, symlinks=True, dirs_exist_ok=True)
    except OSError as exc:
        logger.warning("Copy of %s to %s failed: %s", entry.source_path, destination, exc)
        return InstallOutcome.failed(requested_name, destination, str(exc), stage="copy")

    logger.info("Installed %s from %s to %s", requested_name, entry.source_path, destination)
    return InstallOutcome.installed(requested_name, destination)
