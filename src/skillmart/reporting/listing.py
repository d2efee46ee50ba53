"""Text rendering for catalog listings and install results."""

from __future__ import annotations

from skillmart.constants.branding import CATALOG_TITLE, EMPTY_CATALOG_MESSAGE
from skillmart.constants.tools import (
    ALREADY_INSTALLED_TEMPLATE,
    INSTALL_COPY_ERROR_TEMPLATE,
    INSTALL_ROOT_ERROR_TEMPLATE,
    INSTALLED_TEMPLATE,
    NOT_FOUND_TEMPLATE,
)
from skillmart.model import Catalog, InstallOutcome


def render_catalog(catalog: Catalog) -> str:
    """Render a catalog as a markdown list, name and description on separate lines."""
    if not catalog:
        return EMPTY_CATALOG_MESSAGE

    lines = [f"{CATALOG_TITLE}\n"]
    for entry in catalog:
        lines.append(f"- **{entry.name}**:")
        lines.append(f"  {entry.description}")
    return "\n".join(lines)


def render_install_outcome(outcome: InstallOutcome) -> str:
    """Render the single-line message describing an install outcome."""
    name = outcome.skill_name
    if outcome.status == "not_found":
        return NOT_FOUND_TEMPLATE.format(name=name)
    if outcome.status == "already_installed":
        return ALREADY_INSTALLED_TEMPLATE.format(name=name, destination=outcome.destination)
    if outcome.status == "installed":
        return INSTALLED_TEMPLATE.format(name=name, destination=outcome.destination)
    if outcome.stage == "prepare":
        return INSTALL_ROOT_ERROR_TEMPLATE.format(reason=outcome.reason)
    return INSTALL_COPY_ERROR_TEMPLATE.format(reason=outcome.reason)
