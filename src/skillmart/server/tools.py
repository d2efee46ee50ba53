"""Tool definitions and request dispatch.

A transport (stdio, HTTP, ...) registers ``TOOL_DEFINITIONS`` and forwards
each call to :func:`call_tool`, which returns the text block to send back.
Malformed requests raise :class:`ToolRequestError`; every data condition,
including a failed install, is reported as text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import jsonschema

from skillmart import __version__
from skillmart.catalog import build_catalog
from skillmart.config import SkillmartConfig
from skillmart.constants.branding import SERVER_NAME
from skillmart.constants.tools import (
    INSTALL_SKILL_INPUT_SCHEMA,
    INSTALL_SKILL_TOOL,
    LIST_SKILLS_INPUT_SCHEMA,
    LIST_SKILLS_TOOL,
    SKILL_NAME_ARGUMENT,
)
from skillmart.exceptions import ToolRequestError
from skillmart.installer import install_skill
from skillmart.reporting import render_catalog, render_install_outcome
from skillmart.types import JsonObject

SERVER_VERSION: str = __version__


def server_info() -> JsonObject:
    """Return the name and version a transport reports during its handshake."""
    return {"name": SERVER_NAME, "version": SERVER_VERSION}


@dataclass(frozen=True)
class ToolDefinition:
    """A tool advertised to the calling agent."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=LIST_SKILLS_TOOL,
        description="List all available skills in the marketplace.",
        input_schema=LIST_SKILLS_INPUT_SCHEMA,
    ),
    ToolDefinition(
        name=INSTALL_SKILL_TOOL,
        description="Install a skill from the marketplace.",
        input_schema=INSTALL_SKILL_INPUT_SCHEMA,
    ),
)

_TOOLS_BY_NAME: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}


def call_tool(name: str, arguments: dict[str, Any] | None, *, config: SkillmartConfig) -> str:
    """Dispatch one tool call and return its text result.

    Catalog order uses the process collation locale. Hosts other than the
    CLI must call ``locale.setlocale(locale.LC_COLLATE, "")`` themselves,
    otherwise names sort by code point and ``Zeta`` precedes ``alpha``.
    """
    tool = _TOOLS_BY_NAME.get(name)
    if tool is None:
        raise ToolRequestError(f"Unknown tool: {name}")

    arguments = arguments if arguments is not None else {}
    _validate_arguments(tool, arguments)

    if name == LIST_SKILLS_TOOL:
        return render_catalog(build_catalog(config.skills_root))

    skill_name = arguments[SKILL_NAME_ARGUMENT]
    outcome = install_skill(config.skills_root, skill_name, install_root=config.install_root)
    return render_install_outcome(outcome)


def _validate_arguments(tool: ToolDefinition, arguments: Any) -> None:
    try:
        jsonschema.validate(instance=arguments, schema=tool.input_schema)
    except jsonschema.ValidationError as exc:
        if exc.validator == "required":
            raise ToolRequestError(f"Missing required argument: {SKILL_NAME_ARGUMENT}") from exc
        raise ToolRequestError(f"Invalid arguments for {tool.name}: {exc.message}") from exc

    # Empty names count as missing.
    if tool.name == INSTALL_SKILL_TOOL and not arguments[SKILL_NAME_ARGUMENT]:
        raise ToolRequestError(f"Missing required argument: {SKILL_NAME_ARGUMENT}")
