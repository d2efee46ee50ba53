"""Tool names, input schemas, and outcome message templates."""

from __future__ import annotations

from typing import Any

LIST_SKILLS_TOOL: str = "list_marketplace_skills"
INSTALL_SKILL_TOOL: str = "install_marketplace_skill"
SKILL_NAME_ARGUMENT: str = "skill_name"

LIST_SKILLS_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {},
}

INSTALL_SKILL_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        SKILL_NAME_ARGUMENT: {
            "type": "string",
            "description": "Name of the skill to install",
        },
    },
    "required": [SKILL_NAME_ARGUMENT],
}

NOT_FOUND_TEMPLATE: str = "Error: Skill '{name}' not found."
ALREADY_INSTALLED_TEMPLATE: str = "Skill '{name}' is already installed at {destination}."
INSTALLED_TEMPLATE: str = "Successfully installed '{name}' to {destination}."
INSTALL_ROOT_ERROR_TEMPLATE: str = "Error creating skills directory: {reason}"
INSTALL_COPY_ERROR_TEMPLATE: str = "Error installing skill: {reason}"
