"""Tests for tool definitions and request dispatch."""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from skillmart.config import SkillmartConfig
from skillmart.exceptions import ToolRequestError
from skillmart.server import TOOL_DEFINITIONS, call_tool


@pytest.fixture()
def config(plugins_root: Path, tmp_path: Path) -> SkillmartConfig:
    return SkillmartConfig(skills_root=plugins_root, install_root=tmp_path / "installed")


def test_tool_definitions_have_valid_schemas() -> None:
    assert [tool.name for tool in TOOL_DEFINITIONS] == ["list_marketplace_skills", "install_marketplace_skill"]
    for tool in TOOL_DEFINITIONS:
        jsonschema.Draft202012Validator.check_schema(tool.input_schema)


def test_install_tool_requires_skill_name() -> None:
    install = next(tool for tool in TOOL_DEFINITIONS if tool.name == "install_marketplace_skill")

    payload = install.to_dict()

    assert payload["inputSchema"]["required"] == ["skill_name"]
    assert payload["description"] == "Install a skill from the marketplace."


def test_list_tool_renders_catalog(config: SkillmartConfig) -> None:
    text = call_tool("list_marketplace_skills", {}, config=config)

    assert text.startswith("# Available Skills\n")
    assert "- **code-review**:" in text


def test_list_tool_accepts_missing_arguments(config: SkillmartConfig) -> None:
    assert call_tool("list_marketplace_skills", None, config=config).startswith("# Available Skills")


def test_list_tool_with_empty_root(tmp_path: Path) -> None:
    config = SkillmartConfig(skills_root=tmp_path / "missing", install_root=tmp_path / "installed")

    assert call_tool("list_marketplace_skills", {}, config=config) == "No skills found in the plugins directory."


def test_install_tool_messages(config: SkillmartConfig) -> None:
    destination = config.install_root / "code-review"

    first = call_tool("install_marketplace_skill", {"skill_name": "code-review"}, config=config)
    second = call_tool("install_marketplace_skill", {"skill_name": "code-review"}, config=config)
    missing = call_tool("install_marketplace_skill", {"skill_name": "nope"}, config=config)

    assert first == f"Successfully installed 'code-review' to {destination}."
    assert second == f"Skill 'code-review' is already installed at {destination}."
    assert missing == "Error: Skill 'nope' not found."


def test_install_tool_reports_filesystem_error(plugins_root: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file\n", encoding="utf-8")
    config = SkillmartConfig(skills_root=plugins_root, install_root=blocker / "skills")

    text = call_tool("install_marketplace_skill", {"skill_name": "docs"}, config=config)

    assert text.startswith("Error creating skills directory: ")


@pytest.mark.parametrize(
    "arguments",
    [
        pytest.param({}, id="missing"),
        pytest.param(None, id="none"),
        pytest.param({"skill_name": ""}, id="empty"),
    ],
)
def test_install_tool_missing_skill_name_is_a_request_error(
    config: SkillmartConfig, arguments: dict[str, object] | None
) -> None:
    with pytest.raises(ToolRequestError, match="Missing required argument: skill_name"):
        call_tool("install_marketplace_skill", arguments, config=config)


def test_install_tool_rejects_non_string_name(config: SkillmartConfig) -> None:
    with pytest.raises(ToolRequestError, match="Invalid arguments"):
        call_tool("install_marketplace_skill", {"skill_name": 3}, config=config)


def test_unknown_tool_is_a_request_error(config: SkillmartConfig) -> None:
    with pytest.raises(ToolRequestError, match="Unknown tool: uninstall"):
        call_tool("uninstall", {}, config=config)
