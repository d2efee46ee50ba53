"""CLI entrypoint for Skillmart."""

from __future__ import annotations

import argparse
import json
import locale
import logging
import sys
from dataclasses import replace
from pathlib import Path

from skillmart import __version__
from skillmart.catalog import build_catalog
from skillmart.config import SkillmartConfig, load_config
from skillmart.constants.branding import CLI_DESCRIPTION
from skillmart.exceptions import ConfigError, ToolRequestError
from skillmart.installer import install_skill
from skillmart.reporting import render_catalog, render_install_outcome
from skillmart.server import TOOL_DEFINITIONS, call_tool, server_info

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="skillmart", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List skills found under the skills root")
    _add_location_arguments(list_cmd)

    install = subparsers.add_parser("install", help="Install a skill into the installed-skills root")
    install.add_argument("skill_name", help="Catalog name of the skill to install")
    _add_location_arguments(install)
    install.add_argument(
        "-d",
        "--install-root",
        type=Path,
        default=None,
        help="Installed-skills root (default: ~/.gemini/skills)",
    )

    subparsers.add_parser("tools", help="Print tool definitions as JSON")

    call = subparsers.add_parser("call", help="Dispatch a tool call as a transport would")
    call.add_argument("tool", help="Tool name")
    call.add_argument("-a", "--arguments", default=None, help="Tool arguments as a JSON object")
    _add_location_arguments(call)

    return parser


def _add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=None, help="Skills source root")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Falling back to the C collation locale")

    if args.command == "tools":
        payload = {"server": server_info(), "tools": [tool.to_dict() for tool in TOOL_DEFINITIONS]}
        print(json.dumps(payload, indent=2))
        return 0

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "list":
        print(render_catalog(build_catalog(config.skills_root)))
        return 0

    if args.command == "install":
        outcome = install_skill(config.skills_root, args.skill_name, install_root=config.install_root)
        message = render_install_outcome(outcome)
        print(message, file=sys.stdout if outcome.ok else sys.stderr)
        return 0 if outcome.ok else 1

    if args.command == "call":
        return _handle_call(args, config)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _resolve_config(args: argparse.Namespace) -> SkillmartConfig:
    """Load config and apply CLI overrides."""
    config = load_config(args.config)
    if args.root is not None:
        config = replace(config, skills_root=args.root.resolve())
    if getattr(args, "install_root", None) is not None:
        config = replace(config, install_root=args.install_root.expanduser().resolve())
    return config


def _handle_call(args: argparse.Namespace, config: SkillmartConfig) -> int:
    """Run one tool call and print its text result."""
    try:
        arguments = json.loads(args.arguments) if args.arguments else {}
    except json.JSONDecodeError as exc:
        print(f"Request error: arguments are not valid JSON: {exc}", file=sys.stderr)
        return 2

    try:
        print(call_tool(args.tool, arguments, config=config))
    except ToolRequestError as exc:
        print(f"Request error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
