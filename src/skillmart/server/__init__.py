"""Tool definitions and dispatch for agent-facing transports."""

from .tools import SERVER_VERSION, TOOL_DEFINITIONS, ToolDefinition, call_tool, server_info

__all__ = ["SERVER_VERSION", "TOOL_DEFINITIONS", "ToolDefinition", "call_tool", "server_info"]
