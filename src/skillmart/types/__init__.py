"""Shared type aliases for Skillmart."""

from .common import InstallStatus, JsonObject, JsonScalar, JsonValue

__all__ = ["InstallStatus", "JsonObject", "JsonScalar", "JsonValue"]
