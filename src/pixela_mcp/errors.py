"""Dispatch-level error types for the Pixela MCP server."""
from __future__ import annotations


class PixelaMCPError(Exception):
    """Base class for errors raised by the tool dispatch layer."""


class ArgumentError(PixelaMCPError, ValueError):
    """Raised when tool arguments cannot be turned into a valid request."""


class MissingParameter(ArgumentError):
    """Raised when a required argument is absent or not a string."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing required parameter '{name}'")
        self.name = name


class InvalidParameter(ArgumentError):
    """Raised when an argument is present but malformed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid parameter '{name}': {reason}")
        self.name = name
        self.reason = reason


class ToolNotFoundError(PixelaMCPError, LookupError):
    """Raised when a requested tool is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown tool: {name}")
        self.name = name


class MethodNotFoundError(PixelaMCPError, LookupError):
    """Raised when a JSON-RPC method is not recognised."""

    code = -32601

    def __init__(self, method: str) -> None:
        super().__init__("Method not found")
        self.method = method


__all__ = [
    "ArgumentError",
    "InvalidParameter",
    "MethodNotFoundError",
    "MissingParameter",
    "PixelaMCPError",
    "ToolNotFoundError",
]
