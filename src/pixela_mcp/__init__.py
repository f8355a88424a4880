"""Pixela MCP server package initialization."""
from . import core, tools
from .core import run_tool
from .protocol import SERVER_VERSION as __version__
from .protocol import handle_request
from .registry import TOOL_REGISTRY, register_tool

# Ensure all tool modules are imported so that the registry is populated.
tools.ensure_tools_registered()

__all__ = [
    "TOOL_REGISTRY",
    "__version__",
    "handle_request",
    "register_tool",
    "run_tool",
]
