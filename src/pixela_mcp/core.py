"""Core execution helpers for Pixela MCP tools."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from . import tools
from .arguments import ToolArguments
from .config import get_settings
from .errors import ArgumentError, ToolNotFoundError
from .formatting import ToolResult, error_result
from .pixela.client import PixelaClient
from .pixela.errors import PixelaError
from .registry import TOOL_REGISTRY

LOGGER = logging.getLogger("pixela_mcp.core")

_default_client: Optional[PixelaClient] = None
_client_lock = threading.Lock()


def default_client() -> PixelaClient:
    """Return the shared, connection-pooled client built from settings."""

    global _default_client
    with _client_lock:
        if _default_client is None:
            _default_client = PixelaClient.from_settings(get_settings().pixela)
        return _default_client


def reset_default_client() -> None:
    """Drop the shared client so the next call rebuilds it from settings."""

    global _default_client
    with _client_lock:
        if _default_client is not None:
            _default_client.close()
        _default_client = None


def run_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = None,
    client: Optional[PixelaClient] = None,
) -> ToolResult:
    """Execute a tool from the registry and return its result envelope.

    Every failure, including an unknown tool name, is returned as an error
    envelope rather than raised; tool failures are data, not protocol faults.
    """

    tools.ensure_tools_registered()

    spec = TOOL_REGISTRY.get(tool_name)
    if spec is None:
        LOGGER.warning("Unknown tool requested: %s", tool_name)
        return error_result(str(ToolNotFoundError(tool_name)))

    args = ToolArguments(arguments)
    LOGGER.info("Running tool %s", tool_name)
    try:
        return spec.handler(client or default_client(), args)
    except ArgumentError as exc:
        LOGGER.warning("Rejected arguments for %s: %s", tool_name, exc)
        return error_result(str(exc))
    except PixelaError as exc:
        LOGGER.warning("Tool %s failed: %s: %s", tool_name, exc.__class__.__name__, exc)
        return error_result(f"failed to {spec.action}: {exc}")
    except Exception as exc:  # pragma: no cover - defensive wrapper
        LOGGER.exception("Unexpected error while running tool %s", tool_name)
        return error_result(f"failed to {spec.action}: {exc.__class__.__name__}: {exc}")


__all__ = ["default_client", "reset_default_client", "run_tool"]
