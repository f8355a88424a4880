"""Build the uniform ``{"content": [...]}`` result envelope."""
from __future__ import annotations

from typing import Any, Dict, List

ERROR_PREFIX = "Error: "

ToolResult = Dict[str, List[Dict[str, Any]]]


def success_result(message: str, data: Any = None) -> ToolResult:
    """Wrap ``message`` and, when given, a structured ``data`` item."""

    content: List[Dict[str, Any]] = [{"type": "text", "text": message}]
    if data is not None:
        content.append({"type": "json", "json": data})
    return {"content": content}


def error_result(message: str) -> ToolResult:
    """Wrap a failure description; failure envelopes never carry data."""

    return {"content": [{"type": "text", "text": ERROR_PREFIX + message}]}


def is_error(result: ToolResult) -> bool:
    content = result.get("content") or []
    if len(content) != 1:
        return False
    text = content[0].get("text")
    return isinstance(text, str) and text.startswith(ERROR_PREFIX)


__all__ = ["ERROR_PREFIX", "ToolResult", "error_result", "is_error", "success_result"]
