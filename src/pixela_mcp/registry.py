"""Tool registry for the Pixela MCP server."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Sequence, Tuple

if TYPE_CHECKING:
    from .arguments import ToolArguments
    from .formatting import ToolResult
    from .pixela.client import PixelaClient

ToolHandler = Callable[["PixelaClient", "ToolArguments"], "ToolResult"]


@dataclass(frozen=True)
class ToolSpec:
    """One dispatch table entry: schema metadata plus the handler to run."""

    name: str
    description: str
    action: str
    handler: ToolHandler
    properties: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    required: Tuple[str, ...] = ()

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": copy.deepcopy(dict(self.properties)),
            "required": list(self.required),
        }

    def describe(self) -> Dict[str, Any]:
        """Return the ``tools/list`` entry for this tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOL_REGISTRY: Dict[str, ToolSpec] = {}


def register_tool(
    name: str,
    *,
    description: str,
    action: str,
    properties: Mapping[str, Mapping[str, Any]],
    required: Sequence[str] = (),
) -> Callable[[ToolHandler], ToolHandler]:
    """Register a handler as a tool under ``name``.

    ``action`` is the phrase used in failure messages ("failed to <action>").
    Every name in ``required`` must also appear in ``properties``.
    """

    missing = [key for key in required if key not in properties]
    if missing:
        raise ValueError(f"Tool '{name}' requires undeclared properties: {missing}")

    def decorator(func: ToolHandler) -> ToolHandler:
        TOOL_REGISTRY[name] = ToolSpec(
            name=name,
            description=description,
            action=action,
            handler=func,
            properties=dict(properties),
            required=tuple(required),
        )
        return func

    return decorator


def list_tools() -> List[Dict[str, Any]]:
    """Return the static tool catalog in registration order."""

    return [spec.describe() for spec in TOOL_REGISTRY.values()]


__all__ = ["TOOL_REGISTRY", "ToolHandler", "ToolSpec", "list_tools", "register_tool"]
