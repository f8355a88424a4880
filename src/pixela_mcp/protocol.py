"""JSON-RPC method routing shared by the stdio and HTTP transports."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from . import core, tools
from .errors import MethodNotFoundError
from .formatting import error_result
from .pixela.client import PixelaClient
from .registry import list_tools
from .schemas import JsonRpcError, JsonRpcRequest, JsonRpcResponse, ToolCallParams

LOGGER = logging.getLogger("pixela_mcp.protocol")

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "pixela-mcp"
SERVER_VERSION = "1.0.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600

MethodHandler = Callable[[Any, Optional[PixelaClient]], Any]


def server_descriptor() -> Dict[str, Any]:
    """Return the static ``initialize`` result."""

    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {"listChanged": True}},
        "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
    }


def _initialize(params: Any, client: Optional[PixelaClient]) -> Dict[str, Any]:
    return server_descriptor()


def _list_tools(params: Any, client: Optional[PixelaClient]) -> Dict[str, Any]:
    tools.ensure_tools_registered()
    return {"tools": list_tools()}


def _call_tool(params: Any, client: Optional[PixelaClient]) -> Dict[str, Any]:
    try:
        call = ToolCallParams.model_validate(params)
    except ValidationError:
        LOGGER.warning("Malformed tools/call params: %r", params)
        return error_result("failed to parse tool call parameters")
    return core.run_tool(call.name, call.arguments, client=client)


def _ping(params: Any, client: Optional[PixelaClient]) -> Dict[str, Any]:
    return {}


METHODS: Dict[str, MethodHandler] = {
    "initialize": _initialize,
    "tools/list": _list_tools,
    "tools/call": _call_tool,
    "ping": _ping,
}


def resolve_method(method: str) -> MethodHandler:
    try:
        return METHODS[method]
    except KeyError:
        raise MethodNotFoundError(method) from None


def error_response(request_id: Any, code: int, message: str) -> Dict[str, Any]:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=code, message=message)).to_wire()


def handle_request(
    payload: Mapping[str, Any], client: Optional[PixelaClient] = None
) -> Optional[Dict[str, Any]]:
    """Route one decoded JSON-RPC object and return the response object.

    Returns ``None`` for notifications, which receive no response.
    """

    try:
        request = JsonRpcRequest.model_validate(payload)
    except ValidationError:
        request_id = payload.get("id") if isinstance(payload, Mapping) else None
        LOGGER.warning("Invalid JSON-RPC request: %r", payload)
        return error_response(request_id, INVALID_REQUEST, "Invalid Request")

    if request.is_notification:
        LOGGER.debug("Received notification %s", request.method)
        return None

    try:
        handler = resolve_method(request.method)
    except MethodNotFoundError as exc:
        LOGGER.warning("Method not found: %s", exc.method)
        return error_response(request.id, exc.code, str(exc))

    LOGGER.info("Handling %s (id=%r)", request.method, request.id)
    result = handler(request.params, client)
    return JsonRpcResponse(id=request.id, result=result).to_wire()


__all__ = [
    "INVALID_REQUEST",
    "METHODS",
    "PARSE_ERROR",
    "PROTOCOL_VERSION",
    "SERVER_NAME",
    "SERVER_VERSION",
    "error_response",
    "resolve_method",
    "handle_request",
    "server_descriptor",
]
