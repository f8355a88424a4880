"""Pydantic models for the JSON-RPC wire format and the HTTP API."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class JsonRpcRequest(BaseModel):
    """An inbound JSON-RPC 2.0 request or notification."""

    jsonrpc: str = "2.0"
    id: Any = None
    method: str
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.method.startswith("notifications/")


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """An outbound JSON-RPC 2.0 response; exactly one of result/error is set."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: Any = None
    error: Optional[JsonRpcError] = None

    def to_wire(self) -> Dict[str, Any]:
        # ``id`` is echoed even when null; absent result/error members are omitted.
        payload: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


class ToolCallParams(BaseModel):
    """Parameters of a ``tools/call`` request."""

    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_arguments(cls, value: object) -> object:
        return {} if value is None else value


class ToolCallRequest(BaseModel):
    """Request payload describing a direct tool invocation over HTTP."""

    tool: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


__all__ = [
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ToolCallParams",
    "ToolCallRequest",
]
