"""Shared schema fragments and result checks for tool modules."""
from __future__ import annotations

from typing import Any, Dict

from ..pixela.errors import OperationRejected
from ..pixela.models import WriteResult


def string_property(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


USERNAME = string_property("User name")
TOKEN = string_property("Authentication token")
GRAPH_ID = string_property("Graph ID")
DATE = string_property("Date (yyyyMMdd format)")
QUANTITY = string_property("Quantity")
OPTIONAL_DATA = string_property("Optional data, typically JSON (optional)")
WEBHOOK_HASH = string_property("Webhook hash")


def ensure_success(result: WriteResult) -> WriteResult:
    """Turn a body-level ``isSuccess: false`` into a failure."""

    if not result.is_success:
        raise OperationRejected(result.message)
    return result
