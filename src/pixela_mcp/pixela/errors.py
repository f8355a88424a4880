"""Failures raised by the Pixela API client."""
from __future__ import annotations

from typing import Any


class PixelaError(Exception):
    """Base class for every failure surfaced by :class:`PixelaClient`."""


class TransportError(PixelaError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"request failed: {cause}")
        self.operation = operation
        self.cause = cause


class RemoteError(PixelaError):
    """A read endpoint answered with a non-success status.

    ``body`` is the raw response text; it is not necessarily JSON.
    """

    def __init__(self, operation: str, status_code: int, body: str) -> None:
        super().__init__(f"status {status_code}, body: {body}")
        self.operation = operation
        self.status_code = status_code
        self.body = body


class DecodeError(PixelaError):
    """The response body did not match the shape the operation expects."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"failed to decode response: {detail}")
        self.operation = operation
        self.detail = detail


class SchemaMismatch(DecodeError):
    """A polymorphic field matched none of its accepted shapes."""

    def __init__(self, operation: str, field: str, raw: Any) -> None:
        super().__init__(operation, f"unexpected shape for '{field}': {raw!r}")
        self.field = field
        self.raw = raw


class OperationRejected(PixelaError):
    """Pixela answered a write with ``isSuccess: false``."""

    def __init__(self, message: str) -> None:
        super().__init__(message or "request was rejected by Pixela")
        self.message = message


__all__ = [
    "DecodeError",
    "OperationRejected",
    "PixelaError",
    "RemoteError",
    "SchemaMismatch",
    "TransportError",
]
