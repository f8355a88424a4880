"""Typed client for the Pixela habit-tracking API."""
from .client import PixelaClient
from .errors import (
    DecodeError,
    OperationRejected,
    PixelaError,
    RemoteError,
    SchemaMismatch,
    TransportError,
)

__all__ = [
    "DecodeError",
    "OperationRejected",
    "PixelaClient",
    "PixelaError",
    "RemoteError",
    "SchemaMismatch",
    "TransportError",
]
