"""Shared fixtures: an in-memory stand-in for the Pixela service."""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import urlsplit

import pytest

from pixela_mcp import core
from pixela_mcp.config import reset_settings_cache
from pixela_mcp.pixela.client import PixelaClient

BASE_URL = "https://pixe.la"

SUCCESS = {"message": "Success.", "isSuccess": True}

GRAPH_DEFINITION = {
    "id": "g1",
    "name": "Reading",
    "unit": "pages",
    "type": "int",
    "color": "shibafu",
    "timezone": "Asia/Tokyo",
    "selfSufficient": "none",
    "isSecret": "true",
    "publishOptionalData": False,
}

GRAPH_STATS = {
    "totalPixelsCount": 4,
    "maxQuantity": 12,
    "minQuantity": 1,
    "maxDate": "20240103",
    "minDate": "20240101",
    "totalQuantity": 20,
    "avgQuantity": 5.00,
    "todaysQuantity": 3,
    "yesterdayQuantity": 0,
}

WEBHOOKS = {
    "webhooks": [
        {"webhookHash": "hook123", "graphID": "g1", "type": "increment"},
        {"webhookHash": "hook456", "graphID": "g1", "type": "add", "quantity": "2"},
    ]
}


class FakeResponse:
    """Minimal :class:`requests.Response` double."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self, **kwargs: Any) -> Any:
        return json.loads(self.text, **kwargs)


Responder = Callable[[str, str, Dict[str, Any]], Union[FakeResponse, BaseException]]


def pixela_responder(method: str, url: str, kwargs: Dict[str, Any]) -> FakeResponse:
    """Answer every endpoint the way a healthy Pixela account would."""

    path = urlsplit(url).path
    if method == "GET":
        if path.endswith("/graphs"):
            return FakeResponse(payload={"graphs": [GRAPH_DEFINITION]})
        if path.endswith("/graph-def"):
            return FakeResponse(payload=GRAPH_DEFINITION)
        if path.endswith("/stats"):
            return FakeResponse(payload=GRAPH_STATS)
        if path.endswith("/pixels"):
            return FakeResponse(payload={"pixels": ["20240101", "20240102"]})
        if path.endswith("/webhooks"):
            return FakeResponse(payload=WEBHOOKS)
        return FakeResponse(payload={"date": "20240101", "quantity": "5"})
    if method == "POST" and path.endswith("/webhooks"):
        return FakeResponse(payload={**SUCCESS, "webhookHash": "hook123"})
    return FakeResponse(payload=SUCCESS)


class FakeSession:
    """Record every outbound request and answer it through ``responder``."""

    def __init__(self, responder: Optional[Responder] = None) -> None:
        self.responder = responder or pixela_responder
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.responder(method, url, kwargs)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> PixelaClient:
    return PixelaClient(BASE_URL, timeout=5.0, session=session)


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch):
    """Keep settings and the shared client from leaking between tests."""

    for name in ("PIXELA_MCP_PIXELA__BASE_URL", "PIXELA_MCP_PIXELA__TIMEOUT", "PIXELA_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    core.reset_default_client()
    yield
    reset_settings_cache()
    core.reset_default_client()
