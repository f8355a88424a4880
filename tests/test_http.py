"""Tests for the HTTP transport."""
from __future__ import annotations

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from pixela_mcp import core, http


@pytest.fixture
def api(monkeypatch: pytest.MonkeyPatch, client) -> TestClient:
    monkeypatch.setattr(core, "default_client", lambda: client)
    return TestClient(http.app)


def test_health(api: TestClient):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize("path", ["/", "/mcp"])
def test_rpc_endpoint_answers_json_rpc(api: TestClient, path: str):
    response = api.post(path, json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert len(response.json()["result"]["tools"]) == 27


def test_rpc_tool_call_uses_shared_client(api: TestClient, session):
    response = api.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": "x",
            "method": "tools/call",
            "params": {"name": "delete_graph", "arguments": {"username": "alice", "token": "t", "graphID": "g1"}},
        },
    )

    assert response.json()["result"]["content"][0]["text"] == "Graph 'g1' of user 'alice' was deleted"
    assert session.calls[0]["method"] == "DELETE"


def test_rpc_unknown_method_is_http_200(api: TestClient):
    response = api.post("/", json={"jsonrpc": "2.0", "id": 2, "method": "resources/list"})

    assert response.status_code == 200
    assert response.json()["error"] == {"code": -32601, "message": "Method not found"}


def test_rpc_notification_is_accepted_without_body(api: TestClient):
    response = api.post("/", json={"jsonrpc": "2.0", "method": "notifications/initialized"})

    assert response.status_code == 202
    assert response.content == b""


def test_rpc_rejects_malformed_json(api: TestClient):
    response = api.post("/", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == -32700


def test_rpc_rejects_non_object_body(api: TestClient):
    response = api.post("/", json=[1, 2])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == -32600


def test_call_tool_delegates_to_core(monkeypatch: pytest.MonkeyPatch):
    """The route should delegate execution to the core runner."""
    captured: Dict[str, Any] = {}
    expected_payload = {"content": [{"type": "text", "text": "ok"}]}

    def fake_run_tool(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        captured["name"] = name
        captured["arguments"] = arguments
        return expected_payload

    monkeypatch.setattr(http.core, "run_tool", fake_run_tool)
    api = TestClient(http.app)

    response = api.post("/call_tool", json={"tool": "get_graphs", "arguments": {"username": "alice"}})

    assert response.status_code == 200
    assert response.json() == expected_payload
    assert captured == {"name": "get_graphs", "arguments": {"username": "alice"}}


def test_call_tool_uses_default_arguments(api: TestClient):
    response = api.post("/call_tool", json={"tool": "get_graphs"})

    assert response.status_code == 200
    assert response.json() == {
        "content": [{"type": "text", "text": "Error: missing required parameter 'username'"}]
    }
