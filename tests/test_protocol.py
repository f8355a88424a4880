from __future__ import annotations

from pixela_mcp import __version__
from pixela_mcp.protocol import METHODS, handle_request

EXPECTED_TOOLS = {
    "create_user",
    "update_user",
    "update_user_profile",
    "delete_user",
    "create_graph",
    "get_graphs",
    "get_graph_definition",
    "update_graph",
    "delete_graph",
    "get_graph_stats",
    "post_pixel",
    "batch_post_pixels",
    "get_pixels",
    "get_pixel",
    "get_latest_pixel",
    "get_today_pixel",
    "update_pixel",
    "delete_pixel",
    "increment_pixel",
    "decrement_pixel",
    "add_pixel",
    "subtract_pixel",
    "stopwatch",
    "create_webhook",
    "get_webhooks",
    "invoke_webhook",
    "delete_webhook",
}


def test_initialize_describes_server():
    response = handle_request({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}})

    assert response == {
        "jsonrpc": "2.0",
        "id": 1,
        "result": {
            "protocolVersion": "2024-11-05",
            "capabilities": {"tools": {"listChanged": True}},
            "serverInfo": {"name": "pixela-mcp", "version": __version__},
        },
    }


def test_tools_list_returns_fixed_catalog():
    first = handle_request({"jsonrpc": "2.0", "id": "a", "method": "tools/list"})
    second = handle_request({"jsonrpc": "2.0", "id": "b", "method": "tools/list"})

    tools = first["result"]["tools"]
    assert len(tools) == 27
    assert {tool["name"] for tool in tools} == EXPECTED_TOOLS
    assert tools == second["result"]["tools"]
    for tool in tools:
        schema = tool["inputSchema"]
        assert schema["type"] == "object"
        assert set(schema["required"]) <= set(schema["properties"])
        assert tool["description"]


def test_tools_call_dispatches_with_client(client, session):
    response = handle_request(
        {
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {"name": "increment_pixel", "arguments": {"username": "alice", "token": "t", "graphID": "g1"}},
        },
        client=client,
    )

    assert response["id"] == 7
    assert response["result"] == {
        "content": [{"type": "text", "text": "Today's pixel of graph 'g1' for user 'alice' was incremented"}]
    }
    assert len(session.calls) == 1


def test_tools_call_unknown_tool_is_a_result_not_an_error(client, session):
    response = handle_request(
        {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "foo", "arguments": {}}},
        client=client,
    )

    assert "error" not in response
    assert response["result"]["content"][0]["text"] == "Error: unknown tool: foo"
    assert session.calls == []


def test_tools_call_with_malformed_params(client):
    response = handle_request(
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"arguments": {}}}, client=client
    )

    assert response["result"]["content"][0]["text"] == "Error: failed to parse tool call parameters"


def test_tools_call_with_null_arguments(client, session):
    response = handle_request(
        {"jsonrpc": "2.0", "id": 4, "method": "tools/call", "params": {"name": "get_graphs", "arguments": None}},
        client=client,
    )

    assert response["result"]["content"][0]["text"] == "Error: missing required parameter 'username'"
    assert session.calls == []


def test_unknown_method_returns_method_not_found():
    response = handle_request({"jsonrpc": "2.0", "id": 9, "method": "foo"})

    assert response == {"jsonrpc": "2.0", "id": 9, "error": {"code": -32601, "message": "Method not found"}}


def test_ping_returns_empty_result():
    assert handle_request({"jsonrpc": "2.0", "id": 5, "method": "ping"})["result"] == {}


def test_notifications_receive_no_response():
    assert handle_request({"jsonrpc": "2.0", "method": "notifications/initialized"}) is None


def test_missing_method_is_invalid_request():
    response = handle_request({"jsonrpc": "2.0", "id": 6})

    assert response["id"] == 6
    assert response["error"]["code"] == -32600


def test_method_table_is_closed():
    assert set(METHODS) == {"initialize", "tools/list", "tools/call", "ping"}


def test_tools_list_hands_out_independent_schemas():
    listed = handle_request({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})["result"]["tools"]
    batch = next(tool for tool in listed if tool["name"] == "batch_post_pixels")
    post = next(tool for tool in listed if tool["name"] == "post_pixel")

    batch["inputSchema"]["properties"]["pixels"]["items"]["required"].append("optionalData")
    post["inputSchema"]["properties"]["username"]["description"] = "changed"

    fresh = handle_request({"jsonrpc": "2.0", "id": 2, "method": "tools/list"})["result"]["tools"]
    fresh_batch = next(tool for tool in fresh if tool["name"] == "batch_post_pixels")
    fresh_post = next(tool for tool in fresh if tool["name"] == "post_pixel")
    assert fresh_batch["inputSchema"]["properties"]["pixels"]["items"]["required"] == ["date", "quantity"]
    assert fresh_post["inputSchema"]["properties"]["username"]["description"] == "User name"
    assert fresh_batch["inputSchema"]["properties"]["username"]["description"] == "User name"
