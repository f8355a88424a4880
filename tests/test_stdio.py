from __future__ import annotations

import io
import json

from pixela_mcp import stdio


def test_serve_answers_each_request_on_its_own_line(client, session):
    lines = [
        json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize"}),
        "",
        "this is not json",
        "[1, 2, 3]",
        json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
        json.dumps(
            {
                "jsonrpc": "2.0",
                "id": 2,
                "method": "tools/call",
                "params": {"name": "get_pixel", "arguments": {"username": "alice", "token": "t", "graphID": "g1", "date": "20240101"}},
            }
        ),
        json.dumps({"jsonrpc": "2.0", "id": 3, "method": "foo"}),
    ]
    stdin = io.StringIO("\n".join(lines) + "\n")
    stdout = io.StringIO()

    written = stdio.serve(stdin, stdout, client=client)

    frames = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert written == 3
    assert [frame["id"] for frame in frames] == [1, 2, 3]
    assert frames[0]["result"]["serverInfo"]["name"] == "pixela-mcp"
    assert frames[1]["result"]["content"][1] == {
        "type": "json",
        "json": {"date": "20240101", "quantity": "5"},
    }
    assert frames[2]["error"]["code"] == -32601
    assert len(session.calls) == 1


def test_serve_stops_cleanly_on_empty_input():
    stdout = io.StringIO()

    assert stdio.serve(io.StringIO(""), stdout) == 0
    assert stdout.getvalue() == ""


def test_serve_skips_undecodable_and_deeply_nested_lines():
    stdin = io.BytesIO(
        b"\xff\xfe garbage\n"
        + b"[" * 100000
        + b"\n"
        + json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize"}).encode("utf-8")
        + b"\n"
    )
    stdout = io.StringIO()

    written = stdio.serve(stdin, stdout)

    (frame,) = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert written == 1
    assert frame["id"] == 1
    assert frame["result"]["protocolVersion"] == "2024-11-05"
