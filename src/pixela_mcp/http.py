"""HTTP transport for the Pixela MCP server."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from . import core
from .protocol import INVALID_REQUEST, PARSE_ERROR, SERVER_NAME, SERVER_VERSION, error_response, handle_request
from .schemas import ToolCallRequest

LOGGER = logging.getLogger("pixela_mcp.http")

app = FastAPI(title=SERVER_NAME, version=SERVER_VERSION)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/")
@app.post("/mcp")
async def rpc(request: Request) -> Response:
    """Answer one JSON-RPC object posted as the request body."""

    raw = await request.body()
    try:
        payload: Any = json.loads(raw)
    except ValueError:
        LOGGER.warning("Rejecting request body that is not valid JSON")
        return JSONResponse(error_response(None, PARSE_ERROR, "Parse error"), status_code=400)
    if not isinstance(payload, dict):
        return JSONResponse(error_response(None, INVALID_REQUEST, "Invalid Request"), status_code=400)

    # The outbound Pixela call blocks; keep it off the event loop.
    response = await run_in_threadpool(handle_request, payload)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(response)


@app.post("/call_tool")
def call_tool(payload: ToolCallRequest) -> Dict[str, Any]:
    """Invoke a registered tool directly and return its envelope."""

    return core.run_tool(payload.tool, payload.arguments)


__all__ = ["app"]
