"""Line-delimited JSON-RPC transport over stdin/stdout."""
from __future__ import annotations

import json
import logging
import sys
from typing import IO, Optional, TextIO, Union

from .pixela.client import PixelaClient
from .protocol import handle_request

LOGGER = logging.getLogger("pixela_mcp.stdio")


def serve(
    stdin: Optional[Union[IO[bytes], TextIO]] = None,
    stdout: Optional[TextIO] = None,
    *,
    client: Optional[PixelaClient] = None,
) -> int:
    """Answer one JSON-RPC object per input line until EOF.

    Lines that are blank, are not valid UTF-8 JSON, or do not decode to a
    JSON object are skipped. Returns the number of responses written.
    """

    # Raw bytes, so an undecodable line cannot abort the iteration.
    source = stdin if stdin is not None else sys.stdin.buffer
    sink = stdout if stdout is not None else sys.stdout
    written = 0

    LOGGER.info("Serving Pixela MCP over stdio")
    for raw_line in source:
        if isinstance(raw_line, bytes):
            raw_line = raw_line.decode("utf-8", errors="replace")
        line = raw_line.strip()
        if not line:
            continue

        try:
            payload = json.loads(line)
        except (ValueError, RecursionError) as exc:
            LOGGER.warning("Skipping line that is not valid JSON: %s", exc.__class__.__name__)
            continue
        if not isinstance(payload, dict):
            LOGGER.warning("Skipping line that is not a JSON object")
            continue

        response = handle_request(payload, client=client)
        if response is None:
            continue

        sink.write(json.dumps(response, ensure_ascii=False) + "\n")
        sink.flush()
        written += 1

    LOGGER.info("stdin closed; stopping after %d responses", written)
    return written


__all__ = ["serve"]
