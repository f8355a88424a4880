"""Command line interface for the Pixela MCP server."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Iterable

from . import core, stdio
from .config import get_settings
from .formatting import is_error
from .logging import configure_logging, get_logger


def _parse_parameter_arguments(arguments: Iterable[str]) -> Dict[str, Any]:
    """Parse ``--key value`` pairs from ``arguments`` into a dictionary."""

    parameters: Dict[str, Any] = {}
    args = list(arguments)
    index = 0
    while index < len(args):
        name = args[index]
        if not name.startswith("--") or len(name) == 2:
            raise ValueError(f"Expected --key value pair, got '{name}'")
        key = name[2:]
        index += 1
        if index >= len(args):
            raise ValueError(f"Missing value for argument '{name}'")
        parameters[key] = _coerce_value(args[index])
        index += 1
    return parameters


def _coerce_value(raw: str) -> Any:
    """Keep values as strings unless they hold a JSON array or object.

    Pixela quantities and dates are strings; ``--quantity 5`` must not turn
    into the integer 5.
    """

    stripped = raw.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MCP server for the Pixela habit-tracking API")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("stdio", help="Serve JSON-RPC over stdin/stdout (default)")

    http_parser = subparsers.add_parser("http", help="Serve JSON-RPC over HTTP")
    http_parser.add_argument("--host", default=None, help="Interface to bind (overrides settings)")
    http_parser.add_argument("--port", type=int, default=None, help="Port to listen on (overrides settings)")

    run_parser = subparsers.add_parser("run-tool", help="Execute a registered tool once")
    run_parser.add_argument("tool", help="Name of the tool to execute")
    run_parser.add_argument("tool_args", nargs=argparse.REMAINDER, help="Tool-specific parameters")

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = get_logger("pixela_mcp.cli")

    if args.command in (None, "stdio"):
        stdio.serve()
        return 0

    if args.command == "http":
        import uvicorn

        host = args.host or settings.server.host
        port = args.port or settings.server.port
        logger.info("Serving Pixela MCP on http://%s:%s", host, port)
        uvicorn.run("pixela_mcp.http:app", host=host, port=port)
        return 0

    if args.command == "run-tool":
        try:
            parameters = _parse_parameter_arguments(args.tool_args)
        except ValueError as exc:
            print(json.dumps({
                "content": [{"type": "text", "text": f"Error: {exc}"}],
            }), file=sys.stdout)
            return 2

        result = core.run_tool(args.tool, parameters)
        print(json.dumps(result, ensure_ascii=False), file=sys.stdout)
        return 1 if is_error(result) else 0

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
