"""Pixel tools: posting, reading, updating and counter mutations."""
from __future__ import annotations

from ..arguments import ToolArguments
from ..formatting import ToolResult, success_result
from ..pixela.client import PixelaClient
from ..pixela.models import PostPixelRequest, UpdatePixelRequest
from . import register_tool
from ._common import (
    DATE,
    GRAPH_ID,
    OPTIONAL_DATA,
    QUANTITY,
    TOKEN,
    USERNAME,
    ensure_success,
    string_property,
)

GRAPH_PROPERTIES = {"username": USERNAME, "token": TOKEN, "graphID": GRAPH_ID}
GRAPH_REQUIRED = ["username", "token", "graphID"]


@register_tool(
    "post_pixel",
    description="Post a pixel to Pixela (date defaults to today)",
    action="post pixel",
    properties={
        **GRAPH_PROPERTIES,
        "date": string_property("Date (yyyyMMdd format, defaults to today)"),
        "quantity": QUANTITY,
        "optionalData": OPTIONAL_DATA,
    },
    required=[*GRAPH_REQUIRED, "quantity"],
)
def post_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    request = PostPixelRequest(
        date=args.date("date"),
        quantity=args.require("quantity"),
        optional_data=args.optional("optionalData"),
    )
    ensure_success(client.post_pixel(username, token, graph_id, request))
    return success_result(
        f"Pixel posted to graph '{graph_id}' for user '{username}' "
        f"(date: {request.date}, quantity: {request.quantity})"
    )


@register_tool(
    "batch_post_pixels",
    description="Batch post pixels to Pixela",
    action="batch post pixels",
    properties={
        **GRAPH_PROPERTIES,
        "pixels": {
            "type": "array",
            "description": "Pixels to register, each with date, quantity and optional optionalData",
            "items": {
                "type": "object",
                "properties": {"date": DATE, "quantity": QUANTITY, "optionalData": OPTIONAL_DATA},
                "required": ["date", "quantity"],
            },
        },
    },
    required=[*GRAPH_REQUIRED, "pixels"],
)
def batch_post_pixels(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    pixels = args.pixels("pixels")
    ensure_success(client.batch_post_pixels(username, token, graph_id, pixels))
    return success_result(f"{len(pixels)} pixels posted to graph '{graph_id}' for user '{username}'")


@register_tool(
    "get_pixels",
    description="Get a list of pixels on Pixela",
    action="get pixels",
    properties={
        **GRAPH_PROPERTIES,
        "from": string_property("Start date (yyyyMMdd format)"),
        "to": string_property("End date (yyyyMMdd format)"),
        "withBody": string_property("Include quantity and optional data (true/false)"),
    },
    required=GRAPH_REQUIRED,
)
def get_pixels(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    pixels = client.get_pixels(
        username,
        token,
        graph_id,
        from_=args.optional("from"),
        to=args.optional("to"),
        with_body=args.optional("withBody"),
    )
    if len(pixels) == 0:
        return success_result(f"Graph '{graph_id}' of user '{username}' has no pixels")
    kind = "pixel details" if pixels.detailed else "pixels"
    return success_result(
        f"Retrieved {len(pixels)} {kind} of graph '{graph_id}' for user '{username}'",
        pixels.to_list(),
    )


@register_tool(
    "get_pixel",
    description="Get a specific pixel on Pixela",
    action="get pixel",
    properties={**GRAPH_PROPERTIES, "date": DATE},
    required=[*GRAPH_REQUIRED, "date"],
)
def get_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    date = args.require("date")
    pixel = client.get_pixel(username, token, graph_id, date)
    return success_result(f"Pixel of graph '{graph_id}' on {date} for user '{username}'", pixel.to_dict())


@register_tool(
    "get_latest_pixel",
    description="Get the latest pixel on Pixela",
    action="get latest pixel",
    properties=GRAPH_PROPERTIES,
    required=GRAPH_REQUIRED,
)
def get_latest_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    pixel = client.get_latest_pixel(username, token, graph_id)
    return success_result(
        f"Latest pixel of graph '{graph_id}' for user '{username}' (date: {pixel.date})",
        pixel.to_dict(),
    )


@register_tool(
    "get_today_pixel",
    description="Get today's pixel on Pixela",
    action="get today's pixel",
    properties={
        **GRAPH_PROPERTIES,
        "returnEmpty": string_property("Return an empty pixel instead of 404 when none exists (true/false)"),
    },
    required=GRAPH_REQUIRED,
)
def get_today_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    pixel = client.get_today_pixel(username, token, graph_id, args.flag("returnEmpty"))
    return success_result(
        f"Today's pixel of graph '{graph_id}' for user '{username}' (date: {pixel.date})",
        pixel.to_dict(),
    )


@register_tool(
    "update_pixel",
    description="Update a pixel on Pixela",
    action="update pixel",
    properties={**GRAPH_PROPERTIES, "date": DATE, "quantity": QUANTITY, "optionalData": OPTIONAL_DATA},
    required=[*GRAPH_REQUIRED, "date", "quantity"],
)
def update_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    date = args.require("date")
    request = UpdatePixelRequest(
        quantity=args.require("quantity"),
        optional_data=args.optional("optionalData"),
    )
    ensure_success(client.update_pixel(username, token, graph_id, date, request))
    return success_result(
        f"Pixel of graph '{graph_id}' on {date} for user '{username}' was updated "
        f"(quantity: {request.quantity})"
    )


@register_tool(
    "delete_pixel",
    description="Delete a specific pixel on a specific graph on Pixela",
    action="delete pixel",
    properties={**GRAPH_PROPERTIES, "date": DATE},
    required=[*GRAPH_REQUIRED, "date"],
)
def delete_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    date = args.require("date")
    ensure_success(client.delete_pixel(username, token, graph_id, date))
    return success_result(f"Pixel of graph '{graph_id}' on {date} for user '{username}' was deleted")


@register_tool(
    "increment_pixel",
    description="Increment today's pixel on a graph (int graphs +1, float graphs +0.01)",
    action="increment pixel",
    properties=GRAPH_PROPERTIES,
    required=GRAPH_REQUIRED,
)
def increment_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    ensure_success(client.increment_pixel(username, token, graph_id))
    return success_result(f"Today's pixel of graph '{graph_id}' for user '{username}' was incremented")


@register_tool(
    "decrement_pixel",
    description="Decrement today's pixel on a graph (int graphs -1, float graphs -0.01)",
    action="decrement pixel",
    properties=GRAPH_PROPERTIES,
    required=GRAPH_REQUIRED,
)
def decrement_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    ensure_success(client.decrement_pixel(username, token, graph_id))
    return success_result(f"Today's pixel of graph '{graph_id}' for user '{username}' was decremented")


@register_tool(
    "add_pixel",
    description="Add a value to today's pixel on a graph",
    action="add pixel",
    properties={**GRAPH_PROPERTIES, "quantity": string_property("Value to add")},
    required=[*GRAPH_REQUIRED, "quantity"],
)
def add_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    quantity = args.require("quantity")
    ensure_success(client.add_pixel(username, token, graph_id, quantity))
    return success_result(f"Added {quantity} to today's pixel of graph '{graph_id}' for user '{username}'")


@register_tool(
    "subtract_pixel",
    description="Subtract a value from today's pixel on a graph",
    action="subtract pixel",
    properties={**GRAPH_PROPERTIES, "quantity": string_property("Value to subtract")},
    required=[*GRAPH_REQUIRED, "quantity"],
)
def subtract_pixel(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    quantity = args.require("quantity")
    ensure_success(client.subtract_pixel(username, token, graph_id, quantity))
    return success_result(
        f"Subtracted {quantity} from today's pixel of graph '{graph_id}' for user '{username}'"
    )


@register_tool(
    "stopwatch",
    description="Start or stop the stopwatch of a graph; stopping records the elapsed minutes",
    action="run stopwatch",
    properties=GRAPH_PROPERTIES,
    required=GRAPH_REQUIRED,
)
def stopwatch(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    result = ensure_success(client.stopwatch(username, token, graph_id))
    message = f"Stopwatch of graph '{graph_id}' for user '{username}' toggled"
    if result.message:
        message = f"{message}: {result.message}"
    return success_result(message)


__all__ = [
    "add_pixel",
    "batch_post_pixels",
    "decrement_pixel",
    "delete_pixel",
    "get_latest_pixel",
    "get_pixel",
    "get_pixels",
    "get_today_pixel",
    "increment_pixel",
    "post_pixel",
    "stopwatch",
    "subtract_pixel",
    "update_pixel",
]
