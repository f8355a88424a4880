"""Graph definition and statistics tools."""
from __future__ import annotations

from ..arguments import ToolArguments
from ..formatting import ToolResult, success_result
from ..pixela.client import PixelaClient
from ..pixela.models import CreateGraphRequest, UpdateGraphRequest
from . import register_tool
from ._common import GRAPH_ID, TOKEN, USERNAME, ensure_success, string_property

NAME = string_property("Graph name")
UNIT = string_property("Unit")
COLOR = string_property("Graph color (shibafu/momiji/sora/ichou/ajisai/kuro)")
TIMEZONE = string_property("Timezone (optional)")
SELF_SUFFICIENT = string_property("Self-sufficient (increment/decrement/none)")
IS_SECRET = string_property("Is secret graph (true/false)")
PUBLISH_OPTIONAL_DATA = string_property("Publish optional data (true/false)")


@register_tool(
    "create_graph",
    description="Create a graph on Pixela",
    action="create graph",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "graphID": GRAPH_ID,
        "name": NAME,
        "unit": UNIT,
        "type": string_property("Graph type (int/float)"),
        "color": COLOR,
        "timezone": TIMEZONE,
        "selfSufficient": SELF_SUFFICIENT,
        "isSecret": IS_SECRET,
        "publishOptionalData": PUBLISH_OPTIONAL_DATA,
    },
    required=["username", "token", "graphID", "name", "unit", "type", "color"],
)
def create_graph(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    request = CreateGraphRequest(
        id=args.require("graphID"),
        name=args.require("name"),
        unit=args.require("unit"),
        type=args.require("type"),
        color=args.require("color"),
        timezone=args.optional("timezone"),
        self_sufficient=args.optional("selfSufficient"),
        is_secret=args.flag("isSecret"),
        publish_optional_data=args.flag("publishOptionalData"),
    )
    ensure_success(client.create_graph(username, token, request))
    return success_result(f"Graph '{request.id}' ({request.name}) was created for user '{username}'")


@register_tool(
    "get_graphs",
    description="Get a list of graphs on Pixela",
    action="get graphs",
    properties={"username": USERNAME, "token": TOKEN},
    required=["username", "token"],
)
def get_graphs(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graphs = client.get_graphs(username, token)
    if len(graphs) == 0:
        return success_result(f"No graphs found for user '{username}'")

    if graphs.definitions:
        lines = [
            f"ID: {graph.id}, name: {graph.name}, unit: {graph.unit}, "
            f"type: {graph.type}, color: {graph.color}"
            for graph in graphs.definitions
        ]
        data = [graph.to_dict() for graph in graphs.definitions]
    else:
        lines = [f"ID: {graph_id}" for graph_id in graphs.ids]
        data = [{"id": graph_id} for graph_id in graphs.ids]
    message = f"Graphs of user '{username}' ({len(graphs)}):\n" + "\n".join(lines)
    return success_result(message, data)


@register_tool(
    "get_graph_definition",
    description="Get graph definition on Pixela",
    action="get graph definition",
    properties={"username": USERNAME, "token": TOKEN, "graphID": GRAPH_ID},
    required=["username", "token", "graphID"],
)
def get_graph_definition(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    graph = client.get_graph_definition(username, token, graph_id)
    return success_result(
        f"Definition of graph '{graph_id}' ({graph.name}) for user '{username}'",
        graph.to_dict(),
    )


@register_tool(
    "update_graph",
    description="Update a graph on Pixela",
    action="update graph",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "graphID": GRAPH_ID,
        "name": NAME,
        "unit": UNIT,
        "color": COLOR,
        "timezone": TIMEZONE,
        "purgeCacheURLs": string_property("Purge cache URLs (comma-separated)"),
        "selfSufficient": SELF_SUFFICIENT,
        "isSecret": IS_SECRET,
        "publishOptionalData": PUBLISH_OPTIONAL_DATA,
    },
    required=["username", "token", "graphID"],
)
def update_graph(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    request = UpdateGraphRequest(
        name=args.optional("name"),
        unit=args.optional("unit"),
        color=args.optional("color"),
        timezone=args.optional("timezone"),
        purge_cache_urls=args.string_list("purgeCacheURLs"),
        self_sufficient=args.optional("selfSufficient"),
        is_secret=args.flag("isSecret"),
        publish_optional_data=args.flag("publishOptionalData"),
    )
    ensure_success(client.update_graph(username, token, graph_id, request))
    return success_result(f"Graph '{graph_id}' of user '{username}' was updated")


@register_tool(
    "delete_graph",
    description="Delete a graph on Pixela",
    action="delete graph",
    properties={"username": USERNAME, "token": TOKEN, "graphID": GRAPH_ID},
    required=["username", "token", "graphID"],
)
def delete_graph(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    ensure_success(client.delete_graph(username, token, graph_id))
    return success_result(f"Graph '{graph_id}' of user '{username}' was deleted")


@register_tool(
    "get_graph_stats",
    description="Get graph statistics on Pixela",
    action="get graph stats",
    properties={"username": USERNAME, "token": TOKEN, "graphID": GRAPH_ID},
    required=["username", "token", "graphID"],
)
def get_graph_stats(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    graph_id = args.require("graphID")
    stats = client.get_graph_stats(username, token, graph_id)
    return success_result(f"Statistics of graph '{graph_id}' for user '{username}'", stats.to_dict())


__all__ = [
    "create_graph",
    "delete_graph",
    "get_graph_definition",
    "get_graph_stats",
    "get_graphs",
    "update_graph",
]
