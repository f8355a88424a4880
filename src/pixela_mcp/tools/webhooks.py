"""Webhook lifecycle tools."""
from __future__ import annotations

from ..arguments import ToolArguments
from ..errors import InvalidParameter
from ..formatting import ToolResult, success_result
from ..pixela.client import PixelaClient
from ..pixela.models import CreateWebhookRequest
from . import register_tool
from ._common import GRAPH_ID, TOKEN, USERNAME, WEBHOOK_HASH, ensure_success, string_property

WEBHOOK_TYPES = ("increment", "decrement", "add", "subtract", "stopwatch")


@register_tool(
    "create_webhook",
    description="Create a new webhook on Pixela",
    action="create webhook",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "graphID": GRAPH_ID,
        "type": string_property("Webhook type (increment/decrement/add/subtract/stopwatch)"),
        "quantity": string_property("Quantity, used by add/subtract webhooks (optional)"),
    },
    required=["username", "token", "graphID", "type"],
)
def create_webhook(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    request = CreateWebhookRequest(
        graph_id=args.require("graphID"),
        type=args.require("type"),
        quantity=args.optional("quantity"),
    )
    if request.type not in WEBHOOK_TYPES:
        raise InvalidParameter("type", f"expected one of {', '.join(WEBHOOK_TYPES)}")

    result = ensure_success(client.create_webhook(username, token, request))
    data = {"webhookHash": result.webhook_hash, "graphID": request.graph_id, "type": request.type}
    if request.quantity:
        data["quantity"] = request.quantity
    return success_result(
        f"Webhook '{result.webhook_hash}' ({request.type}) was created "
        f"for graph '{request.graph_id}' of user '{username}'",
        data,
    )


@register_tool(
    "get_webhooks",
    description="Get a list of existing webhooks on Pixela",
    action="get webhooks",
    properties={"username": USERNAME, "token": TOKEN},
    required=["username", "token"],
)
def get_webhooks(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    webhooks = client.get_webhooks(username, token)
    if not webhooks:
        return success_result(f"No webhooks found for user '{username}'")
    lines = [
        f"hash: {webhook.webhook_hash}, graph: {webhook.graph_id}, type: {webhook.type}"
        for webhook in webhooks
    ]
    return success_result(
        f"Webhooks of user '{username}' ({len(webhooks)}):\n" + "\n".join(lines),
        [webhook.to_dict() for webhook in webhooks],
    )


@register_tool(
    "invoke_webhook",
    description="Invoke a specific webhook on Pixela",
    action="invoke webhook",
    properties={"username": USERNAME, "webhookHash": WEBHOOK_HASH},
    required=["username", "webhookHash"],
)
def invoke_webhook(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    webhook_hash = args.require("webhookHash")
    ensure_success(client.invoke_webhook(username, webhook_hash))
    return success_result(f"Webhook '{webhook_hash}' of user '{username}' was invoked")


@register_tool(
    "delete_webhook",
    description="Delete a specific webhook on Pixela",
    action="delete webhook",
    properties={"username": USERNAME, "token": TOKEN, "webhookHash": WEBHOOK_HASH},
    required=["username", "token", "webhookHash"],
)
def delete_webhook(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    webhook_hash = args.require("webhookHash")
    ensure_success(client.delete_webhook(username, token, webhook_hash))
    return success_result(f"Webhook '{webhook_hash}' of user '{username}' was deleted")


__all__ = ["create_webhook", "delete_webhook", "get_webhooks", "invoke_webhook"]
