"""User account tools."""
from __future__ import annotations

from ..arguments import ToolArguments
from ..formatting import ToolResult, success_result
from ..pixela.client import PixelaClient
from ..pixela.models import CreateUserRequest, UpdateUserProfileRequest, UpdateUserRequest
from . import register_tool
from ._common import TOKEN, USERNAME, ensure_success, string_property


@register_tool(
    "create_user",
    description="Create a user on Pixela",
    action="create user",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "agreeTermsOfService": string_property("Agreement to the terms of service (yes/no)"),
        "notMinor": string_property("Confirmation of not being a minor (yes/no)"),
        "thanksCode": string_property("Thanks code (optional)"),
    },
    required=["username", "token", "agreeTermsOfService", "notMinor"],
)
def create_user(client: PixelaClient, args: ToolArguments) -> ToolResult:
    request = CreateUserRequest(
        username=args.require("username"),
        token=args.require("token"),
        agree_terms_of_service=args.require("agreeTermsOfService"),
        not_minor=args.require("notMinor"),
        thanks_code=args.optional("thanksCode"),
    )
    ensure_success(client.create_user(request))
    return success_result(f"User '{request.username}' was created")


@register_tool(
    "update_user",
    description="Update the authentication token of a user on Pixela",
    action="update user",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "newToken": string_property("New authentication token"),
        "thanksCode": string_property("Thanks code (optional)"),
    },
    required=["username", "token", "newToken"],
)
def update_user(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    request = UpdateUserRequest(
        new_token=args.require("newToken"),
        thanks_code=args.optional("thanksCode"),
    )
    ensure_success(client.update_user(username, token, request))
    return success_result(f"User '{username}' was updated")


@register_tool(
    "update_user_profile",
    description="Update the public profile of a user on Pixela",
    action="update user profile",
    properties={
        "username": USERNAME,
        "token": TOKEN,
        "displayName": string_property("Display name"),
        "gravatarIconEmail": string_property("Gravatar icon email address"),
        "title": string_property("Title"),
        "about": string_property("About page URL"),
        "pixelaGraph": string_property("ID of the graph pinned to the profile"),
        "timezone": string_property("Timezone"),
        "contributeURLs": string_property("Contribute URLs (comma-separated)"),
    },
    required=["username", "token"],
)
def update_user_profile(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    request = UpdateUserProfileRequest(
        display_name=args.optional("displayName"),
        gravatar_icon_email=args.optional("gravatarIconEmail"),
        title=args.optional("title"),
        about=args.optional("about"),
        pixela_graph=args.optional("pixelaGraph"),
        timezone=args.optional("timezone"),
        contribute_urls=args.string_list("contributeURLs"),
    )
    ensure_success(client.update_user_profile(username, token, request))
    return success_result(f"Profile of user '{username}' was updated")


@register_tool(
    "delete_user",
    description="Delete a user on Pixela",
    action="delete user",
    properties={"username": USERNAME, "token": TOKEN},
    required=["username", "token"],
)
def delete_user(client: PixelaClient, args: ToolArguments) -> ToolResult:
    username = args.require("username")
    token = args.require("token")
    ensure_success(client.delete_user(username, token))
    return success_result(f"User '{username}' was deleted")


__all__ = ["create_user", "delete_user", "update_user", "update_user_profile"]
