"""Synchronous client for the Pixela REST API.

One method per remote capability. Write operations return the decoded
``{message, isSuccess}`` envelope whatever the HTTP status line says, because
Pixela signals success in the body. Read operations reject non-2xx responses
with :class:`RemoteError` and decode the payload into typed models.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_BASE_URL, PixelaSettings
from .errors import DecodeError, RemoteError, TransportError
from .models import (
    CreateGraphRequest,
    CreateUserRequest,
    CreateWebhookRequest,
    GraphDefinition,
    GraphList,
    GraphStats,
    Pixel,
    PixelList,
    PostPixelRequest,
    QuantityRequest,
    UpdateGraphRequest,
    UpdatePixelRequest,
    UpdateUserProfileRequest,
    UpdateUserRequest,
    Webhook,
    WriteResult,
    decode_graph_list,
    decode_pixel_list,
)

LOGGER = logging.getLogger("pixela_mcp.pixela")

TOKEN_HEADER = "X-USER-TOKEN"
DEFAULT_TIMEOUT = 30.0

ModelT = TypeVar("ModelT", bound=BaseModel)

# Marker for requests that carry an explicit zero-length body.
_EMPTY = object()


class PixelaClient:
    """Issue one HTTP call per operation against a Pixela deployment."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: PixelaSettings) -> "PixelaClient":
        return cls(settings.base_url, timeout=settings.timeout)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PixelaClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, request: CreateUserRequest) -> WriteResult:
        # The token travels in the body; there is no account to authenticate against yet.
        return self._write("create user", "POST", "/v1/users", body=request.to_payload())

    def update_user(self, username: str, token: str, request: UpdateUserRequest) -> WriteResult:
        return self._write(
            "update user", "PUT", f"/v1/users/{username}", token=token, body=request.to_payload()
        )

    def update_user_profile(
        self, username: str, token: str, request: UpdateUserProfileRequest
    ) -> WriteResult:
        return self._write(
            "update user profile", "PUT", f"/@{username}", token=token, body=request.to_payload()
        )

    def delete_user(self, username: str, token: str) -> WriteResult:
        return self._write("delete user", "DELETE", f"/v1/users/{username}", token=token)

    # ------------------------------------------------------------------
    # Graphs
    # ------------------------------------------------------------------
    def create_graph(self, username: str, token: str, request: CreateGraphRequest) -> WriteResult:
        return self._write(
            "create graph",
            "POST",
            f"/v1/users/{username}/graphs",
            token=token,
            body=request.to_payload(),
        )

    def get_graphs(self, username: str, token: str) -> GraphList:
        operation = "get graphs"
        payload = self._read(operation, f"/v1/users/{username}/graphs", token=token)
        if not isinstance(payload, dict):
            raise DecodeError(operation, f"expected an object, got {payload!r}")
        return decode_graph_list(operation, payload.get("graphs"))

    def get_graph_definition(self, username: str, token: str, graph_id: str) -> GraphDefinition:
        operation = "get graph definition"
        payload = self._read(
            operation, f"/v1/users/{username}/graphs/{graph_id}/graph-def", token=token
        )
        return _decode(operation, GraphDefinition, payload)

    def update_graph(
        self, username: str, token: str, graph_id: str, request: UpdateGraphRequest
    ) -> WriteResult:
        return self._write(
            "update graph",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}",
            token=token,
            body=request.to_payload(),
        )

    def delete_graph(self, username: str, token: str, graph_id: str) -> WriteResult:
        return self._write(
            "delete graph", "DELETE", f"/v1/users/{username}/graphs/{graph_id}", token=token
        )

    def get_graph_stats(self, username: str, token: str, graph_id: str) -> GraphStats:
        operation = "get graph stats"
        payload = self._read(operation, f"/v1/users/{username}/graphs/{graph_id}/stats", token=token)
        return _decode(operation, GraphStats, payload)

    # ------------------------------------------------------------------
    # Pixels
    # ------------------------------------------------------------------
    def get_pixels(
        self,
        username: str,
        token: str,
        graph_id: str,
        *,
        from_: str = "",
        to: str = "",
        with_body: str = "",
    ) -> PixelList:
        operation = "get pixels"
        params = {
            key: value
            for key, value in (("from", from_), ("to", to), ("withBody", with_body))
            if value
        }
        payload = self._read(
            operation,
            f"/v1/users/{username}/graphs/{graph_id}/pixels",
            token=token,
            params=params or None,
        )
        if not isinstance(payload, dict):
            raise DecodeError(operation, f"expected an object, got {payload!r}")
        return decode_pixel_list(operation, payload.get("pixels"))

    def post_pixel(
        self, username: str, token: str, graph_id: str, request: PostPixelRequest
    ) -> WriteResult:
        return self._write(
            "post pixel",
            "POST",
            f"/v1/users/{username}/graphs/{graph_id}",
            token=token,
            body=request.to_payload(),
        )

    def batch_post_pixels(
        self, username: str, token: str, graph_id: str, pixels: Sequence[PostPixelRequest]
    ) -> WriteResult:
        return self._write(
            "batch post pixels",
            "POST",
            f"/v1/users/{username}/graphs/{graph_id}/pixels",
            token=token,
            body=[pixel.to_payload() for pixel in pixels],
        )

    def get_pixel(self, username: str, token: str, graph_id: str, date: str) -> Pixel:
        operation = "get pixel"
        payload = self._read(operation, f"/v1/users/{username}/graphs/{graph_id}/{date}", token=token)
        pixel = _decode(operation, Pixel, payload)
        if not pixel.date:
            pixel.date = date
        return pixel

    def get_latest_pixel(self, username: str, token: str, graph_id: str) -> Pixel:
        operation = "get latest pixel"
        payload = self._read(operation, f"/v1/users/{username}/graphs/{graph_id}/latest", token=token)
        return _decode(operation, Pixel, payload)

    def get_today_pixel(
        self, username: str, token: str, graph_id: str, return_empty: Optional[bool] = None
    ) -> Pixel:
        operation = "get today's pixel"
        params = None
        if return_empty is not None:
            params = {"returnEmpty": "true" if return_empty else "false"}
        payload = self._read(
            operation, f"/v1/users/{username}/graphs/{graph_id}/today", token=token, params=params
        )
        return _decode(operation, Pixel, payload)

    def update_pixel(
        self, username: str, token: str, graph_id: str, date: str, request: UpdatePixelRequest
    ) -> WriteResult:
        return self._write(
            "update pixel",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}/{date}",
            token=token,
            body=request.to_payload(),
        )

    def delete_pixel(self, username: str, token: str, graph_id: str, date: str) -> WriteResult:
        return self._write(
            "delete pixel", "DELETE", f"/v1/users/{username}/graphs/{graph_id}/{date}", token=token
        )

    def increment_pixel(self, username: str, token: str, graph_id: str) -> WriteResult:
        return self._write(
            "increment pixel",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}/increment",
            token=token,
            body=_EMPTY,
        )

    def decrement_pixel(self, username: str, token: str, graph_id: str) -> WriteResult:
        return self._write(
            "decrement pixel",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}/decrement",
            token=token,
            body=_EMPTY,
        )

    def add_pixel(self, username: str, token: str, graph_id: str, quantity: str) -> WriteResult:
        return self._write(
            "add pixel",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}/add",
            token=token,
            body=QuantityRequest(quantity=quantity).to_payload(),
        )

    def subtract_pixel(self, username: str, token: str, graph_id: str, quantity: str) -> WriteResult:
        return self._write(
            "subtract pixel",
            "PUT",
            f"/v1/users/{username}/graphs/{graph_id}/subtract",
            token=token,
            body=QuantityRequest(quantity=quantity).to_payload(),
        )

    def stopwatch(self, username: str, token: str, graph_id: str) -> WriteResult:
        return self._write(
            "stopwatch",
            "POST",
            f"/v1/users/{username}/graphs/{graph_id}/stopwatch",
            token=token,
            body=_EMPTY,
        )

    # ------------------------------------------------------------------
    # Webhooks
    # ------------------------------------------------------------------
    def create_webhook(self, username: str, token: str, request: CreateWebhookRequest) -> WriteResult:
        return self._write(
            "create webhook",
            "POST",
            f"/v1/users/{username}/webhooks",
            token=token,
            body=request.to_payload(),
        )

    def get_webhooks(self, username: str, token: str) -> List[Webhook]:
        operation = "get webhooks"
        payload = self._read(operation, f"/v1/users/{username}/webhooks", token=token)
        if not isinstance(payload, dict):
            raise DecodeError(operation, f"expected an object, got {payload!r}")
        raw = payload.get("webhooks") or []
        if not isinstance(raw, list):
            raise DecodeError(operation, f"expected 'webhooks' to be a list, got {raw!r}")
        return [_decode(operation, Webhook, entry) for entry in raw]

    def invoke_webhook(self, username: str, webhook_hash: str) -> WriteResult:
        # Webhook hashes are the secret; no token header by protocol design.
        return self._write(
            "invoke webhook",
            "POST",
            f"/v1/users/{username}/webhooks/{webhook_hash}",
            body=_EMPTY,
        )

    def delete_webhook(self, username: str, token: str, webhook_hash: str) -> WriteResult:
        return self._write(
            "delete webhook",
            "DELETE",
            f"/v1/users/{username}/webhooks/{webhook_hash}",
            token=token,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _send(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        body: Any = None,
        params: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        kwargs: Dict[str, Any] = {}
        if token is not None:
            headers[TOKEN_HEADER] = token
        if body is _EMPTY:
            headers["Content-Length"] = "0"
        elif body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body
        if params:
            kwargs["params"] = params

        LOGGER.debug("%s %s (%s)", method, url, operation)
        try:
            response = self._session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            LOGGER.warning("Transport failure during %s: %s", operation, exc)
            raise TransportError(operation, exc) from exc
        LOGGER.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _write(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        body: Any = None,
    ) -> WriteResult:
        response = self._send(operation, method, path, token=token, body=body)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(operation, f"{exc}; body: {response.text}") from exc
        return _decode(operation, WriteResult, payload)

    def _read(
        self,
        operation: str,
        path: str,
        *,
        token: str,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        response = self._send(operation, "GET", path, token=token, params=params)
        if not 200 <= response.status_code < 300:
            raise RemoteError(operation, response.status_code, response.text)
        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            raise DecodeError(operation, f"{exc}; body: {response.text}") from exc


def _decode(operation: str, model: Type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(operation, str(exc)) from exc


__all__ = ["DEFAULT_TIMEOUT", "PixelaClient", "TOKEN_HEADER"]
