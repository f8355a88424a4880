"""Typed access to the loosely-typed argument bag of a tool call."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, Mapping, Optional

from .errors import InvalidParameter, MissingParameter
from .pixela.models import PostPixelRequest

DATE_FORMAT = "%Y%m%d"


def today() -> str:
    """Return the current local calendar date as ``yyyyMMdd``."""

    return datetime.now().strftime(DATE_FORMAT)


class ToolArguments:
    """Read string-keyed tool arguments with a required/optional policy.

    Every accessor looks up the exact key. Values of the wrong type are
    treated as absent, so a required field with a non-string value raises
    :class:`MissingParameter` and an optional one falls back to its default.
    """

    def __init__(self, raw: Optional[Mapping[str, Any]] = None) -> None:
        self._raw: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def require(self, key: str) -> str:
        value = self._raw.get(key)
        if not isinstance(value, str):
            raise MissingParameter(key)
        return value

    def optional(self, key: str, default: str = "") -> str:
        value = self._raw.get(key)
        if not isinstance(value, str):
            return default
        return value

    def flag(self, key: str) -> Optional[bool]:
        """Return ``True``/``False`` for ``"true"``/``"false"``, else ``None``."""

        value = self._raw.get(key)
        if isinstance(value, bool):
            return value
        if value == "true":
            return True
        if value == "false":
            return False
        return None

    def date(self, key: str = "date") -> str:
        value = self._raw.get(key)
        if isinstance(value, str) and value:
            return value
        return today()

    def string_list(self, key: str) -> List[str]:
        value = self._raw.get(key)
        if isinstance(value, str):
            items = value.split(",")
        elif isinstance(value, list):
            items = [item for item in value if isinstance(item, str)]
        else:
            return []
        return [item.strip() for item in items if item.strip()]

    def pixels(self, key: str = "pixels") -> List[PostPixelRequest]:
        """Validate every element of a pixel array before anything is sent."""

        value = self._raw.get(key)
        if value is None:
            raise MissingParameter(key)
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:
                raise InvalidParameter(key, f"not valid JSON ({exc.msg})") from exc
        if not isinstance(value, list):
            raise InvalidParameter(key, "expected an array of pixel objects")
        if not value:
            raise InvalidParameter(key, "array must contain at least one pixel")

        pixels: List[PostPixelRequest] = []
        for index, element in enumerate(value):
            if not isinstance(element, Mapping):
                raise InvalidParameter(key, f"element {index} is not an object")
            date = element.get("date")
            quantity = element.get("quantity")
            if not isinstance(date, str) or not date:
                raise InvalidParameter(key, f"element {index} is missing 'date'")
            if not isinstance(quantity, str) or not quantity:
                raise InvalidParameter(key, f"element {index} is missing 'quantity'")
            optional_data = element.get("optionalData")
            pixels.append(
                PostPixelRequest(
                    date=date,
                    quantity=quantity,
                    optional_data=optional_data if isinstance(optional_data, str) else "",
                )
            )
        return pixels


__all__ = ["DATE_FORMAT", "ToolArguments", "today"]
