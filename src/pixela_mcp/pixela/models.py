"""Request bodies and decoded responses exchanged with the Pixela API.

Attribute names are snake_case; the wire names are carried as aliases.
Request bodies are serialised with :meth:`PixelaModel.to_payload`, which
drops every optional field still holding its zero value so that Pixela
never receives ``null`` or empty placeholders.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError, field_validator

from .errors import SchemaMismatch


def number_text(value: Any) -> Any:
    """Render numeric JSON values as their textual form.

    Quantities are numeric-as-string on the Pixela side; bodies are parsed with
    :class:`~decimal.Decimal` floats so ``1.50`` survives as ``"1.50"``.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return value


def normalize_flag(value: Any) -> bool:
    """Accept a JSON boolean or the strings ``"true"``/``"false"``."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value == "true"
    return False


class PixelaModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_defaults=True)


# ----------------------------------------------------------------------
# Request bodies
# ----------------------------------------------------------------------
class CreateUserRequest(PixelaModel):
    token: str
    username: str
    agree_terms_of_service: str = Field(alias="agreeTermsOfService")
    not_minor: str = Field(alias="notMinor")
    thanks_code: str = Field(default="", alias="thanksCode")


class UpdateUserRequest(PixelaModel):
    new_token: str = Field(alias="newToken")
    thanks_code: str = Field(default="", alias="thanksCode")


class UpdateUserProfileRequest(PixelaModel):
    display_name: str = Field(default="", alias="displayName")
    gravatar_icon_email: str = Field(default="", alias="gravatarIconEmail")
    title: str = ""
    about: str = Field(default="", alias="aboutURL")
    pixela_graph: str = Field(default="", alias="pinnedGraphID")
    timezone: str = ""
    contribute_urls: List[str] = Field(default_factory=list, alias="contributeURLs")


class CreateGraphRequest(PixelaModel):
    id: str
    name: str
    unit: str
    type: str
    color: str
    timezone: str = ""
    self_sufficient: str = Field(default="", alias="selfSufficient")
    is_secret: Optional[bool] = Field(default=None, alias="isSecret")
    publish_optional_data: Optional[bool] = Field(default=None, alias="publishOptionalData")


class UpdateGraphRequest(PixelaModel):
    name: str = ""
    unit: str = ""
    color: str = ""
    timezone: str = ""
    purge_cache_urls: List[str] = Field(default_factory=list, alias="purgeCacheURLs")
    self_sufficient: str = Field(default="", alias="selfSufficient")
    is_secret: Optional[bool] = Field(default=None, alias="isSecret")
    publish_optional_data: Optional[bool] = Field(default=None, alias="publishOptionalData")


class PostPixelRequest(PixelaModel):
    date: str
    quantity: str
    optional_data: str = Field(default="", alias="optionalData")


class UpdatePixelRequest(PixelaModel):
    quantity: str = ""
    optional_data: str = Field(default="", alias="optionalData")


class QuantityRequest(PixelaModel):
    quantity: str


class CreateWebhookRequest(PixelaModel):
    graph_id: str = Field(alias="graphID")
    type: str
    quantity: str = ""


# ----------------------------------------------------------------------
# Responses
# ----------------------------------------------------------------------
class WriteResult(PixelaModel):
    """The ``{message, isSuccess}`` envelope every write endpoint answers with."""

    message: str = ""
    is_success: bool = Field(alias="isSuccess")
    webhook_hash: str = Field(default="", alias="webhookHash")


class Pixel(PixelaModel):
    date: str = ""
    quantity: str = ""
    optional_data: str = Field(default="", alias="optionalData")

    @field_validator("date", "quantity", "optional_data", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        return number_text(value)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"date": self.date, "quantity": self.quantity}
        if self.optional_data:
            data["optionalData"] = self.optional_data
        return data


class PixelDetail(Pixel):
    date: str


class PixelList(PixelaModel):
    """Either a list of dates or a list of pixel details, never both."""

    dates: List[str] = Field(default_factory=list)
    details: List[PixelDetail] = Field(default_factory=list)

    @property
    def detailed(self) -> bool:
        return bool(self.details)

    def __len__(self) -> int:
        return len(self.details) if self.details else len(self.dates)

    def to_list(self) -> List[Dict[str, Any]]:
        if self.details:
            return [detail.to_dict() for detail in self.details]
        return [{"date": date} for date in self.dates]


class GraphDefinition(PixelaModel):
    id: str
    name: str = ""
    unit: str = ""
    type: str = ""
    color: str = ""
    timezone: str = ""
    self_sufficient: bool = Field(default=False, alias="selfSufficient")
    is_secret: bool = Field(default=False, alias="isSecret")
    publish_optional_data: bool = Field(default=False, alias="publishOptionalData")

    @field_validator("self_sufficient", "is_secret", "publish_optional_data", mode="before")
    @classmethod
    def _as_flag(cls, value: Any) -> bool:
        return normalize_flag(value)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class GraphList(PixelaModel):
    """Either a list of graph ids or a list of graph definitions."""

    ids: List[str] = Field(default_factory=list)
    definitions: List[GraphDefinition] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.definitions) if self.definitions else len(self.ids)


class GraphStats(PixelaModel):
    total_pixels_count: int = Field(default=0, alias="totalPixelsCount")
    max_quantity: str = Field(default="", alias="maxQuantity")
    min_quantity: str = Field(default="", alias="minQuantity")
    max_date: str = Field(default="", alias="maxDate")
    min_date: str = Field(default="", alias="minDate")
    total_quantity: str = Field(default="", alias="totalQuantity")
    avg_quantity: str = Field(default="", alias="avgQuantity")
    todays_quantity: str = Field(default="", alias="todaysQuantity")
    yesterday_quantity: str = Field(default="", alias="yesterdayQuantity")

    @field_validator(
        "max_quantity",
        "min_quantity",
        "max_date",
        "min_date",
        "total_quantity",
        "avg_quantity",
        "todays_quantity",
        "yesterday_quantity",
        mode="before",
    )
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        return number_text(value)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Webhook(PixelaModel):
    webhook_hash: str = Field(alias="webhookHash")
    graph_id: str = Field(default="", alias="graphID")
    type: str = ""
    quantity: str = ""

    @field_validator("quantity", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        return number_text(value)

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True)
        if not self.quantity:
            data.pop("quantity")
        return data


# ----------------------------------------------------------------------
# Polymorphic fields
# ----------------------------------------------------------------------
_STRING_LIST = TypeAdapter(List[StrictStr])
_PIXEL_DETAILS = TypeAdapter(List[PixelDetail])
_GRAPH_DEFINITIONS = TypeAdapter(List[GraphDefinition])


def decode_pixel_list(operation: str, raw: Any) -> PixelList:
    """Decode ``pixels`` as a list of dates, else as a list of details."""

    if raw is None:
        return PixelList()
    try:
        return PixelList(dates=_STRING_LIST.validate_python(raw))
    except ValidationError:
        pass
    try:
        return PixelList(details=_PIXEL_DETAILS.validate_python(raw))
    except ValidationError:
        raise SchemaMismatch(operation, "pixels", raw) from None


def decode_graph_list(operation: str, raw: Any) -> GraphList:
    """Decode ``graphs`` as a list of ids, else as a list of definitions."""

    if raw is None:
        return GraphList()
    try:
        return GraphList(ids=_STRING_LIST.validate_python(raw))
    except ValidationError:
        pass
    try:
        return GraphList(definitions=_GRAPH_DEFINITIONS.validate_python(raw))
    except ValidationError:
        raise SchemaMismatch(operation, "graphs", raw) from None


__all__ = [
    "CreateGraphRequest",
    "CreateUserRequest",
    "CreateWebhookRequest",
    "GraphDefinition",
    "GraphList",
    "GraphStats",
    "Pixel",
    "PixelDetail",
    "PixelList",
    "PostPixelRequest",
    "QuantityRequest",
    "UpdateGraphRequest",
    "UpdatePixelRequest",
    "UpdateUserProfileRequest",
    "UpdateUserRequest",
    "Webhook",
    "WriteResult",
    "decode_graph_list",
    "decode_pixel_list",
    "normalize_flag",
    "number_text",
]
