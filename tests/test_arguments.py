from __future__ import annotations

import pytest

from pixela_mcp import arguments
from pixela_mcp.arguments import ToolArguments
from pixela_mcp.errors import ArgumentError, InvalidParameter, MissingParameter


def test_require_returns_exact_key_value():
    args = ToolArguments({"username": "alice", "Username": "bob"})
    assert args.require("username") == "alice"


@pytest.mark.parametrize("raw", [{}, {"token": None}, {"token": 42}, {"token": ["a"]}])
def test_require_rejects_absent_or_non_string(raw):
    with pytest.raises(MissingParameter) as excinfo:
        ToolArguments(raw).require("token")

    assert str(excinfo.value) == "missing required parameter 'token'"
    assert isinstance(excinfo.value, ArgumentError)


def test_optional_falls_back_to_default():
    args = ToolArguments({"timezone": 9, "unit": "pages"})
    assert args.optional("timezone") == ""
    assert args.optional("missing", "fallback") == "fallback"
    assert args.optional("unit") == "pages"


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), ("true", True), ("false", False), ("yes", None), (None, None), (1, None)],
)
def test_flag_normalises_booleans_and_strings(value, expected):
    assert ToolArguments({"isSecret": value}).flag("isSecret") is expected


def test_date_defaults_to_today(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(arguments, "today", lambda: "20240315")

    assert ToolArguments({}).date() == "20240315"
    assert ToolArguments({"date": ""}).date() == "20240315"
    assert ToolArguments({"date": "20240101"}).date() == "20240101"


def test_today_uses_compact_format():
    value = arguments.today()
    assert len(value) == 8 and value.isdigit()


def test_string_list_accepts_comma_string_and_array():
    assert ToolArguments({"urls": "https://a, https://b,,"}).string_list("urls") == ["https://a", "https://b"]
    assert ToolArguments({"urls": ["https://a", 3, " "]}).string_list("urls") == ["https://a"]
    assert ToolArguments({}).string_list("urls") == []


def test_pixels_accepts_array_of_objects():
    pixels = ToolArguments(
        {
            "pixels": [
                {"date": "20240101", "quantity": "5"},
                {"date": "20240102", "quantity": "3", "optionalData": '{"note":"ok"}'},
            ]
        }
    ).pixels()

    assert [pixel.to_payload() for pixel in pixels] == [
        {"date": "20240101", "quantity": "5"},
        {"date": "20240102", "quantity": "3", "optionalData": '{"note":"ok"}'},
    ]


def test_pixels_accepts_json_string():
    pixels = ToolArguments({"pixels": '[{"date": "20240101", "quantity": "1"}]'}).pixels()
    assert len(pixels) == 1
    assert pixels[0].date == "20240101"


def test_pixels_missing_raises_missing_parameter():
    with pytest.raises(MissingParameter):
        ToolArguments({}).pixels()


@pytest.mark.parametrize(
    "value, reason",
    [
        ("not json", "not valid JSON"),
        ({"date": "20240101"}, "expected an array"),
        ([], "at least one pixel"),
        (["20240101"], "element 0 is not an object"),
        ([{"date": "20240101", "quantity": "1"}, {"quantity": "2"}], "element 1 is missing 'date'"),
        ([{"date": "20240101", "quantity": 2}], "element 0 is missing 'quantity'"),
    ],
)
def test_pixels_rejects_malformed_input(value, reason):
    with pytest.raises(InvalidParameter) as excinfo:
        ToolArguments({"pixels": value}).pixels()

    assert reason in str(excinfo.value)
    assert str(excinfo.value).startswith("invalid parameter 'pixels': ")
