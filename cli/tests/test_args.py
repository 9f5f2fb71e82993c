from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from jsonapi_client.args import is_numeric, normalize_args, normalize_args_list


def test_normalize_args_casts_numeric_values_to_float() -> None:
    result = normalize_args(["3", 4, "x"])

    assert result == [3.0, 4.0, "x"]
    assert all(type(v) is float for v in result[:2])


def test_normalize_args_does_not_mutate_input() -> None:
    args = ["3", 4, "x"]

    normalize_args(args)

    assert args == ["3", 4, "x"]


def test_normalize_args_is_one_level_deep() -> None:
    nested = ["1", {"n": "2"}]

    assert normalize_args([nested, ["5"]]) == [nested, ["5"]]


def test_normalize_args_list_applies_per_list() -> None:
    assert normalize_args_list([["1"], [2, "y"]]) == [[1.0], [2.0, "y"]]


@pytest.mark.parametrize("value", ["0", "-12", "+1.5", ".5", "5.", "1e3", " 42 ", 7, 2.5])
def test_is_numeric_accepts_decimal_numerals(value) -> None:
    assert is_numeric(value)


@pytest.mark.parametrize("value", [True, False, None, "", "abc", "0x1A", "0b11", "nan", "inf", "1_000", "1.2.3", [1]])
def test_is_numeric_rejects_other_values(value) -> None:
    assert not is_numeric(value)


def test_normalize_args_leaves_values_too_large_for_float() -> None:
    huge = 10**400

    assert normalize_args([huge, "1e400", "-1e400", "2"]) == [huge, "1e400", "-1e400", 2.0]


def test_call_sends_values_too_large_for_float_unchanged(make_api_client) -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["args"] = parse_qs(request.url.query.decode())["args"][0]
        return httpx.Response(200, json=True)

    client = make_api_client(handler)

    assert client.call("m", [10**400, "1e400"]) is True
    assert json.loads(captured["args"]) == [10**400, "1e400"]
