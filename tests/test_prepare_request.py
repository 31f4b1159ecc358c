"""Tests for request assembly: URLs, query strings, bodies and headers."""

from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

from oanda.base import build_query

API_KEY = "123456-7890"


def test_get_folds_data_into_query(client):
    req = client.prepare_request("/v3/accounts", "GET", {"foo": "bar"})

    assert req.method == "GET"
    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts?foo=bar"
    assert req.body is None


def test_get_without_data_has_no_query(client):
    req = client.prepare_request("/v3/accounts")
    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts"


def test_get_merges_existing_query(client):
    req = client.prepare_request("/v3/accounts?foo=1&baz=2", "GET", {"foo": "bar"})
    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts?foo=bar&baz=2"


def test_post_encodes_body_and_keeps_url(client):
    req = client.prepare_request("/v3/accounts/1/orders", "POST", {"instrument": "EUR_USD"})

    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts/1/orders"
    assert req.body == '{"instrument":"EUR_USD"}'
    assert json.loads(req.body) == {"instrument": "EUR_USD"}


def test_post_without_data_has_no_body(client):
    req = client.prepare_request("/v3/accounts/1/orders", "POST")
    assert req.body is None


def test_patch_keeps_endpoint_query(client):
    req = client.prepare_request("/v3/x?a=1", "PATCH", {"b": 2})

    assert req.url == "https://api-fxpractice.oanda.com/v3/x?a=1"
    assert req.body == '{"b":2}'


def test_endpoint_slashes_are_trimmed(client):
    req = client.prepare_request("//v3/accounts/")
    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts"


def test_absolute_endpoint_is_rebased(client):
    req = client.prepare_request("https://example.com/v3/accounts")
    assert req.url == "https://api-fxpractice.oanda.com/v3/accounts"


def test_live_environment_url(live_client):
    req = live_client.prepare_request("/v3/accounts")
    assert req.url == "https://api-fxtrade.oanda.com/v3/accounts"


def test_mandatory_headers_present(client):
    req = client.prepare_request("/v3/accounts")

    assert req.headers["Authorization"] == f"Bearer {API_KEY}"
    assert req.headers["Content-Type"] == "application/json"


def test_mandatory_headers_win_over_caller(client):
    req = client.prepare_request(
        "/v3/accounts",
        headers={
            "authorization": "Bearer someone-else",
            "Content-Type": "text/plain",
            "X-Request-ID": "abc",
        },
    )

    assert req.headers == {
        "X-Request-ID": "abc",
        "Authorization": f"Bearer {API_KEY}",
        "Content-Type": "application/json",
    }


def test_accept_datetime_format_header(client):
    client.set_accept_datetime_format("UNIX")
    req = client.prepare_request("/v3/accounts")
    assert req.headers["Accept-Datetime-Format"] == "UNIX"


def test_no_datetime_header_by_default(client):
    assert "Accept-Datetime-Format" not in client.prepare_request("/v3/accounts").headers


def test_build_query_conventions():
    query = build_query({
        "includeUnitsAvailable": False,
        "instruments": ["EUR_USD", "USD_JPY"],
        "count": 10,
        "skipped": None,
    })
    assert parse_qs(query) == {
        "includeUnitsAvailable": ["false"],
        "instruments": ["EUR_USD,USD_JPY"],
        "count": ["10"],
    }


def test_query_values_are_url_encoded(client):
    req = client.prepare_request("/v3/x", "GET", {"from": "2024-01-01T00:00:00Z"})
    assert parse_qs(urlsplit(req.url).query) == {"from": ["2024-01-01T00:00:00Z"]}
    assert "%3A" in req.url


def test_repeated_endpoint_query_keys_are_kept(client):
    req = client.prepare_request("/v3/x?ids=1&ids=2&state=ALL", "GET")
    assert req.url == "https://api-fxpractice.oanda.com/v3/x?ids=1&ids=2&state=ALL"


def test_data_replaces_repeated_key_once(client):
    req = client.prepare_request("/v3/x?ids=1&state=ALL&ids=2", "GET", {"ids": ["3", "4"], "count": 5})
    assert parse_qs(urlsplit(req.url).query) == {"ids": ["3,4"], "state": ["ALL"], "count": ["5"]}
    assert urlsplit(req.url).query.startswith("ids=3%2C4&state=ALL")


def test_build_query_accepts_pairs():
    assert build_query([("a", 1), ("a", 2), ("b", None)]) == "a=1&a=2"
