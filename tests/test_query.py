"""
Unit tests for the search and filter query builders.
Run: pytest tests/test_query.py -v
"""

import asyncio

import pytest
from pydantic import ValidationError

from placeholder_client.clients.http_client import ApiClient
from placeholder_client.utils.query import (
    FilterOptions,
    build_filter_query,
    build_search_endpoint,
    fetch_data,
    fetch_filtered_data,
)
from tests.conftest import BASE_URL, LEANNE, Upstream


def _run(upstream, helper, *args):
    async def go():
        async with ApiClient(BASE_URL, transport=upstream.transport()) as client:
            return await helper(client, *args)

    return asyncio.run(go())


class TestSearchEndpoint:
    def test_without_term(self):
        assert build_search_endpoint("users", "name") == "/users"

    def test_with_term(self):
        assert build_search_endpoint("users", "name", "Lea") == "/users?name_like=Lea"


class TestFilterQuery:
    def test_filters_then_options_in_order(self):
        options = FilterOptions(sort_by="name", order="asc", limit=5)
        assert build_filter_query({"name": "Lea"}, options) == "name=Lea&_sort=name&_order=asc&_limit=5"

    def test_numeric_filter_values_are_stringified(self):
        assert build_filter_query({"userId": 1, "score": 2.5}) == "userId=1&score=2.5"

    def test_start_option(self):
        assert build_filter_query({}, FilterOptions(start=20, limit=10)) == "_limit=10&_start=20"

    def test_zero_limit_and_start_are_omitted(self):
        query = build_filter_query({"name": "Lea"}, FilterOptions(limit=0, start=0))
        assert query == "name=Lea"

    def test_empty(self):
        assert build_filter_query({}) == ""

    def test_values_are_form_encoded(self):
        assert build_filter_query({"name": "Leanne Graham"}) == "name=Leanne+Graham"

    def test_asterisk_kept_literal(self):
        assert build_filter_query({"q": "a*b c&d"}) == "q=a*b+c%26d"

    def test_order_is_restricted(self):
        with pytest.raises(ValidationError):
            FilterOptions(order="sideways")


class TestFetchData:
    def test_bare_collection_without_term(self):
        upstream = Upstream(payload=[LEANNE])
        assert _run(upstream, fetch_data, "users", "name") == [LEANNE]
        assert str(upstream.last.url) == f"{BASE_URL}/users"
        assert upstream.last.url.query == b""

    def test_like_parameter_with_term(self):
        upstream = Upstream(payload=[LEANNE])
        _run(upstream, fetch_data, "users", "name", "Lea")
        assert str(upstream.last.url) == f"{BASE_URL}/users?name_like=Lea"


class TestFetchFilteredData:
    def test_query_string_sent_upstream(self):
        upstream = Upstream(payload=[LEANNE])
        options = FilterOptions(sort_by="name", order="asc", limit=5)
        result = _run(upstream, fetch_filtered_data, "users", {"name": "Lea"}, options)
        assert result == [LEANNE]
        assert upstream.last.url.path == "/users"
        assert upstream.last.url.query == b"name=Lea&_sort=name&_order=asc&_limit=5"

    def test_zero_limit_not_sent(self):
        upstream = Upstream(payload=[])
        _run(upstream, fetch_filtered_data, "posts", {"userId": 1}, FilterOptions(limit=0))
        assert "_limit" not in upstream.last.url.params
        assert upstream.last.url.params["userId"] == "1"
