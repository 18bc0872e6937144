"""
utils/query.py
--------------

Query builders for collection endpoints.

Two helpers sit on top of :meth:`ApiClient.request`:

* ``fetch_data`` performs a single-field ``<field>_like`` search.
* ``fetch_filtered_data`` combines exact-match filters with sorting and
  pagination parameters (``_sort``, ``_order``, ``_limit``, ``_start``).

Sort, order, limit and start are only sent when they are truthy, so a
``limit`` or ``start`` of ``0`` is dropped from the query string rather
than forwarded to the API.
"""

from __future__ import annotations

from typing import Any, List, Literal, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from pydantic import BaseModel

from placeholder_client.clients.http_client import ApiClient

FilterValue = Union[str, int, float]


class FilterOptions(BaseModel):
    sort_by: Optional[str] = None
    order: Optional[Literal["asc", "desc"]] = None
    limit: Optional[int] = None
    start: Optional[int] = None


# option attribute -> query parameter name, in the order they are appended
OPTION_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("sort_by", "_sort"),
    ("order", "_order"),
    ("limit", "_limit"),
    ("start", "_start"),
)


def build_search_endpoint(resource: str, search_field: str, search_term: str = "") -> str:
    """Return ``/<resource>`` or ``/<resource>?<field>_like=<term>``.

    The term is interpolated as is; any escaping is left to ``httpx``
    when the URL is parsed.
    """
    if search_term:
        return f"/{resource}?{search_field}_like={search_term}"
    return f"/{resource}"


def build_filter_query(
    filters: Mapping[str, FilterValue],
    options: Optional[FilterOptions] = None,
) -> str:
    """Encode filters followed by the truthy sort/pagination options.

    :param filters: field name to match value; values are converted with ``str``
    :param options: optional sort, order, limit and start
    :return: the encoded query string without a leading ``?``
    """
    options = options or FilterOptions()
    params: List[Tuple[str, str]] = [(field, str(value)) for field, value in filters.items()]
    for attr, name in OPTION_PARAMS:
        value = getattr(options, attr)
        if value:
            params.append((name, str(value)))
    # form encoding; "*" stays literal
    return urlencode(params, safe="*")


async def fetch_data(
    client: ApiClient,
    resource: str,
    search_field: str,
    search_term: str = "",
) -> List[Any]:
    """Fetch a collection, optionally narrowed by a ``_like`` search.

    :param client: shared API client
    :param resource: collection name, e.g. ``users`` or ``posts``
    :param search_field: field to search on, e.g. ``name``
    :param search_term: search term; empty requests the bare collection
    :return: the decoded JSON array
    """
    return await client.request(build_search_endpoint(resource, search_field, search_term))


async def fetch_filtered_data(
    client: ApiClient,
    resource: str,
    filters: Mapping[str, FilterValue],
    options: Optional[FilterOptions] = None,
) -> List[Any]:
    """Fetch a collection filtered, sorted and paginated via query parameters.

    The endpoint always carries a ``?``, even when no parameter is set.
    """
    endpoint = f"/{resource}?{build_filter_query(filters, options)}"
    return await client.request(endpoint)
