"""
routes/resources.py
-------------------

Generic collection routes backed by the query builders.  ``/search``
maps onto :func:`fetch_data`; ``/filter`` maps onto
:func:`fetch_filtered_data`, where every query parameter other than
``sort_by``, ``order``, ``limit`` and ``start`` is treated as an
exact-match filter and forwarded in the order received.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from fastapi import APIRouter, Depends, Query, Request

from placeholder_client.clients.http_client import ApiClient
from placeholder_client.routes.dependencies import get_api_client
from placeholder_client.utils.query import FilterOptions, fetch_data, fetch_filtered_data

router = APIRouter(prefix="/resources", tags=["resources"])

OPTION_NAMES = {"sort_by", "order", "limit", "start"}


@router.get("/{resource}/search")
async def search_resource(
    resource: str,
    field: str = Query(..., min_length=1),
    term: str = "",
    client: ApiClient = Depends(get_api_client),
) -> List[Any]:
    """Search a collection with ``<field>_like=<term>``."""
    return await fetch_data(client, resource, field, term)


@router.get("/{resource}/filter")
async def filter_resource(
    resource: str,
    request: Request,
    sort_by: Optional[str] = None,
    order: Optional[Literal["asc", "desc"]] = None,
    limit: Optional[int] = None,
    start: Optional[int] = None,
    client: ApiClient = Depends(get_api_client),
) -> List[Any]:
    filters = {k: v for k, v in request.query_params.items() if k not in OPTION_NAMES}
    options = FilterOptions(sort_by=sort_by, order=order, limit=limit, start=start)
    return await fetch_filtered_data(client, resource, filters, options)
