"""
clients/http_client.py
----------------------

Request executor for the placeholder REST API.  ``ApiClient`` joins a
base URL with an endpoint, merges the default, caller and bearer
headers, sends the request over a pooled ``httpx.AsyncClient`` and
decodes the JSON body.

A non-2xx response raises :class:`ApiHTTPError`.  Transport failures
raised by ``httpx`` and JSON decode errors propagate unchanged.  Every
failure is logged as an ``api_call_failed`` event before it is raised
again; nothing is retried and no fallback value is returned.

An instance should be created once (for example in the FastAPI
lifespan event or an ``async with`` block) and shared by the query
builders and services.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field

from placeholder_client.core.auth import merge_headers
from placeholder_client.core.config import get_settings
from placeholder_client.logging_config import log_http_request, logger


class ApiHTTPError(Exception):
    """Raised when the upstream API answers with a non-2xx status.

    Only the numeric status is kept; the response body and headers are
    not exposed.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error! Status: {status_code}")


class RequestOptions(BaseModel):
    """Per-request configuration: method, extra headers and a raw body.

    ``body`` is a pre-serialised JSON string and is sent unchanged.
    """

    method: str = "GET"
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None


class ApiClient:
    """Asynchronous JSON client bound to a single base URL.

    The base URL and timeout default to the values in
    :func:`~placeholder_client.core.config.get_settings`.  Pass
    ``transport`` to route requests through a custom ``httpx``
    transport, such as ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = settings.base_url if base_url is None else base_url
        self.timeout = settings.http_timeout if timeout is None else timeout
        # pooled; redirects are followed and only the final status is checked
        self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True, transport=transport)

    async def aclose(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def build_url(self, endpoint: str) -> str:
        """Append ``endpoint`` to the base URL verbatim."""
        return f"{self.base_url}{endpoint}"

    async def request(
        self,
        endpoint: str,
        options: Optional[RequestOptions] = None,
        auth_token: Optional[str] = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body.

        :param endpoint: path appended to the base URL, query string included
        :param options: method, headers and body; defaults to a bare GET
        :param auth_token: optional bearer token; sent as
            ``Authorization: Bearer <token>`` and overrides any caller
            ``Authorization`` header
        :raises ApiHTTPError: if the response status is not 2xx
        :return: the JSON body exactly as decoded, with no shape validation
        """
        options = options or RequestOptions()
        method = options.method.upper()
        url = self.build_url(endpoint)
        headers = merge_headers(options.headers, auth_token)

        start_time = time.time()
        log_http_request(method, url, headers=dict(headers), body=options.body)
        try:
            response = await self._client.request(method, url, headers=headers, content=options.body)
            duration_ms = (time.time() - start_time) * 1000
            log_http_request(method, url, status=response.status_code, duration_ms=duration_ms)
            if not response.is_success:
                raise ApiHTTPError(response.status_code)
            return response.json()
        except Exception as exc:
            logger.error(json.dumps({
                "event": "api_call_failed",
                "method": method,
                "url": url,
                "error": type(exc).__name__,
                "detail": str(exc),
            }), exc_info=True)
            raise


async def api_client(
    endpoint: str,
    options: Optional[RequestOptions] = None,
    auth_token: Optional[str] = None,
) -> Any:
    """Run a single request with a short-lived default :class:`ApiClient`.

    Convenient for scripts; long-running code should share one client.
    """
    async with ApiClient() as client:
        return await client.request(endpoint, options, auth_token)
