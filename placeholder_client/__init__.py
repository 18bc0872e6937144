"""
placeholder_client package
--------------------------

Asynchronous client for the JSONPlaceholder-style REST API plus a
small FastAPI proxy around it.  Importing ``placeholder_client`` loads
the :mod:`main` module and exposes the ``app`` instance for ASGI
servers, alongside the client surface.
"""

from .clients.http_client import ApiClient, ApiHTTPError, RequestOptions, api_client  # noqa: F401
from .utils.query import FilterOptions, fetch_data, fetch_filtered_data  # noqa: F401
from .main import app  # noqa: F401

__all__ = [
    "ApiClient",
    "ApiHTTPError",
    "RequestOptions",
    "api_client",
    "FilterOptions",
    "fetch_data",
    "fetch_filtered_data",
    "app",
]
