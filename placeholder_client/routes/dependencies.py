"""
routes/dependencies.py
----------------------

FastAPI dependencies shared by the route modules: the application-wide
:class:`ApiClient` and the caller's bearer token.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, Request

from placeholder_client.clients.http_client import ApiClient


def get_api_client(request: Request) -> ApiClient:
    """Dependency to retrieve the shared API client from the application state."""
    return request.app.state.api_client


def get_auth_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Extract the token from an inbound ``Authorization: Bearer`` header.

    Any other scheme, or a missing header, yields ``None`` so the
    upstream request is sent without credentials.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
