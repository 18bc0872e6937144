"""
core/auth.py
-------------

Utility functions for building request headers.

These helpers centralise construction of the JSON content type and the
bearer ``Authorization`` header.  They do not acquire, store or renew
tokens: the caller passes a plain token string and it is attached to a
single request only.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import httpx

DEFAULT_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


def build_auth_headers(token: str) -> Dict[str, str]:
    """Return the ``Authorization`` header for a bearer token.

    :param token: opaque bearer credential supplied by the caller
    :return: a single-entry header mapping
    """
    return {"Authorization": f"Bearer {token}"}


def merge_headers(
    headers: Optional[Mapping[str, str]] = None,
    auth_token: Optional[str] = None,
) -> httpx.Headers:
    """Merge default, caller and auth headers into one header set.

    Later sources override earlier ones on a case-insensitive key
    match: ``Content-Type: application/json`` first, then the caller's
    headers, then the bearer header when ``auth_token`` is non-empty.
    Without a token any caller-supplied ``Authorization`` is left as is.

    :param headers: caller-supplied headers
    :param auth_token: optional bearer token
    :return: the merged :class:`httpx.Headers`
    """
    merged = httpx.Headers(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    if auth_token:
        merged.update(build_auth_headers(auth_token))
    return merged
