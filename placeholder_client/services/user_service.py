"""
services/user_service.py
------------------------

Convenience functions for the ``users`` resource.  Each one is a thin
pass-through to :meth:`ApiClient.request` with a fixed method and path.
Create and update bodies are serialised to a JSON string here, before
they reach the executor.  Errors from the executor are not handled and
reach the caller unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from placeholder_client.clients.http_client import ApiClient, RequestOptions
from placeholder_client.logging_config import log_call
from placeholder_client.schemas.users import UserPayload

UserData = Union[UserPayload, Dict[str, Any]]


def _serialize(data: UserData) -> str:
    if isinstance(data, UserPayload):
        data = data.model_dump(exclude_unset=True)
    return json.dumps(data)


@log_call
async def get_users(client: ApiClient, auth_token: Optional[str] = None) -> List[Dict[str, Any]]:
    """Fetch all users."""
    return await client.request("/users", RequestOptions(), auth_token)


@log_call
async def get_user_by_id(client: ApiClient, user_id: int, auth_token: Optional[str] = None) -> Dict[str, Any]:
    """Fetch a single user by ID."""
    return await client.request(f"/users/{user_id}", RequestOptions(), auth_token)


@log_call
async def create_user(client: ApiClient, user_data: UserData, auth_token: Optional[str] = None) -> Dict[str, Any]:
    """Create a user and return the record echoed by the API.

    :param client: shared API client
    :param user_data: new user fields, as a dict or :class:`UserPayload`
    :param auth_token: bearer token authorising the call
    :return: the created user
    """
    options = RequestOptions(method="POST", body=_serialize(user_data))
    return await client.request("/users", options, auth_token)


@log_call
async def update_user(
    client: ApiClient,
    user_id: int,
    updated_data: UserData,
    auth_token: Optional[str] = None,
) -> Dict[str, Any]:
    """Replace a user's fields with ``updated_data`` via PUT.

    :param client: shared API client
    :param user_id: ID of the user to update
    :param updated_data: fields to send, as a dict or :class:`UserPayload`
    :param auth_token: bearer token authorising the call
    :return: the updated user
    """
    options = RequestOptions(method="PUT", body=_serialize(updated_data))
    return await client.request(f"/users/{user_id}", options, auth_token)


@log_call
async def delete_user(client: ApiClient, user_id: int, auth_token: Optional[str] = None) -> None:
    """Delete a user.  The response body is discarded."""
    await client.request(f"/users/{user_id}", RequestOptions(method="DELETE"), auth_token)
