"""
routes/users.py
---------------

CRUD routes for users.  Each endpoint forwards to the matching function
in :mod:`placeholder_client.services.user_service`, passing along the
caller's bearer token.  Upstream failures are translated into HTTP
responses by the exception handlers registered in ``main.py``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response, status

from placeholder_client.clients.http_client import ApiClient
from placeholder_client.logging_config import logger
from placeholder_client.routes.dependencies import get_api_client, get_auth_token
from placeholder_client.schemas.users import User, UserPayload
from placeholder_client.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User])
async def list_users(
    client: ApiClient = Depends(get_api_client),
    auth_token: Optional[str] = Depends(get_auth_token),
):
    return await user_service.get_users(client, auth_token)


@router.get("/{user_id}", response_model=User)
async def read_user(
    user_id: int,
    client: ApiClient = Depends(get_api_client),
    auth_token: Optional[str] = Depends(get_auth_token),
):
    return await user_service.get_user_by_id(client, user_id, auth_token)


@router.post("", status_code=status.HTTP_201_CREATED)
async def post_user(
    data: UserPayload,
    client: ApiClient = Depends(get_api_client),
    auth_token: Optional[str] = Depends(get_auth_token),
) -> Dict[str, Any]:
    logger.info(json.dumps({"event": "create_user_request", "authenticated": auth_token is not None}))
    return await user_service.create_user(client, data, auth_token)


@router.put("/{user_id}")
async def put_user(
    user_id: int,
    data: UserPayload,
    client: ApiClient = Depends(get_api_client),
    auth_token: Optional[str] = Depends(get_auth_token),
) -> Dict[str, Any]:
    logger.info(json.dumps({"event": "update_user_request", "user_id": user_id}))
    return await user_service.update_user(client, user_id, data, auth_token)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user(
    user_id: int,
    client: ApiClient = Depends(get_api_client),
    auth_token: Optional[str] = Depends(get_auth_token),
) -> Response:
    logger.info(json.dumps({"event": "delete_user_request", "user_id": user_id}))
    await user_service.delete_user(client, user_id, auth_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
