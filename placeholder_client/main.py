# main.py
from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import JSONResponse, ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.
from placeholder_client.logging_config import logger

from placeholder_client.clients.http_client import ApiClient, ApiHTTPError
from placeholder_client.routes.resources import router as resources_router
from placeholder_client.routes.users import router as users_router


def create_app(transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """Build the proxy application.

    ``transport`` is handed to the shared :class:`ApiClient`; leave it
    unset to talk to the configured base URL over the network.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # create and share the API client
        app.state.api_client = ApiClient(transport=transport)
        try:
            yield
        finally:
            await app.state.api_client.aclose()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)

    app.include_router(users_router)
    app.include_router(resources_router)

    @app.exception_handler(ApiHTTPError)
    async def upstream_status_error(request: Request, exc: ApiHTTPError):
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})

    @app.exception_handler(httpx.HTTPError)
    async def upstream_transport_error(request: Request, exc: httpx.HTTPError):
        return JSONResponse(status_code=502, content={"detail": f"Upstream request failed: {exc}"})

    @app.exception_handler(json.JSONDecodeError)
    async def upstream_decode_error(request: Request, exc: json.JSONDecodeError):
        return JSONResponse(status_code=502, content={"detail": "Upstream returned invalid JSON"})

    @app.exception_handler(ResponseValidationError)
    async def upstream_shape_error(request: Request, exc: ResponseValidationError):
        logger.error(json.dumps({
            "event": "upstream_shape_error",
            "path": request.url.path,
            "errors": len(exc.errors()),
        }))
        return JSONResponse(status_code=502, content={"detail": "Upstream returned an unexpected record shape"})

    # -----------------------------------------------------------------
    # Request logging middleware
    # -----------------------------------------------------------------
    @app.middleware("http")  # type: ignore[misc]
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000
        logger.info(json.dumps({
            "event": "inbound_request",
            "path": request.url.path,
            "method": request.method,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }))
        return response

    return app


app = create_app()
