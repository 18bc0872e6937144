"""
logging_config.py
------------------

Shared logging configuration and structured logging helpers for the
placeholder API client.  It uses Python's built‑in ``logging`` module
rather than ``print`` so that output can be captured by standard
handlers.  Messages are serialised as JSON to make them easy to parse
downstream.

Import ``logger`` and call its methods instead of ``logging.info``
directly.  The ``log_call`` decorator records entry and exit of
service functions at DEBUG level without leaking tokens or passwords.
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
import sys
from typing import Any, Callable, Dict, Mapping, Tuple

from placeholder_client.core.config import get_settings

# -----------------------------------------------------------------------------
# Configure global logging
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("placeholder_client")
logger.setLevel(get_settings().log_level.upper())

SENSITIVE_HEADERS = {"authorization"}
SENSITIVE_KEYWORDS = ("token", "password", "secret", "authorization")


def _sanitize(obj: Any) -> Any:
    """Reduce a value to something safe and JSON-friendly for the logs.

    Mappings lose every key that names a credential (``auth_token``,
    ``Authorization``, passwords, secrets), at any depth, so bound call
    arguments and header dicts can be logged as is.  ``UserPayload`` and
    other models are logged through ``model_dump``.  Raw bodies are
    reduced to their size, and objects such as :class:`ApiClient` fall
    back to ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, Mapping):
        return {
            k: _sanitize(v)
            for k, v in obj.items()
            if not any(keyword in str(k).lower() for keyword in SENSITIVE_KEYWORDS)
        }
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump())
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def _bind_arguments(func: Callable[..., Any], args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Map every argument of a call onto its parameter name.

    Positional credentials end up under their parameter name (for
    example ``auth_token``) where :func:`_sanitize` can drop them.
    """
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
    except TypeError:
        # the call itself will fail; log nothing that could be a credential
        return {}
    return dict(bound.arguments)


def _log_event(event: str, func: Callable[..., Any], **fields: Any) -> None:
    try:
        payload = {k: _sanitize(v) for k, v in fields.items()}
        logger.debug(json.dumps({"event": event, "function": func.__name__, **payload}))
    except (TypeError, ValueError):
        logger.debug(json.dumps({"event": event, "function": func.__name__}))


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    Emits a ``call_start`` event with the bound arguments before the
    wrapped callable runs and a ``call_end`` event after it returns.
    Arguments are logged by parameter name, so a token passed
    positionally is dropped just like one passed by keyword.  Coroutine
    functions are awaited inside the wrapper so the ``call_end`` event
    carries the actual result rather than a coroutine object.

    Examples
    --------

    >>> @log_call
    ... async def get_thing(client, thing_id):
    ...     return await client.request(f"/things/{thing_id}")
    """

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _log_event("call_start", func, arguments=_bind_arguments(func, args, kwargs))
            result = await func(*args, **kwargs)
            _log_event("call_end", func, result=result)
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _log_event("call_start", func, arguments=_bind_arguments(func, args, kwargs))
        result = func(*args, **kwargs)
        _log_event("call_end", func, result=result)
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     body: str | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    The ``Authorization`` header is always removed before logging.  It
    is invoked by the request executor before sending and again once a
    response (or failure) is available.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The full URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    body : str, optional
        Pre-serialised request body.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if body:
        data["body_bytes"] = len(body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
