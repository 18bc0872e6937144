"""
Fetch a single user from the configured API and print it.

Run from the repository root with ``python -m scripts.fetch_user`` (or
as ``python scripts/fetch_user.py`` once the package is installed with
``pip install -e .``).  The base URL comes from
``PLACEHOLDER_BASE_URL`` when set.
"""

from __future__ import annotations

import asyncio
import json
import sys

from placeholder_client.clients.http_client import api_client
from placeholder_client.logging_config import logger


async def fetch_users() -> int:
    try:
        users = await api_client("/users/1")
    except Exception as exc:
        logger.error(json.dumps({"event": "fetch_users_error", "detail": f"Error fetching users: {exc}"}))
        return 1
    print("Fetched users:", json.dumps(users, indent=2))
    return 0


def main() -> int:
    return asyncio.run(fetch_users())


if __name__ == "__main__":
    sys.exit(main())
