"""
Root application entry point for the placeholder API proxy
==========================================================

Exposes the FastAPI application defined in ``placeholder_client/main.py``
so deployment tools like Uvicorn can import ``main:app`` directly.

Usage
-----

.. code-block:: bash

    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from placeholder_client.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
