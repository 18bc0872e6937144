"""
Route aggregation package for the placeholder API proxy.

Each functional area is its own module defining an ``APIRouter``:
``users`` for the user CRUD endpoints and ``resources`` for the generic
search and filter endpoints.  ``main.py`` includes both routers.
"""

__all__ = [
    "users",
    "resources",
]
