"""
Core helpers package for the placeholder API client.

Contains configuration and header construction.  Keeping these helpers
in a dedicated package makes it easy to swap settings or credentials
handling for testing.
"""

__all__ = []
