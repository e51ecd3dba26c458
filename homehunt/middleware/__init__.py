"""
Middleware package for the HomeHunt API.
"""

from .request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware"
]
