# src/authly/api/__init__.py
"""HTTP surface of the Authly service."""

from .endpoints import auth_router, charts_router

__all__ = ["auth_router", "charts_router"]
