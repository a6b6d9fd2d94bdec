# src/authly/api/endpoints/__init__.py
"""API endpoint modules."""

from .auth import router as auth_router
from .charts import router as charts_router

__all__ = ["auth_router", "charts_router"]
