# src/authly/models/__init__.py
"""SQLAlchemy models for the Authly service."""

from .chart import Chart
from .user import User

__all__ = ["Chart", "User"]
