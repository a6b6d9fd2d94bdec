# src/authly/repositories/__init__.py
"""Data access layer over the relational store."""

from .chart_repo import ChartStore
from .user_repo import UserStore

__all__ = ["ChartStore", "UserStore"]
