# src/authly/models/user.py
"""SQLAlchemy model for rhythm-authenticated users."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from authly.db.session import Base


class User(Base):
    """Identity keyed by username whose credential is a recorded rhythm."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, primary_key=True)
    audio_url: Mapped[str] = mapped_column(Text, nullable=False)
    # Ordered list of {"key": str, "time": float}; position is significant.
    key_presses: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
