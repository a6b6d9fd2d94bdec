"""Data access helpers for working with users."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from authly.models.user import User
from authly.schemas.rhythm import KeyPress

from .key_presses import dump_key_presses

__all__ = ["UserStore"]


class UserStore:
    """Thin wrapper around database access for user records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_user(self, username: str) -> User | None:
        """Return the user registered under ``username``, if any."""
        return self.session.get(User, username)

    def create_user(
        self,
        *,
        username: str,
        audio_url: str,
        key_presses: Iterable[KeyPress | dict[str, Any]],
    ) -> User:
        """Insert a new user.

        Callers must check for an existing username first; the
        check-then-insert pair is not atomic.
        """
        user = User(
            username=username,
            audio_url=audio_url,
            key_presses=dump_key_presses(key_presses),
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
