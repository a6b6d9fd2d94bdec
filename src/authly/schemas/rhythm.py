"""Rhythm key-press schema shared by users and charts."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KeyPress(BaseModel):
    """A single timed key press within a rhythm."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Symbolic key identifier, e.g. 'A' or 'Space'")
    time: float = Field(
        ..., allow_inf_nan=False, description="Offset in milliseconds from rhythm start"
    )
