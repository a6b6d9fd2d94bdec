"""Chart-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import CamelModel
from .rhythm import KeyPress


class ChartCreate(CamelModel):
    """Schema for creating a chart; owner and timestamps are server-assigned."""

    title: str = Field(..., min_length=1, max_length=200)
    audio_url: str
    key_presses: list[KeyPress] = Field(..., min_length=1)


class ChartCreateResponse(CamelModel):
    id: int


class ChartResponse(CamelModel):
    """Schema for chart data returned to clients."""

    id: int
    user_username: str
    title: str
    audio_url: str
    key_presses: list[KeyPress]
    created_at: datetime
    updated_at: datetime
