# src/authly/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

Wire field names are camelCase; Python attribute names stay snake_case.
"""

from .auth import (
    AudioDataResponse,
    MessageResponse,
    RegisterRequest,
    SignInRequest,
    TokenResponse,
    UploadResponse,
)
from .chart import ChartCreate, ChartCreateResponse, ChartResponse
from .common import Pagination
from .rhythm import KeyPress

__all__ = [
    "AudioDataResponse", "MessageResponse", "RegisterRequest", "SignInRequest",
    "TokenResponse", "UploadResponse",
    "ChartCreate", "ChartCreateResponse", "ChartResponse",
    "Pagination",
    "KeyPress",
]
