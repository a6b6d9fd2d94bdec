# src/authly/services/__init__.py
"""Business logic services for the Authly service."""

from .cdn import CdnClient
from .rhythm import format_key_presses, matches
from .staging import UploadStaging
from .tokens import TokenService

__all__ = [
    "CdnClient",
    "TokenService",
    "UploadStaging",
    "format_key_presses",
    "matches",
]
