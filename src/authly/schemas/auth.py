"""Authentication and upload Pydantic schemas."""
from __future__ import annotations

from pydantic import BaseModel, Field

from .common import CamelModel
from .rhythm import KeyPress


class SignInRequest(CamelModel):
    """Sign-in attempt: a username plus the rhythm the user just performed."""

    username: str = Field(..., min_length=1)
    key_presses: list[KeyPress] = Field(..., description="Submitted rhythm")


class RegisterRequest(CamelModel):
    """Registration of a new username with its reference rhythm."""

    username: str = Field(..., min_length=1)
    audio_url: str = Field(..., description="Audio the rhythm was recorded against")
    key_presses: list[KeyPress] = Field(
        ...,
        min_length=1,
        description="Reference rhythm; an empty rhythm could never be matched",
    )


class AudioDataResponse(CamelModel):
    """Audio a user must play back while performing their rhythm."""

    audio_url: str


class TokenResponse(BaseModel):
    token: str = Field(..., description="Signed access token valid for one day")


class MessageResponse(BaseModel):
    message: str


class UploadResponse(BaseModel):
    url: str = Field(..., description="Durable CDN URL of the uploaded audio")
