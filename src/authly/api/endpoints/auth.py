# src/authly/api/endpoints/auth.py
"""Rhythm authentication and audio upload endpoints."""

from __future__ import annotations

import logging

from fastapi import Request, Response, status

from authly.api.dependencies import (
    CdnClientDep,
    TokenServiceDep,
    UploadStagingDep,
    UserStoreDep,
)
from authly.api.routing import make_router
from authly.core.errors import ConflictError, NotFoundError, PayloadTooLargeError, UnauthorizedError
from authly.core.settings import settings
from authly.repositories.key_presses import load_key_presses
from authly.schemas.auth import (
    AudioDataResponse,
    MessageResponse,
    RegisterRequest,
    SignInRequest,
    TokenResponse,
    UploadResponse,
)
from authly.services.rhythm import format_key_presses, matches

logger = logging.getLogger(__name__)

router = make_router(prefix="/auth", tags=["authentication"])


@router.get(
    "/data/{username}",
    summary="Fetch the audio a user performs their rhythm against",
    response_model=AudioDataResponse,
)
async def get_auth_data(username: str, users: UserStoreDep) -> AudioDataResponse:
    user = users.get_user(username)
    if user is None:
        raise NotFoundError("User not found")
    return AudioDataResponse(audio_url=user.audio_url)


@router.post(
    "/signin",
    summary="Authenticate by reproducing the recorded rhythm",
    response_model=TokenResponse,
)
async def sign_in(
    payload: SignInRequest,
    users: UserStoreDep,
    token_service: TokenServiceDep,
) -> TokenResponse:
    """Compare the submitted rhythm with the stored one and issue a token.

    A mismatch answers 401 with the expected number of key presses as a hint.
    """
    user = users.get_user(payload.username)
    if user is None:
        raise NotFoundError("User not found")

    logger.debug(
        "Sign-in attempt for %s: %s",
        payload.username,
        format_key_presses(payload.key_presses),
    )
    reference = load_key_presses(user.key_presses)
    if not matches(payload.key_presses, reference, settings.rhythm_tolerance_ms):
        raise UnauthorizedError(
            f"Incorrect rhythm. Expected {len(reference)} key presses."
        )

    return TokenResponse(token=token_service.issue(user.username))


@router.post(
    "/register",
    summary="Register a username with a reference rhythm",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def register(payload: RegisterRequest, users: UserStoreDep) -> MessageResponse:
    # Check-then-insert is not atomic; concurrent registrations may race.
    if users.get_user(payload.username) is not None:
        raise ConflictError("User already exists")

    users.create_user(
        username=payload.username,
        audio_url=payload.audio_url,
        key_presses=payload.key_presses,
    )
    logger.info("Registered user %s", payload.username)
    return MessageResponse(message="User registered successfully")


async def _read_capped_body(request: Request, limit: int) -> bytes:
    """Read the request body, failing fast once it exceeds ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError()

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError()
    return bytes(body)


@router.post(
    "/upload",
    summary="Upload audio to the CDN through a pull callback",
    response_model=UploadResponse,
)
async def upload_audio(
    request: Request,
    staging: UploadStagingDep,
    cdn: CdnClientDep,
) -> UploadResponse:
    """Stage the raw body and have the CDN pull it back from us.

    The staged bytes are released when this handler returns, whether the CDN
    pulled them, failed, or never called back.
    """
    payload = await _read_capped_body(request, settings.max_upload_bytes)

    with staging.staged(payload) as upload_id:
        deployed_url = await cdn.upload(settings.upload_callback_url(upload_id))

    return UploadResponse(url=deployed_url)


@router.get(
    "/upload/{upload_id}",
    summary="One-time retrieval of a staged upload",
    response_class=Response,
)
async def pull_upload(upload_id: str, staging: UploadStagingDep) -> Response:
    """Serve staged bytes once; later requests for the same id get an empty body."""
    payload = staging.consume(upload_id)
    return Response(content=payload or b"", media_type="application/octet-stream")
