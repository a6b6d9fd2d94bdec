"""Tests for API dependencies module."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from authly.api.dependencies import ensure_authenticated
from authly.core.errors import ConfigurationError, UnauthorizedError
from authly.services.tokens import TokenService

SECRET = "dependency-secret"


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestEnsureAuthenticated:
    def test_returns_subject(self) -> None:
        service = TokenService(SECRET)
        assert ensure_authenticated(_credentials(service.issue("amy")), service) == "amy"

    def test_subject_is_trusted_without_lookup(self) -> None:
        service = TokenService(SECRET)
        assert ensure_authenticated(_credentials(service.issue("ghost")), service) == "ghost"

    def test_missing_credentials(self) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            ensure_authenticated(None, TokenService(SECRET))
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Unauthorized"

    def test_empty_credentials(self) -> None:
        with pytest.raises(UnauthorizedError):
            ensure_authenticated(_credentials(""), TokenService(SECRET))

    def test_expired_and_invalid_are_indistinguishable(self) -> None:
        expired = TokenService(
            SECRET, clock=lambda: datetime.now(UTC) - timedelta(days=2)
        ).issue("amy")

        with pytest.raises(UnauthorizedError) as expired_info:
            ensure_authenticated(_credentials(expired), TokenService(SECRET))
        with pytest.raises(UnauthorizedError) as invalid_info:
            ensure_authenticated(_credentials("garbage"), TokenService(SECRET))

        assert expired_info.value.message == invalid_info.value.message
        assert expired_info.value.status_code == invalid_info.value.status_code

    def test_missing_secret_is_not_a_client_error(self) -> None:
        token = TokenService(SECRET).issue("amy")
        with pytest.raises(ConfigurationError):
            ensure_authenticated(_credentials(token), TokenService(None))
