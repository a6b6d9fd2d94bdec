"""Issuing and verifying short-lived identity tokens."""
from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from authly.core.errors import ConfigurationError, InvalidTokenError
from authly.core.settings import settings

__all__ = ["TokenService", "get_token_service"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    """Signs tokens whose subject is a username.

    Tokens are stateless: there is no revocation, and ``verify`` does not check
    that the subject still exists.
    """

    def __init__(
        self,
        secret: str | None,
        *,
        algorithm: str = "HS256",
        issuer: str = "authly-rhythm",
        ttl: timedelta = timedelta(days=1),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.issuer = issuer
        self.ttl = ttl
        self._clock = clock

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("Missing AUTH_SECRET env variable")
        return self._secret

    def issue(self, subject: str) -> str:
        """Return a signed token for ``subject`` expiring one TTL from now."""
        secret = self._require_secret()
        issued_at = self._clock()
        claims: dict[str, object] = {
            "sub": subject,
            "iss": self.issuer,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        encoded: str = jwt.encode(claims, secret, algorithm=self.algorithm)
        return encoded

    def verify(self, token: str) -> str:
        """Return the subject of a valid token.

        Raises:
            InvalidTokenError: If the token is malformed, badly signed, from
                another issuer, expired, or carries no subject.
        """
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except JWTError as err:
            raise InvalidTokenError(str(err)) from err

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Token has no subject")
        return subject


def get_token_service() -> TokenService:
    """Return a token service configured from application settings."""
    return TokenService(
        settings.auth_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.token_issuer,
        ttl=timedelta(seconds=settings.token_ttl_seconds),
    )
