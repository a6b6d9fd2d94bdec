"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from authly.core.errors import InvalidTokenError, UnauthorizedError
from authly.db.session import get_db
from authly.repositories import ChartStore, UserStore
from authly.services.cdn import CdnClient, get_cdn_client
from authly.services.staging import UploadStaging
from authly.services.tokens import TokenService, get_token_service

# Missing or non-bearer credentials are reported by ensure_authenticated, not HTTPBearer.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_user_store(db: SessionDep) -> UserStore:
    return UserStore(db)


def get_chart_store(db: SessionDep) -> ChartStore:
    return ChartStore(db)


def get_token_service_dep() -> TokenService:
    return get_token_service()


def get_cdn_client_dep() -> CdnClient:
    return get_cdn_client()


def get_upload_staging(request: Request) -> UploadStaging:
    """Return the staging area owned by the running application."""
    staging: UploadStaging = request.app.state.upload_staging
    return staging


UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
ChartStoreDep = Annotated[ChartStore, Depends(get_chart_store)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service_dep)]
CdnClientDep = Annotated[CdnClient, Depends(get_cdn_client_dep)]
UploadStagingDep = Annotated[UploadStaging, Depends(get_upload_staging)]


def ensure_authenticated(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: TokenServiceDep,
) -> str:
    """Return the username carried by the request's bearer token.

    Args:
        credentials: Parsed ``Authorization: Bearer`` header, if present
        token_service: Service used to verify the token

    Returns:
        The token subject, trusted as the acting username

    Raises:
        UnauthorizedError: If the header is missing or unparsable, or the
            token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenError as err:
        raise UnauthorizedError() from err


# Type alias for the authenticated username dependency
CurrentUsernameDep = Annotated[str, Depends(ensure_authenticated)]
