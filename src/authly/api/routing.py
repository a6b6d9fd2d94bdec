"""Route supervision and error-to-response translation.

Every router in the service uses ``SupervisedRoute``, which wraps the
generated request handler so that:

- ``HTTPError`` raised anywhere in a handler or its dependencies becomes
  ``{"message": ...}`` with the error's status code;
- any other exception is logged with the request line and answered with a
  generic 500, never exposing the cause.

Framework errors (unknown routes, validation) are rendered in the same shape
by the handlers installed with ``install_error_handlers``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from authly.core.errors import HTTPError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the single error body shape used by the whole API."""
    return JSONResponse({"message": message}, status_code=status_code, headers=headers)


class SupervisedRoute(APIRoute):
    """API route whose handler runs inside the error-translating wrapper."""

    def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
        handler = super().get_route_handler()

        async def supervised_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except HTTPError as err:
                return error_response(err.status_code, err.message)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception:
                logger.exception("Error handling request %s %s", request.method, request.url)
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    INTERNAL_ERROR_MESSAGE,
                )

        return supervised_handler


def make_router(**kwargs: Any) -> APIRouter:
    """Return an ``APIRouter`` whose routes are supervised."""
    return APIRouter(route_class=SupervisedRoute, **kwargs)


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"


async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def _validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(422, _format_validation_error(exc))


async def _structured_error_handler(_request: Request, exc: HTTPError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


def install_error_handlers(app: FastAPI) -> None:
    """Render framework-level errors with the API's ``{"message"}`` body."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPError, _structured_error_handler)  # type: ignore[arg-type]
