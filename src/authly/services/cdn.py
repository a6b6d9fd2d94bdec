"""Client for the CDN's push-URL upload API.

The CDN is handed a URL it should fetch; it downloads the file from there and
answers with the durable location it now serves the file from.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from authly.core.errors import BadUpstreamError, ConfigurationError
from authly.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)

__all__ = ["CdnClient", "get_cdn_client"]


class CdnClient:
    """Asks the CDN to pull files from URLs we expose."""

    def __init__(
        self,
        token: str | None,
        *,
        api_url: str = "https://cdn.hackclub.com/api/v3/new",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def upload(self, source_url: str) -> str:
        """Have the CDN fetch ``source_url`` and return its deployed URL.

        Raises:
            ConfigurationError: If no CDN token is configured.
            BadUpstreamError: If the request fails, the CDN answers with an
                error status, or the response lacks a deployed URL.
        """
        if not self._token:
            raise ConfigurationError("CDN token missing")

        logger.info("Requesting CDN pull of %s", source_url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.api_url,
                    headers={"Authorization": f"Bearer {self._token}"},
                    json=[source_url],
                )
        except httpx.HTTPError as exc:
            logger.error("Upload to CDN failed: %s", exc)
            raise BadUpstreamError() from exc

        if response.is_error:
            logger.error("Upload to CDN failed: %s %s", response.status_code, response.text)
            raise BadUpstreamError()

        return _deployed_url(response)


def _deployed_url(response: httpx.Response) -> str:
    try:
        data: Any = response.json()
        deployed = data["files"][0]["deployedUrl"]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        logger.error("Unexpected CDN response: %s", response.text)
        raise BadUpstreamError() from exc
    if not isinstance(deployed, str) or not deployed:
        logger.error("Unexpected CDN response: %s", response.text)
        raise BadUpstreamError()
    logger.info("Uploaded to CDN: %s", deployed)
    return deployed


def get_cdn_client() -> CdnClient:
    """Return a CDN client configured from application settings."""
    return CdnClient(
        settings.cdn_token,
        api_url=settings.cdn_api_url,
        timeout_seconds=settings.cdn_timeout_seconds,
    )
