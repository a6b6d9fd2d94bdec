"""Tests for the CDN push-URL client."""

import json

import httpx
import pytest

from authly.core.errors import BadUpstreamError, ConfigurationError
from authly.services.cdn import CdnClient

API_URL = "https://cdn.test/api/v3/new"


def _client(handler, token: str | None = "cdn-token") -> CdnClient:
    return CdnClient(token, api_url=API_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_upload_posts_source_url_and_returns_deployed_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "files": [
                    {
                        "deployedUrl": "https://cdn.test/s/abc.mp3",
                        "file": "abc.mp3",
                        "sha": "abc",
                        "size": 5,
                    }
                ],
                "cdnBase": "https://cdn.test",
            },
        )

    url = await _client(handler).upload("http://test/auth/upload/123")

    assert url == "https://cdn.test/s/abc.mp3"
    assert len(seen) == 1
    assert str(seen[0].url) == API_URL
    assert seen[0].headers["Authorization"] == "Bearer cdn-token"
    assert json.loads(seen[0].content) == ["http://test/auth/upload/123"]


@pytest.mark.asyncio
async def test_error_status_raises_bad_upstream() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(BadUpstreamError) as exc_info:
        await client.upload("http://test/auth/upload/1")
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Upload to CDN failed"


@pytest.mark.asyncio
async def test_transport_failure_raises_bad_upstream() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(BadUpstreamError):
        await _client(handler).upload("http://test/auth/upload/1")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"files": []}, {"unexpected": True}, {"files": [{"deployedUrl": ""}]}],
)
async def test_malformed_response_raises_bad_upstream(body) -> None:
    client = _client(lambda request: httpx.Response(200, json=body))
    with pytest.raises(BadUpstreamError):
        await client.upload("http://test/auth/upload/1")


@pytest.mark.asyncio
async def test_missing_token_is_configuration_error() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(ConfigurationError):
        await _client(handler, token=None).upload("http://test/auth/upload/1")
    assert calls == []
