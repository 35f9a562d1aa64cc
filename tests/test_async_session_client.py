from __future__ import annotations

import httpx
import pytest

from opentok_api import AsyncSessionClient, AuthError, Credentials, ProtocolError, SessionCreateRequest, TransportError

CREDENTIALS = Credentials(api_key="1127", api_secret="s3cret")


def _client(handler) -> AsyncSessionClient:
    return AsyncSessionClient(CREDENTIALS, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_async_create_session_returns_session() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"<Session><session_id>XYZ</session_id></Session>")

    async with _client(handler) as client:
        session = await client.create_session(SessionCreateRequest(location="10.0.0.1"))

    assert session.session_id == "XYZ"
    assert seen[0].headers["X-TB-PARTNER-AUTH"] == "1127:s3cret"
    assert b"location=10%2E0%2E0%2E1" in seen[0].content


@pytest.mark.asyncio
async def test_async_server_error_raises_auth_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, content=b'<Errors><error code="403" message="Invalid Key"><auth/></error></Errors>'
        )

    async with _client(handler) as client:
        with pytest.raises(AuthError, match="403.*Invalid Key"):
            await client.create_session()


@pytest.mark.asyncio
async def test_async_non_2xx_raises_auth_error() -> None:
    async with _client(lambda request: httpx.Response(401)) as client:
        with pytest.raises(AuthError, match="401 Unauthorized"):
            await client.create_session()


@pytest.mark.asyncio
async def test_async_garbage_raises_protocol_error() -> None:
    async with _client(lambda request: httpx.Response(200, content=b"not xml")) as client:
        with pytest.raises(ProtocolError):
            await client.create_session()


@pytest.mark.asyncio
async def test_async_timeout_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client(handler) as client:
        with pytest.raises(TransportError):
            await client.create_session()


@pytest.mark.asyncio
async def test_async_undecodable_body_raises_protocol_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"garbage")

    async with _client(handler) as client:
        with pytest.raises(ProtocolError):
            await client.create_session()
