"""
Session creation client.

One POST to ``<base>/session/create`` per call, authenticated with the partner
key/secret header; the XML reply becomes a :class:`Session`.
"""

from __future__ import annotations

import logging

import httpx

from opentok_api.config import (
    DEFAULT_TIMEOUT_SECONDS,
    PARTNER_AUTH_HEADER,
    SESSION_CREATE_PATH,
    resolve_base_url,
)
from opentok_api.errors import AuthError, ProtocolError, TransportError
from opentok_api.models import Credentials, Session, SessionCreateRequest
from opentok_api.services.encoding import encode_form
from opentok_api.services.xml_response import parse_session_response

logger = logging.getLogger(__name__)


def build_form_fields(credentials: Credentials, request: SessionCreateRequest) -> list[tuple[str, str]]:
    """Form fields in wire order: ``api_key``, the session options, then extra properties."""
    fields = [
        ("api_key", credentials.api_key),
        ("location", request.location),
        ("echoSuppression_enabled", "1" if request.echo_suppression_enabled else "0"),
        ("multiplexer_numOutputStreams", str(request.multiplexer_num_output_streams)),
        ("multiplexer_switchType", str(int(request.multiplexer_switch_type))),
        ("multiplexer_switchTimeout", str(request.multiplexer_switch_timeout)),
    ]
    fields.extend(request.properties.items())
    return fields


def _check_response(response: httpx.Response) -> None:
    if response.is_success:
        return
    status_line = f"{response.status_code} {response.reason_phrase}"
    logger.warning("[session_client] create session failed: %s", status_line)
    raise AuthError(f"Request error: {status_line}", status_code=response.status_code)


class _SessionClientBase:
    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str | None = None,
    ) -> None:
        self.credentials = credentials
        # Mode is resolved up front so a bad configuration never reaches the network.
        self.base_url = (base_url or resolve_base_url(credentials.mode)).rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}{SESSION_CREATE_PATH}"

    def _headers(self) -> dict[str, str]:
        return {
            PARTNER_AUTH_HEADER: self.credentials.partner_auth,
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def _body(self, request: SessionCreateRequest) -> str:
        return encode_form(build_form_fields(self.credentials, request))

    def _to_session(self, response: httpx.Response) -> Session:
        _check_response(response)
        try:
            session = parse_session_response(response.content)
        except AuthError as exc:
            logger.warning("[session_client] server reported error: %s", exc)
            raise
        logger.info("[session_client] Session created: session_id=%s", session.session_id)
        return session


class SessionClient(_SessionClientBase):
    """
    Blocking client for ``/session/create``.

    Example:
        >>> with SessionClient(credentials) as client:
        ...     session = client.create_session(SessionCreateRequest(location="127.0.0.1"))
        ...     session.session_id
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(credentials, timeout=timeout, base_url=base_url)
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "SessionClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def create_session(self, request: SessionCreateRequest | None = None) -> Session:
        """
        Create a session on the platform.

        Raises:
            AuthError: non-2xx response or an ``Errors`` document from the server
            TransportError: no usable response (connection failure, timeout, redirect loop)
            ProtocolError: the body cannot be decoded or is not a recognisable XML document
        """
        request = request or SessionCreateRequest()
        logger.debug("[session_client] POST %s location=%s", self.url, request.location)
        try:
            response = self.client.post(self.url, content=self._body(request), headers=self._headers())
        except httpx.DecodingError as exc:
            logger.warning("[session_client] undecodable response from %s: %s", self.url, exc)
            raise ProtocolError(f"Failed to create session: invalid response from server ({exc})") from exc
        except httpx.RequestError as exc:
            logger.warning("[session_client] request to %s failed: %s", self.url, exc)
            raise TransportError(f"Request error: {exc}") from exc
        return self._to_session(response)


class AsyncSessionClient(_SessionClientBase):
    """Same contract as :class:`SessionClient` over ``httpx.AsyncClient``."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(credentials, timeout=timeout, base_url=base_url)
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncSessionClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def create_session(self, request: SessionCreateRequest | None = None) -> Session:
        request = request or SessionCreateRequest()
        logger.debug("[session_client] POST %s location=%s", self.url, request.location)
        try:
            response = await self.client.post(self.url, content=self._body(request), headers=self._headers())
        except httpx.DecodingError as exc:
            logger.warning("[session_client] undecodable response from %s: %s", self.url, exc)
            raise ProtocolError(f"Failed to create session: invalid response from server ({exc})") from exc
        except httpx.RequestError as exc:
            logger.warning("[session_client] request to %s failed: %s", self.url, exc)
            raise TransportError(f"Request error: {exc}") from exc
        return self._to_session(response)
