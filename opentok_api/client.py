"""High-level entry point bundling credentials with token and session operations."""

from __future__ import annotations

import httpx

from opentok_api.config import DEFAULT_TIMEOUT_SECONDS, credentials_from_env, get_timeout
from opentok_api.models import Credentials, Mode, Role, Session, SessionCreateRequest, SwitchType, TokenRequest
from opentok_api.services.session_client import SessionClient
from opentok_api.services.token import generate_token


class OpenTokClient:
    """
    Partner-level client.

    Example:
        >>> ot = OpenTokClient("1127", "123456789sosecretcode123123123")
        >>> session = ot.create_session(location="127.0.0.1")
        >>> token = ot.generate_token(session_id=session.session_id, role=Role.MODERATOR)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        mode: Mode | str = Mode.DEVELOPMENT,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.credentials = Credentials(api_key=api_key, api_secret=api_secret, mode=mode)
        self.timeout = timeout
        self.base_url = base_url
        self._transport = transport

    @classmethod
    def from_env(cls, **kwargs) -> "OpenTokClient":
        """Build a client from OPENTOK_* environment variables."""
        credentials = credentials_from_env()
        kwargs.setdefault("timeout", get_timeout())
        return cls(credentials.api_key, credentials.api_secret, credentials.mode, **kwargs)

    def generate_token(
        self,
        session_id: str = "",
        role: Role | str = Role.PUBLISHER,
        expire_time: int | None = None,
    ) -> str:
        request = TokenRequest(session_id=session_id, role=role, expire_time=expire_time)
        return generate_token(self.credentials, request)

    def create_session(
        self,
        location: str = "",
        *,
        echo_suppression_enabled: bool = False,
        multiplexer_num_output_streams: int = 0,
        multiplexer_switch_type: SwitchType | int = SwitchType.TIMEOUT,
        multiplexer_switch_timeout: int = 5000,
        properties: dict[str, str] | None = None,
    ) -> Session:
        request = SessionCreateRequest(
            location=location,
            echo_suppression_enabled=echo_suppression_enabled,
            multiplexer_num_output_streams=multiplexer_num_output_streams,
            multiplexer_switch_type=multiplexer_switch_type,
            multiplexer_switch_timeout=multiplexer_switch_timeout,
            properties=properties or {},
        )
        with SessionClient(
            self.credentials,
            timeout=self.timeout,
            base_url=self.base_url,
            transport=self._transport,
        ) as client:
            return client.create_session(request)
