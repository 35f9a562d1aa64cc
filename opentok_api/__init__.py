"""Python client for the OpenTok (TokBox) server API: tokens and session creation."""

from .errors import (
    AuthError,
    ConfigurationError,
    OpenTokError,
    ProtocolError,
    RequestError,
    TransportError,
)
from .config import API_SERVERS, API_VERSION, credentials_from_env, resolve_base_url
from .models import (
    Credentials,
    Mode,
    Role,
    Session,
    SessionCreateRequest,
    SwitchType,
    TokenRequest,
)
from .services import AsyncSessionClient, SessionClient, generate_token, percent_encode
from .client import OpenTokClient

__version__ = "0.2.0"

__all__ = [
    "OpenTokClient",
    "SessionClient",
    "AsyncSessionClient",
    "generate_token",
    "percent_encode",
    "credentials_from_env",
    "resolve_base_url",
    "API_SERVERS",
    "API_VERSION",
    "Credentials",
    "Mode",
    "Role",
    "TokenRequest",
    "Session",
    "SessionCreateRequest",
    "SwitchType",
    "OpenTokError",
    "ConfigurationError",
    "RequestError",
    "AuthError",
    "TransportError",
    "ProtocolError",
]
