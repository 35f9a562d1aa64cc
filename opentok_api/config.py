"""Static endpoints, SDK constants and environment-based configuration."""

from __future__ import annotations

import os

from opentok_api.errors import ConfigurationError
from opentok_api.models.credentials import Credentials, Mode

API_VERSION = "tbpl-v0.01.2011-06-15"
TOKEN_PREFIX = "T1=="

API_SERVERS: dict[Mode, str] = {
    Mode.DEVELOPMENT: "https://staging.tokbox.com/hl",
    Mode.PRODUCTION: "https://api.opentok.com/hl",
}

SESSION_CREATE_PATH = "/session/create"
PARTNER_AUTH_HEADER = "X-TB-PARTNER-AUTH"

DEFAULT_TIMEOUT_SECONDS = 30.0
MAX_TOKEN_LIFETIME_SECONDS = 7 * 24 * 3600  # 7 days


def resolve_base_url(mode: Mode | str) -> str:
    """Base URL for a deployment mode; unknown modes fail fast."""
    try:
        return API_SERVERS[Mode(mode)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"Unknown OpenTok mode: {mode!r}") from None


def credentials_from_env() -> Credentials:
    """
    Build credentials from OPENTOK_API_KEY / OPENTOK_API_SECRET / OPENTOK_MODE.

    Mode defaults to "development" when unset or blank.
    """
    api_key = os.environ.get("OPENTOK_API_KEY", "").strip()
    api_secret = os.environ.get("OPENTOK_API_SECRET", "").strip()
    if not api_key or not api_secret:
        raise ConfigurationError(
            "OpenTok credentials not configured (OPENTOK_API_KEY / OPENTOK_API_SECRET)"
        )
    mode = os.environ.get("OPENTOK_MODE", "").strip() or Mode.DEVELOPMENT
    return Credentials(api_key=api_key, api_secret=api_secret, mode=mode)


def get_timeout() -> float:
    """Request timeout in seconds from OPENTOK_TIMEOUT, or the default."""
    raw = os.environ.get("OPENTOK_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"OPENTOK_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"OPENTOK_TIMEOUT must be positive, got {raw!r}")
    return timeout
