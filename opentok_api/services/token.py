"""Generate OpenTok connection tokens (``T1==`` + base64 signed payload)."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
import time

from opentok_api.config import API_VERSION, MAX_TOKEN_LIFETIME_SECONDS, TOKEN_PREFIX
from opentok_api.models import Credentials, TokenRequest

logger = logging.getLogger(__name__)

_NONCE_RANGE = 2147483647


def _make_nonce() -> str:
    # Uniqueness only; the HMAC is what the server trusts.
    return f"{time.time()}{secrets.randbelow(_NONCE_RANGE)}"


def build_query_string(request: TokenRequest, create_time: int, nonce: str) -> str:
    """
    Canonical string covered by the signature.

    Field order is fixed; ``expire_time`` is appended last and only when set.
    """
    query_string = (
        f"session_id={request.session_id}"
        f"&create_time={create_time}"
        f"&role={request.role.value}"
        f"&nonce={nonce}"
    )
    if request.expire_time:
        query_string += f"&expire_time={request.expire_time}"
    return query_string


def sign_string(query_string: str, secret: str) -> str:
    """Hex HMAC-SHA1 of ``query_string`` keyed with ``secret``."""
    return hmac.new(secret.encode("utf-8"), query_string.encode("utf-8"), hashlib.sha1).hexdigest()


def _check_expire_time(expire_time: int | None, create_time: int) -> None:
    if not expire_time:
        return
    if expire_time <= create_time:
        logger.warning("[token] expire_time=%s is not in the future; the server will reject this token", expire_time)
    elif expire_time - create_time > MAX_TOKEN_LIFETIME_SECONDS:
        logger.warning(
            "[token] expire_time=%s is more than 7 days after creation; the server will reject this token",
            expire_time,
        )


def generate_token(credentials: Credentials, request: TokenRequest | None = None) -> str:
    """
    Create a signed token for joining a session.

    Never touches the network. The token is opaque to this client and is
    handed to the browser/mobile SDK that connects to the session.
    """
    request = request or TokenRequest()
    create_time = int(time.time())
    nonce = _make_nonce()
    _check_expire_time(request.expire_time, create_time)

    query_string = build_query_string(request, create_time, nonce)
    signature = sign_string(query_string, credentials.api_secret)
    payload = (
        f"partner_id={credentials.api_key}"
        f"&sdk_version={API_VERSION}"
        f"&sig={signature}:{query_string}"
    )
    logger.debug("[token] Generated token session_id=%s role=%s", request.session_id, request.role.value)
    return TOKEN_PREFIX + base64.b64encode(payload.encode("utf-8")).decode("ascii")
