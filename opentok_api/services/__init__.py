from .encoding import encode_form, percent_encode
from .session_client import AsyncSessionClient, SessionClient
from .token import generate_token

__all__ = [
    "generate_token",
    "SessionClient",
    "AsyncSessionClient",
    "percent_encode",
    "encode_form",
]
