from .credentials import Credentials, Mode
from .session import Session, SessionCreateRequest, SwitchType
from .token import Role, TokenRequest

__all__ = [
    "Credentials",
    "Mode",
    "Role",
    "TokenRequest",
    "Session",
    "SessionCreateRequest",
    "SwitchType",
]
