from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Role(StrEnum):
    SUBSCRIBER = "subscriber"
    PUBLISHER = "publisher"
    MODERATOR = "moderator"


class TokenRequest(BaseModel):
    """
    Options for a single token.

    ``session_id`` left blank yields a token that is not bound to a session.
    ``expire_time`` is a unix timestamp; ``None`` or ``0`` lets the server apply
    its default (24 hours). The server rejects values more than seven days after
    creation.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = ""
    role: Role = Role.PUBLISHER
    expire_time: int | None = Field(default=None, ge=0)
