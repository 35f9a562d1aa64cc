import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Form fields the client always sends itself
RESERVED_FIELDS = frozenset({
    "api_key",
    "location",
    "echoSuppression_enabled",
    "multiplexer_numOutputStreams",
    "multiplexer_switchType",
    "multiplexer_switchTimeout",
})
_FIELD_NAME = re.compile(r"[A-Za-z0-9_.]+")


class SwitchType(IntEnum):
    TIMEOUT = 0
    ACTIVITY = 1


class SessionCreateRequest(BaseModel):
    """Parameters sent to ``/session/create``."""

    model_config = ConfigDict(frozen=True)

    # IP address used to place the session in the platform's network
    location: str = ""
    echo_suppression_enabled: bool = False
    multiplexer_num_output_streams: int = Field(default=0, ge=0)
    multiplexer_switch_type: SwitchType = SwitchType.TIMEOUT
    # milliseconds; the server raises anything below 2000 to 2000
    multiplexer_switch_timeout: int = Field(default=5000, ge=0)
    # extra form fields forwarded as-is
    properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("properties")
    @classmethod
    def _reject_reserved(cls, value: dict[str, str]) -> dict[str, str]:
        for name in value:
            if not _FIELD_NAME.fullmatch(name):
                raise ValueError(f"invalid form field name {name!r}; use letters, digits, '_' or '.'")
            if name in RESERVED_FIELDS:
                raise ValueError(f"{name} is set by the client and cannot be passed as a property")
        return value


@dataclass(frozen=True)
class Session:
    session_id: str | None
    items: tuple[tuple[str, str], ...] = ()   # every //Session/* element, in document order

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple((name, value) for name, value in self.items))

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "Session":
        return cls(session_id=properties.get("session_id"), items=tuple(properties.items()))

    @property
    def properties(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self.items))

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.properties.get(name, default)
