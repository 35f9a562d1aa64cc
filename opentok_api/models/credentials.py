from dataclasses import dataclass, field
from enum import StrEnum

from opentok_api.errors import ConfigurationError


class Mode(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


@dataclass(frozen=True)
class Credentials:
    api_key: str                             # partner key issued by the platform
    api_secret: str = field(repr=False)      # partner secret, used for signing
    mode: Mode = Mode.DEVELOPMENT

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_secret:
            raise ConfigurationError("api_key and api_secret are required")
        try:
            mode = Mode(self.mode)
        except ValueError:
            raise ConfigurationError(f"Unknown OpenTok mode: {self.mode!r}") from None
        object.__setattr__(self, "mode", mode)

    @property
    def partner_auth(self) -> str:
        """Value of the partner authentication header: ``<key>:<secret>``."""
        return f"{self.api_key}:{self.api_secret}"
