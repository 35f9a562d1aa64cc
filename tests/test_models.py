import copy
from dataclasses import asdict

import pytest
from pydantic import ValidationError

from opentok_api import (
    ConfigurationError,
    Credentials,
    Mode,
    Role,
    Session,
    SessionCreateRequest,
    SwitchType,
    TokenRequest,
)


def test_credentials_defaults_to_development() -> None:
    credentials = Credentials(api_key="1127", api_secret="secret")
    assert credentials.mode is Mode.DEVELOPMENT
    assert credentials.partner_auth == "1127:secret"


def test_credentials_coerces_mode_string() -> None:
    assert Credentials(api_key="k", api_secret="s", mode="production").mode is Mode.PRODUCTION


def test_credentials_unknown_mode_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="sandbox"):
        Credentials(api_key="k", api_secret="s", mode="sandbox")


@pytest.mark.parametrize(("api_key", "api_secret"), [("", "s"), ("k", "")])
def test_credentials_require_key_and_secret(api_key: str, api_secret: str) -> None:
    with pytest.raises(ConfigurationError):
        Credentials(api_key=api_key, api_secret=api_secret)


def test_credentials_are_immutable_and_hide_secret() -> None:
    credentials = Credentials(api_key="k", api_secret="topsecret")
    with pytest.raises(AttributeError):
        credentials.api_key = "other"  # type: ignore[misc]
    assert "topsecret" not in repr(credentials)


def test_token_request_defaults() -> None:
    request = TokenRequest()
    assert request.session_id == ""
    assert request.role is Role.PUBLISHER
    assert request.expire_time is None


def test_token_request_rejects_unknown_role() -> None:
    with pytest.raises(ValidationError):
        TokenRequest(role="admin")


def test_session_create_request_defaults() -> None:
    request = SessionCreateRequest()
    assert request.location == ""
    assert request.echo_suppression_enabled is False
    assert request.multiplexer_num_output_streams == 0
    assert request.multiplexer_switch_type is SwitchType.TIMEOUT
    assert request.multiplexer_switch_timeout == 5000
    assert request.properties == {}


def test_session_create_request_validates_ranges() -> None:
    with pytest.raises(ValidationError):
        SessionCreateRequest(multiplexer_num_output_streams=-1)
    with pytest.raises(ValidationError):
        SessionCreateRequest(multiplexer_switch_type=2)


def test_session_create_request_cannot_override_api_key() -> None:
    with pytest.raises(ValidationError):
        SessionCreateRequest(properties={"api_key": "someone-else"})


def test_session_create_request_is_frozen() -> None:
    request = SessionCreateRequest()
    with pytest.raises(ValidationError):
        request.location = "10.0.0.1"


def test_session_properties_are_read_only() -> None:
    session = Session.from_properties({"session_id": "XYZ", "partner_id": "1127"})
    assert session.session_id == "XYZ"
    with pytest.raises(TypeError):
        session.properties["session_id"] = "other"  # type: ignore[index]


def test_sessions_compare_by_value() -> None:
    a = Session.from_properties({"session_id": "XYZ"})
    b = Session.from_properties({"session_id": "XYZ"})
    assert a == b
    assert hash(a) == hash(b)
    assert a != Session.from_properties({"session_id": "ABC"})


@pytest.mark.parametrize("name", ["location", "multiplexer_switchType", "echoSuppression_enabled"])
def test_session_create_request_rejects_fixed_field_names(name: str) -> None:
    with pytest.raises(ValidationError):
        SessionCreateRequest(properties={name: "1"})


@pytest.mark.parametrize("name", ["x=1&api_key", "a b", "", "p2p%2Epreference"])
def test_session_create_request_rejects_unsafe_field_names(name: str) -> None:
    with pytest.raises(ValidationError):
        SessionCreateRequest(properties={name: "evil"})


def test_session_create_request_accepts_dotted_names() -> None:
    request = SessionCreateRequest(properties={"p2p.preference": "enabled", "archive_mode": "manual"})
    assert request.properties["p2p.preference"] == "enabled"


def test_session_copies_and_converts_like_a_plain_value() -> None:
    session = Session.from_properties({"session_id": "XYZ", "partner_id": "1127"})
    assert copy.deepcopy(session) == session
    assert asdict(session) == {
        "session_id": "XYZ",
        "items": (("session_id", "XYZ"), ("partner_id", "1127")),
    }
    assert list(session.properties) == ["session_id", "partner_id"]
