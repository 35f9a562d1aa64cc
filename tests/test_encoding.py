from opentok_api.services.encoding import encode_form, percent_encode


def test_space_and_ampersand_are_percent_encoded() -> None:
    assert percent_encode("a b&c") == "a%20b%26c"


def test_alphanumerics_pass_through() -> None:
    assert percent_encode("Az9") == "Az9"


def test_unreserved_punctuation_is_still_encoded() -> None:
    assert percent_encode("-._~") == "%2D%2E%5F%7E"


def test_non_ascii_encodes_each_utf8_byte() -> None:
    assert percent_encode("é") == "%C3%A9"


def test_ip_address_location() -> None:
    assert percent_encode("127.0.0.1") == "127%2E0%2E0%2E1"


def test_encode_form_encodes_values_only() -> None:
    body = encode_form([("api_key", "1127"), ("location", "a b"), ("empty", "")])
    assert body == "api_key=1127&location=a%20b&empty="
