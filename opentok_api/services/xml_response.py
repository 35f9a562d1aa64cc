"""Parse the XML document returned by ``/session/create``."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from opentok_api.errors import AuthError, ProtocolError
from opentok_api.models import Session


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find(root: ET.Element, name: str) -> ET.Element | None:
    for element in root.iter():
        if _local_name(element.tag) == name:
            return element
    return None


def _top_level(root: ET.Element, name: str) -> ET.Element | None:
    """The root element or one of its direct children named ``name``."""
    if _local_name(root.tag) == name:
        return root
    for child in root:
        if _local_name(child.tag) == name:
            return child
    return None


def _first_attribute(root: ET.Element, name: str) -> str | None:
    for element in root.iter():
        if name in element.attrib:
            return element.attrib[name]
    return None


def _raise_server_error(errors: ET.Element) -> None:
    code = _first_attribute(errors, "code") or ""
    message = _first_attribute(errors, "message") or "Unknown error"
    error_type = ""
    error = _find(errors, "error")
    if error is not None and len(error):
        error_type = _local_name(error[0].tag)
    raise AuthError(
        f"Error {code} {error_type}: {message}",
        code=code or None,
        error_type=error_type or None,
    )


def parse_session_response(body: bytes | str) -> Session:
    """
    Map a create-session response to a :class:`Session`.

    Every child element of every ``Session`` element becomes a property, keyed
    by its local name with its full text content as value. No field is
    required. An ``Errors`` document raises :class:`AuthError`.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ProtocolError(f"Failed to create session: invalid response from server ({exc})") from exc

    errors = _top_level(root, "Errors")
    if errors is not None:
        _raise_server_error(errors)

    properties: dict[str, str] = {}
    found = False
    for element in root.iter():
        if _local_name(element.tag) != "Session":
            continue
        found = True
        for child in element:
            properties[_local_name(child.tag)] = "".join(child.itertext())

    if not found:
        raise ProtocolError(
            f"Failed to create session: unexpected response from server (root element {_local_name(root.tag)!r})"
        )
    return Session.from_properties(properties)
