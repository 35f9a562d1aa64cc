"""Strict percent-encoding for the create-session form body."""

from __future__ import annotations

from collections.abc import Iterable

_UNRESERVED = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")


def percent_encode(value: str) -> str:
    """
    Percent-encode every UTF-8 byte outside ``[A-Za-z0-9]``.

    Unlike form encoding, a space becomes ``%20`` (never ``+``) and ``-._~``
    are escaped too.
    """
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in value.encode("utf-8")
    )


def encode_form(fields: Iterable[tuple[str, str]]) -> str:
    """Join ``name=value`` pairs with ``&``; only values are encoded."""
    return "&".join(f"{name}={percent_encode(value)}" for name, value in fields)
