"""RawURL Utils."""

from __future__ import annotations

from typing import Union

from multidict import MultiDict

from .constants import BASE_ENCODING, ENCODING_ERRORS
from .errors import InvalidHostError


def is_port(value: str) -> bool:
    """Check that the given value is a non-empty run of ASCII digits."""
    return value.isascii() and value.isdigit()


def split_host(host: str) -> tuple[str, str]:
    """Split the given host literal into a hostname and a port.

    IPv6 literals lose their brackets in the hostname. A suffix which is not a
    valid port stays a part of the hostname.

    .. code-block:: python

        assert split_host("[2001:db8::1]:8443") == ("2001:db8::1", "8443")
        assert split_host("host:abc") == ("host:abc", "")

    """
    if host.startswith("["):
        end = host.rfind("]")
        if end == -1:
            raise InvalidHostError(f"Unclosed IPv6 literal: {host!r}")

        suffix = host[end + 1 :]
        port = suffix[1:] if suffix.startswith(":") and is_port(suffix[1:]) else ""
        return host[1:end], port

    hostname, colon, port = host.rpartition(":")
    if colon and is_port(port):
        return hostname, port

    return host, ""


def parse_query(query: str) -> MultiDict[str]:
    """Split the given query string into a multidict. Nothing is decoded."""
    values: MultiDict[str] = MultiDict()
    for pair in query.split("&"):
        if not pair:
            continue

        key, _, value = pair.partition("=")
        values.add(key, value)

    return values


def display_path(path: str) -> str:
    """Return the given path, an empty path is shown as `/`.

    This is the only place where a path is normalized.
    """
    return path or "/"


def build_request_uri(path: str, query: str = "", fragment: str = "") -> str:
    """Join the given parts into `path?query#fragment`."""
    uri = display_path(path)
    if query:
        uri = f"{uri}?{query}"
    if fragment:
        uri = f"{uri}#{fragment}"
    return uri


def to_bytes(value: Union[str, bytes]) -> bytes:
    """Encode the given value keeping any smuggled raw bytes."""
    if isinstance(value, bytes):
        return value
    return value.encode(BASE_ENCODING, ENCODING_ERRORS)
