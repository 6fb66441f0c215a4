"""Split raw URLs into components without normalizing them.

Nothing is decoded, collapsed or lower-cased: `..%2f`, repeated slashes and
unicode payloads reach the result as they were given.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Optional

from .constants import SCHEME_DELIMITER
from .errors import EmptyInputError, MissingSchemeError
from .logs import logger
from .options import DEFAULT_OPTIONS, ParseOptions
from .url import RawURL, Userinfo
from .utils import build_request_uri

AUTHORITY_END_RE = re.compile(r"[/?#]")

# `localhost:8080` or `localhost:8080/path` is a host with a port
PORT_LIKE_RE = re.compile(r"[0-9]+(?:[/?#]|\Z)")

# A scheme candidate with one of these is a host (`192.168.1.1:80`, `a.b:c`)
NOT_A_SCHEME_CHARS = frozenset("/.?#@[")


def is_opaque_scheme(prefix: str, rest: str) -> bool:
    """Check that `prefix:rest` is an opaque URL (`mailto:user@example.com`).

    The check is a heuristic: the prefix must not look like a host and the
    rest must not look like a port.

    A digit run after the colon is always taken for a port, so `tel:5551234`
    is parsed as the host `tel:5551234` and not as an opaque URL, while
    `tel:+1-555-1234` is opaque.
    """
    if not prefix or not NOT_A_SCHEME_CHARS.isdisjoint(prefix):
        return False

    return PORT_LIKE_RE.match(rest) is None


def split_authority(rest: str) -> tuple[str, str]:
    """Split the given string at the first `/`, `?` or `#`."""
    match = AUTHORITY_END_RE.search(rest)
    if match is None:
        return rest, ""

    return rest[: match.start()], rest[match.start() :]


def split_userinfo(authority: str) -> tuple[Optional[Userinfo], str]:
    """Split the given authority at the first `@`."""
    userinfo, at, host = authority.partition("@")
    if not at:
        return None, authority

    username, colon, password = userinfo.partition(":")
    return Userinfo(username, password, password_set=bool(colon)), host


def decompose(raw: str, options: Optional[ParseOptions] = None, **opts) -> RawURL:
    """Parse the given string into a :py:class:`rawurl.RawURL`.

    :param raw: An URL to parse
    :param options: Parser options (:py:class:`rawurl.ParseOptions`)
    :param opts: Options to override, ex. `fallback_scheme="http"`

    .. code-block:: python

        url = decompose("https://example.com/a?b=1#c?d=2")
        assert url.query == "b=1"
        assert url.fragment == "c?d=2"

    """
    if not raw:
        raise EmptyInputError("Cannot parse an empty URL")

    options = options or DEFAULT_OPTIONS
    if opts:
        options = replace(options, **opts)

    scheme, delimiter, rest = raw.partition(SCHEME_DELIMITER)
    if not delimiter:
        prefix, colon, opaque = raw.partition(":")
        if colon and is_opaque_scheme(prefix, opaque):
            logger.debug("Parse an opaque URL: %r", raw)
            return RawURL(raw, scheme=prefix, opaque=opaque)

        if not options.allow_missing_scheme:
            raise MissingSchemeError(f"No scheme found: {raw!r}")

        logger.debug("Use fallback scheme %r for %r", options.fallback_scheme, raw)
        scheme, rest = options.fallback_scheme, raw

    authority, rest = split_authority(rest)
    userinfo, host = split_userinfo(authority)

    rest, _, fragment = rest.partition("#")
    path, _, query = rest.partition("?")

    return RawURL(
        raw,
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        path=path,
        query=query,
        fragment=fragment,
        raw_request_uri=build_request_uri(path, query, fragment),
    )


parse = decompose
