"""Send parsed URLs without a second round of normalization.

Standard HTTP stacks re-quote and collapse paths. The helpers below put
:py:attr:`rawurl.RawURL.request_uri` on the wire as it is.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional, Union

from multidict import CIMultiDict
from yarl import URL

from .constants import DEFAULT_USER_AGENT
from .utils import to_bytes

if TYPE_CHECKING:
    from .types import TASGIScope, THeaders
    from .url import RawURL


def request_line(url: RawURL, method: str = "GET", http_version: str = "1.1") -> bytes:
    """Build a HTTP request line: `GET /..%2f/etc/passwd HTTP/1.1\\r\\n`."""
    return to_bytes(f"{method} {url.request_uri} HTTP/{http_version}\r\n")


def build_request(
    url: RawURL,
    method: str = "GET",
    headers: Optional[THeaders] = None,
    body: Union[str, bytes] = b"",
    http_version: str = "1.1",
) -> bytes:
    """Build a raw HTTP/1.x request for the given URL.

    .. code-block:: python

        url = decompose("http://example.com/x/..;/admin")
        sock.sendall(build_request(url, headers={"X-Forwarded-For": "127.0.0.1"}))

    """
    ci_headers = CIMultiDict(headers or {})
    ci_headers.setdefault("Host", url.host)

    body = to_bytes(body)
    if body:
        ci_headers.setdefault("Content-Length", str(len(body)))

    head = [request_line(url, method, http_version)]
    head.extend(to_bytes(f"{name}: {value}\r\n") for name, value in ci_headers.items())
    head.append(b"\r\n")
    return b"".join(head) + body


def build_scope(
    url: RawURL,
    method: str = "GET",
    headers: Optional[THeaders] = None,
    **scope,
) -> TASGIScope:
    """Prepare an ASGI HTTP scope for the given URL.

    `raw_path` and `query_string` are taken from :py:attr:`rawurl.RawURL.request_uri`,
    so an override is respected.
    """
    ci_headers = CIMultiDict(headers or {})
    ci_headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
    ci_headers.setdefault("Host", url.host)

    target, _, _ = url.request_uri.partition("#")
    path, _, query = target.partition("?")

    scope.setdefault("client", ("127.0.0.1", random.randint(1024, 65535)))  # noqa: S311

    return dict(
        {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method,
            "path": path,
            "query_string": to_bytes(query),
            "raw_path": to_bytes(path),
            "root_path": "",
            "scheme": url.scheme or "http",
            "headers": [
                (to_bytes(name.lower()), to_bytes(str(value))) for name, value in ci_headers.items()
            ],
            "server": (url.hostname, int(url.port) if url.port else None),
        },
        **scope,
    )


def to_yarl(url: RawURL) -> URL:
    """Convert the given URL to :py:class:`yarl.URL` without quoting it again."""
    if url.is_opaque:
        return URL.build(scheme=url.scheme, path=url.opaque or "", encoded=True)

    userinfo = url.userinfo
    return URL.build(
        scheme=url.scheme,
        user=userinfo.username if userinfo else None,
        password=userinfo.password if userinfo and userinfo.password_set else None,
        host=f"[{url.hostname}]" if url.host.startswith("[") else url.hostname,
        port=int(url.port) if url.port else None,
        path=url.display_path,
        query_string=url.query,
        fragment=url.fragment,
        encoded=True,
    )
