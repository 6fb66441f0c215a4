from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    ("host", "expected"),
    [
        ("example.com", ("example.com", "")),
        ("example.com:80", ("example.com", "80")),
        ("example.com:", ("example.com:", "")),
        ("a:b:8080", ("a:b", "8080")),
        ("[2001:db8::1]:8443", ("2001:db8::1", "8443")),
        ("[2001:db8::1]", ("2001:db8::1", "")),
        ("[fe80::1%25eth0]:80", ("fe80::1%25eth0", "80")),
        ("[::1]]:80", ("::1]", "80")),
        ("", ("", "")),
    ],
)
def test_split_host(host, expected):
    from rawurl.utils import split_host

    assert split_host(host) == expected


def test_split_host_invalid():
    from rawurl import InvalidHostError
    from rawurl.utils import split_host

    with pytest.raises(InvalidHostError):
        split_host("[::1")


def test_build_request_uri():
    from rawurl.utils import build_request_uri

    assert build_request_uri("") == "/"
    assert build_request_uri("/a", "b=1") == "/a?b=1"
    assert build_request_uri("/a", "", "f") == "/a#f"
    assert build_request_uri("", "b", "f") == "/?b#f"


def test_to_bytes():
    from rawurl.utils import to_bytes

    assert to_bytes(b"raw") == b"raw"
    assert to_bytes("。。") == "。。".encode()
    assert to_bytes("\udcff") == b"\xff"
