from __future__ import annotations


def test_types_available():
    from rawurl import types

    assert types.TASGIScope
    assert types.THeaders
