"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_FALLBACK_SCHEME


@dataclass(frozen=True)
class ParseOptions:
    """Options for :py:func:`rawurl.decompose`.

    :param fallback_scheme: A scheme to use when the URL has none (may be empty)
    :param allow_missing_scheme: Accept URLs without a scheme. When disabled
                                 :py:class:`rawurl.errors.MissingSchemeError` is raised.

    .. code-block:: python

        options = ParseOptions(fallback_scheme="http")
        url = decompose("example.com/..%2f", options)
        assert url.scheme == "http"

    """

    fallback_scheme: str = DEFAULT_FALLBACK_SCHEME
    allow_missing_scheme: bool = True


DEFAULT_OPTIONS = ParseOptions()
