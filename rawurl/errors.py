from __future__ import annotations


class RawURLError(Exception):
    """Base class for RawURL Errors."""


class EmptyInputError(RawURLError, ValueError):
    """Raise when an empty string is given to the parser."""


class MissingSchemeError(RawURLError, ValueError):
    """Raise when an URL has no scheme and a fallback scheme is not allowed."""


class InvalidHostError(RawURLError, ValueError):
    """Raise when an IPv6 literal is opened with `[` but never closed."""


class InvalidComponentError(RawURLError, ValueError):
    """Raise when an unknown (or inapplicable) URL component is updated."""
