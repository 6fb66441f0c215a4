""" RawURL -- Split and rebuild URLs without normalizing them """
from __future__ import annotations

from .errors import (
    EmptyInputError,
    InvalidComponentError,
    InvalidHostError,
    MissingSchemeError,
    RawURLError,
)
from .options import ParseOptions
from .parser import decompose, is_opaque_scheme, parse
from .url import Component, RawURL, Userinfo, update

__all__ = (
    # Errors
    "EmptyInputError",
    "InvalidComponentError",
    "InvalidHostError",
    "MissingSchemeError",
    "RawURLError",
    # Parsing
    "ParseOptions",
    "decompose",
    "is_opaque_scheme",
    "parse",
    # URL
    "Component",
    "RawURL",
    "Userinfo",
    "update",
)
