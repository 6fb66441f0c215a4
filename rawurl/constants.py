from __future__ import annotations

from typing import Final

SCHEME_DELIMITER: Final = "://"
DEFAULT_FALLBACK_SCHEME: Final = "https"

BASE_ENCODING: Final = "utf-8"
# Keep undecodable bytes (surrogates) round-trippable
ENCODING_ERRORS: Final = "surrogateescape"

DEFAULT_USER_AGENT: Final = "RawURL"
