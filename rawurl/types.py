from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Union

from multidict import CIMultiDict

TASGIScope = MutableMapping[str, Any]
THeaders = Union[Mapping[str, str], CIMultiDict[str]]
