"""
Various constants/types for use around the library.

Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE
"""

from __future__ import annotations

import builtins
from collections.abc import Callable
from functools import partial
from typing import Any, Final, cast, final

from yarl import URL as _URL

DOCS_BUILDING: bool = getattr(builtins, "__sphinx__", False)

try:
    import orjson  # type: ignore
except ModuleNotFoundError:
    import json

    json_loads = json.loads

    @partial(cast, Callable[[Any], str])
    def json_dumps(
        obj: Any,
        __func: Callable[..., str] = json.dumps,
        /,
    ) -> str:
        return __func(obj, separators=(",", ":"), ensure_ascii=True)

else:
    json_loads = orjson.loads

    @partial(cast, Callable[[Any], str])
    def json_dumps(
        obj: Any,
        __func: Callable[[Any], bytes] = orjson.dumps,  # type: ignore
        __decoder: Callable[[bytes], str] = bytes.decode,
        /,
    ) -> str:
        return __decoder(__func(obj))


JSON_LOADS: Final = cast(Callable[[str | bytes], Any], json_loads)
JSON_DUMPS: Final = json_dumps


@final
class URL:
    STEAMID_CO: Final = _URL("http://steamid.co")


# the widths of the fields of a 64-bit Steam ID from the most significant bit to the least
UNIVERSE_BITS: Final = 8
TYPE_BITS: Final = 4
INSTANCE_BITS: Final = 20
ACCOUNT_BITS: Final = 31
AUTH_SERVER_BITS: Final = 1

# steamid.co and the community pages set these when the real values are unknown
DEFAULT_TYPE: Final = 1
DEFAULT_INSTANCE: Final = 1
