"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""
# NB: this is the only types file that is expected to importable at runtime
#     these are internal types and user's shouldn't ever have to use them for the public API

from typing import NewType as _NewType, TypeAlias as _TypeAlias

U64 = _NewType("U64", int)  # the packed 64-bit form of a Steam ID
AccountID = _NewType("AccountID", int)  # u31
Instance = _NewType("Instance", int)  # u20
AuthServer = _NewType("AuthServer", int)  # u1

JSONID: _TypeAlias = int | str  # what an ID can be deserialized from
