"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""

from __future__ import annotations

from typing import TypedDict

from typing_extensions import NotRequired

from .id import JSONID


class SteamCoProfile(TypedDict):
    steamID64: JSONID
    steamID: str  # the persona name, not an ID
    onlineState: str
    stateMessage: str
    vacBanned: str | int | bool
    memberSince: str
    # not read by steamidio
    privacyState: NotRequired[str]
    visibilityState: NotRequired[str]
    avatarIcon: NotRequired[str]
    avatarMedium: NotRequired[str]
    avatarFull: NotRequired[str]
    tradeBanState: NotRequired[str]
    isLimitedAccount: NotRequired[str]
    customURL: NotRequired[str]
    hoursPlayed2Wk: NotRequired[str]
    location: NotRequired[str]
    realname: NotRequired[str]
    summary: NotRequired[str]
