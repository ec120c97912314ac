"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from yarl import URL as _URL

from ._const import JSON_DUMPS, JSON_LOADS, URL
from .enums import OnlineState
from .errors import InvalidID, ProfileParseError
from .id import ID

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.profile import SteamCoProfile as SteamCoProfileDict


__all__ = (
    "SteamCoProfile",
    "build_profile_lookup_url",
)

log = logging.getLogger(__name__)

_TRUTHY: Final = frozenset({"1", "true"})
_FALSY: Final = frozenset({"0", "false"})


def build_profile_lookup_url(id: ID, /, *, host: str | None = None) -> str:
    """Build the URL of the steamid.co API call that looks up the profile of ``id``.

    e.g. ``http://steamid.co/php/api.php?action=steamID64&id=76561197983318796``.

    Parameters
    ----------
    id
        The ID to look up. It is converted to its 64-bit form.
    host
        The host name of the service, e.g. ``steamid.co``. Defaults to steamid.co. The URL is always ``http``.

    Raises
    ------
    :exc:`.InvalidID`
        ``id`` cannot be converted to an :class:`.ID64`.
    """
    base = URL.STEAMID_CO if host is None else _URL.build(scheme="http", host=host)
    url = base / "php" / "api.php"
    return str(url.with_query(action="steamID64", id=str(id.id64())))


def _bool_from_anything(key: str, value: Any) -> bool:
    match value:
        case bool():
            return value
        case int() | float() if value in (0, 1):
            return bool(value)
        case str() if value.strip().lower() in _TRUTHY:
            return True
        case str() if value.strip().lower() in _FALSY:
            return False
    raise ProfileParseError(key, f"{value!r} cannot be interpreted as a boolean")


def _str(data: Mapping[str, Any], key: str) -> str:
    try:
        value = data[key]
    except KeyError:
        raise ProfileParseError(key, "it is missing") from None
    if not isinstance(value, str):
        raise ProfileParseError(key, f"expected a string not {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class SteamCoProfile:
    """A Steam profile as returned by steamid.co.

    Only the fields below are read, everything else in the payload is ignored.
    """

    steam_id: ID
    """The Steam ID of the profile in whichever format it was sent in."""
    name: str
    """The persona name of the profile."""
    member_since: str
    """The date the account was created, as displayed on the profile."""
    online_state: OnlineState
    """The current online state of the user."""
    vac_banned: bool
    """Whether the account has a VAC ban."""
    state_message: str
    """The current state message, e.g. ``Last Online 8 hrs, 59 mins ago``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} steam_id={self.steam_id!r} name={self.name!r}>"

    @classmethod
    def from_dict(cls, data: SteamCoProfileDict | Mapping[str, Any], /) -> Self:
        """Create a profile from a decoded JSON payload.

        Raises
        ------
        :exc:`.ProfileParseError`
            A field is missing or has a value that cannot be interpreted.
        """
        try:
            raw_id = data["steamID64"]
        except KeyError:
            raise ProfileParseError("steamID64", "it is missing") from None
        try:
            steam_id = ID.from_json(raw_id)
        except InvalidID as exc:
            raise ProfileParseError("steamID64", str(exc)) from exc

        try:
            vac_banned = data["vacBanned"]
        except KeyError:
            raise ProfileParseError("vacBanned", "it is missing") from None

        profile = cls(
            steam_id=steam_id,
            name=_str(data, "steamID"),
            member_since=_str(data, "memberSince"),
            online_state=OnlineState.try_value(_str(data, "onlineState")),
            vac_banned=_bool_from_anything("vacBanned", vac_banned),
            state_message=_str(data, "stateMessage"),
        )
        log.debug("Parsed profile %r", profile)
        return profile

    @classmethod
    def from_json(cls, text: str | bytes, /) -> Self:
        """Create a profile from a JSON document. See :meth:`from_dict`."""
        data = JSON_LOADS(text)
        if not isinstance(data, Mapping):
            raise ProfileParseError("<root>", "expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the profile using the steamid.co keys.

        The Steam ID is always written as its 64-bit integer.
        """
        return {
            "steamID64": self.steam_id.to_json(),
            "steamID": self.name,
            "memberSince": self.member_since,
            "onlineState": self.online_state.value,
            "vacBanned": self.vac_banned,
            "stateMessage": self.state_message,
        }

    def to_json(self) -> str:
        """Serialize the profile to a JSON document. See :meth:`to_dict`."""
        return JSON_DUMPS(self.to_dict())
