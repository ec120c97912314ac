"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""

from __future__ import annotations

import abc
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from typing_extensions import assert_never

from ._const import (
    ACCOUNT_BITS,
    AUTH_SERVER_BITS,
    DEFAULT_INSTANCE,
    DEFAULT_TYPE,
    INSTANCE_BITS,
    TYPE_BITS,
    UNIVERSE_BITS,
)
from .bits import BitIterator
from .enums import Type, TypeChar, Universe
from .errors import FieldOutOfRange, InvalidID, NumericParseFailure
from .types.id import U64, AccountID, AuthServer, Instance

if TYPE_CHECKING:
    from .types.id import JSONID


__all__ = (
    "ID",
    "ID64",
    "ID32",
    "ID3",
    "AnyID",
    "Info",
    "decode_id64",
    "encode_id64",
    "encode_id64_simple",
    "id3_to_id32",
    "id32_to_id3",
    "id64_to_id32",
    "id32_to_id64",
    "id3_to_id64",
    "id64_to_id3",
    "parse_id",
    "is_same",
)

log = logging.getLogger(__name__)

# format of a 64-bit steam ID:
# 0b0000000100010000000000000000000100000001010111111100001100001100
#   └───┰──┘└─┰┘└─────────┰────────┘└──────────────┰──────────────┘└┰ authentication server
#       │     │           │                        │                  (1 bit)
#   universe  └ type      └ instance               └ account
#   (8 bits)    (4 bits)    (20 bits)                (31 bits)
#   Public      Individual  1                        11526534

UINT_REGEX: Final = re.compile(r"\d+", re.ASCII)
ID32_REGEX: Final = re.compile(r"STEAM_(?P<universe>\d):(?P<server>\d):(?P<account>\d+)", re.ASCII)
ID3_REGEX: Final = re.compile(r"(?P<type>\w):(?P<server>\d+):(?P<account>\d+)", re.ASCII)


@dataclass(frozen=True, slots=True)
class Info:
    """The fields packed into a 64-bit Steam ID."""

    universe: Universe
    """The universe the ID belongs to."""
    type: Type
    """The type of the account."""
    instance: Instance
    """The account instance."""
    account: AccountID
    """The account number."""
    authentication_server: AuthServer
    """The authentication server used by the account, either ``0`` or ``1``."""


def _check_width(field: str, value: int, width: int) -> int:
    if not 0 <= value < 1 << width:
        raise FieldOutOfRange(field, value, width)
    return value


def _parse_uint(field: str, text: str, width: int) -> int:
    if UINT_REGEX.fullmatch(text) is None:
        raise NumericParseFailure(text)
    return _check_width(field, int(text), width)


def decode_id64(value: int, /) -> Info:
    """Decode the fields of a 64-bit Steam ID.

    Raises
    ------
    :exc:`.InvalidUniverse`
        The universe field isn't a known :class:`.Universe`.
    :exc:`.InvalidAccountType`
        The type field isn't a known :class:`.Type`.
    """
    bits = BitIterator(value, UNIVERSE_BITS)
    universe = Universe.from_value(next(bits))
    type = Type.from_value(bits.next_bits(TYPE_BITS, into=8))
    instance = bits.next_bits(INSTANCE_BITS, into=32)
    account = bits.next_bits(ACCOUNT_BITS, into=32)
    authentication_server = bits.next_bits(AUTH_SERVER_BITS, into=8)
    # the widths add up to 64 so none of the fields can run out of bits
    assert instance is not None and account is not None and authentication_server is not None
    return Info(
        universe=universe,
        type=type,
        instance=Instance(instance),
        account=AccountID(account),
        authentication_server=AuthServer(authentication_server),
    )


def encode_id64(
    universe: Universe | int,
    type: Type | int,
    instance: int,
    authentication_server: int,
    account: int,
) -> U64:
    """Pack the fields of a Steam ID into its 64-bit form.

    Parameters
    ----------
    universe
        The universe of the ID.
    type
        The account type of the ID.
    instance
        The instance of the ID, must fit in 20 bits.
    authentication_server
        The authentication server, must fit in 1 bit.
    account
        The account number, must fit in 31 bits.

    Raises
    ------
    :exc:`.FieldOutOfRange`
        A field is too wide for its place in the ID.
    :exc:`.InvalidUniverse`
        ``universe`` isn't a known :class:`.Universe`.
    :exc:`.InvalidAccountType`
        ``type`` isn't a known :class:`.Type`.
    """
    universe = Universe.from_value(_check_width("universe", universe, UNIVERSE_BITS))
    type = Type.from_value(_check_width("type", type, TYPE_BITS))
    _check_width("instance", instance, INSTANCE_BITS)
    _check_width("account", account, ACCOUNT_BITS)
    _check_width("authentication_server", authentication_server, AUTH_SERVER_BITS)

    binary = f"{universe:08b}{type:04b}{instance:020b}{account:031b}{authentication_server:b}"
    return U64(int(binary, 2))


def encode_id64_simple(universe: Universe | int, authentication_server: int, account: int) -> U64:
    """Pack a Steam ID using the values the community uses for the unknown fields.

    The type is :attr:`.Type.Individual` and the instance is ``1``.
    """
    return encode_id64(universe, DEFAULT_TYPE, DEFAULT_INSTANCE, authentication_server, account)


class ID(metaclass=abc.ABCMeta):
    """A Steam ID in one of its representations.

    The representations are :class:`ID64`, :class:`ID32` and :class:`ID3`.

    .. container:: operations

        .. describe:: x == y

            Checks if two IDs are the same representation holding the same value. Use :meth:`is_same` to compare the
            accounts they represent.

        .. describe:: hash(x)

            Returns the hash of the ID.

        .. describe:: str(x)

            Returns the decimal value of an :class:`ID64` or the text of an :class:`ID32` or :class:`ID3`.

        .. describe:: int(x)

            Returns the 64-bit value of the ID.

        .. describe:: format(x, format_spec)

            Prefixes of ``64`` and ``32`` can be used to format the 64-bit value or its account number, whichever format
            the ID is in. Anything after the prefix is passed to :func:`format`.

            .. code-block:: pycon

                >>> format(steam_id, "64x")
                "1100001015fc30c"
    """

    __slots__ = ()

    def __str__(self) -> str:
        return str(self.value)  # type: ignore

    def __int__(self) -> int:
        return self.id64().value

    def __format__(self, format_spec: str, /) -> str:
        match format_spec[:2]:
            case "":
                return str(self)
            case "64":
                return format(self.id64().value, format_spec[2:])
            case "32":
                return format(self.id64().info().account, format_spec[2:])
            case _:
                raise ValueError(f"Unknown format specifier {format_spec!r}")

    @abc.abstractmethod
    def info(self) -> Info:
        """The fields of this ID."""
        raise NotImplementedError

    def id64(self) -> ID64:
        """Convert this ID to an :class:`ID64`. Returns itself if it already is one."""
        return to_id64(self)  # type: ignore

    def id32(self) -> ID32:
        """Convert this ID to an :class:`ID32`. Returns itself if it already is one."""
        return to_id32(self)  # type: ignore

    def id3(self) -> ID3:
        """Convert this ID to an :class:`ID3`. Returns itself if it already is one."""
        return to_id3(self)  # type: ignore

    def is_same(self, other: ID, /) -> bool:
        """Whether this ID and ``other`` represent the same account, whatever their formats.

        Both are converted to :class:`ID64` to be compared.

        Raises
        ------
        :exc:`.InvalidID`
            Either ID cannot be converted.
        """
        return self.id64() == other.id64()

    def to_json(self) -> int:
        """The value used to serialize this ID, which is always the 64-bit value."""
        return self.id64().value

    @staticmethod
    def parse(value: str, /) -> AnyID:
        """Parse an ID from text. See :func:`parse_id`."""
        return parse_id(value)

    @staticmethod
    def from_int(value: int, /) -> ID64:
        """Create an :class:`ID64` from ``value`` checking that its fields decode.

        Raises
        ------
        :exc:`.InvalidID`
            ``value`` isn't a valid 64-bit Steam ID.
        """
        id = ID64(value)
        id.info()
        return id

    @staticmethod
    def from_json(value: JSONID, /) -> AnyID:
        """Deserialize an ID from a JSON integer or a string in any of the formats.

        Raises
        ------
        :exc:`.InvalidID`
            ``value`` isn't an ID.
        """
        if isinstance(value, bool):
            raise InvalidID(value, "it is a boolean")
        if isinstance(value, int):
            return ID64(value)
        if isinstance(value, str):
            return parse_id(value)
        raise InvalidID(value, "it is not an integer or a string")


@dataclass(frozen=True, slots=True)
class ID64(ID):
    """A Steam ID in its single integer form.

    e.g. ``76561197983318796``.
    """

    value: int
    """The packed 64-bit value."""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidID(self.value, "it is not an integer")
        if not 0 <= self.value < 1 << 64:
            raise InvalidID(self.value, "it is not an unsigned 64-bit integer")

    def info(self) -> Info:
        """Decode the fields of this ID.

        Raises
        ------
        :exc:`.InvalidUniverse`
            The universe field isn't valid.
        :exc:`.InvalidAccountType`
            The type field isn't valid.
        """
        return decode_id64(self.value)

    @classmethod
    def from_info(cls, info: Info, /) -> ID64:
        """Pack ``info`` into an ID."""
        return cls(encode_id64(info.universe, info.type, info.instance, info.authentication_server, info.account))


@dataclass(frozen=True, slots=True)
class ID32(ID):
    """A Steam ID in the ``STEAM_X:Y:Z`` format, also called Steam ID 2.

    e.g. ``STEAM_0:0:11526534``.
    """

    value: str
    """The textual ID."""

    def info(self) -> Info:
        """Decode the fields of this ID by converting it to an :class:`ID64`."""
        return self.id64().info()


@dataclass(frozen=True, slots=True)
class ID3(ID):
    """A Steam ID in the ``T:S:A`` format, also called Steam ID 3.

    e.g. ``U:1:23053068``.
    """

    value: str
    """The textual ID."""

    def info(self) -> Info:
        """Get the fields of this ID as well as this format allows.

        Note
        ----
        This format has no universe so :attr:`Universe.IndividualOrUnspecified` is always used and the instance is
        always ``1``. The account is the number as written, not the 31-bit account of :class:`ID64`, and the
        authentication server is read as an 8-bit number so it can be more than ``1``. Converting to an :class:`ID64`
        first gives a more accurate result.

        Raises
        ------
        :exc:`.InvalidID`
            The ID doesn't have three components.
        :exc:`.InvalidAccountType`
            The type character isn't known.
        :exc:`.NumericParseFailure`
            A numeric component isn't an unsigned integer.
        """
        split = self.value.split(":")
        if len(split) != 3:
            raise InvalidID(self.value, "it doesn't have three components")
        type_char, server, account = split
        return Info(
            universe=Universe.IndividualOrUnspecified,
            type=TypeChar.to_type(type_char),
            instance=Instance(DEFAULT_INSTANCE),
            account=AccountID(_parse_uint("account", account, 32)),
            authentication_server=AuthServer(_parse_uint("authentication_server", server, 8)),
        )


AnyID: TypeAlias = ID64 | ID32 | ID3


def _match_id32(id: ID32) -> re.Match[str]:
    if (match := ID32_REGEX.fullmatch(id.value)) is None:
        raise InvalidID(id.value, "it is not in the ID32 format")
    return match


def _match_id3(id: ID3) -> re.Match[str]:
    if (match := ID3_REGEX.fullmatch(id.value)) is None:
        raise InvalidID(id.value, "it is not in the ID3 format")
    return match


def id3_to_id32(id: ID3, /) -> ID32:
    """Convert an :class:`ID3` to an :class:`ID32`.

    The type character is validated but otherwise ignored.
    """
    match = _match_id3(id)
    TypeChar.to_type(match["type"])
    _parse_uint("authentication_server", match["server"], 8)
    account = _parse_uint("account", match["account"], 32)
    return ID32(f"STEAM_0:{account % 2}:{account // 2}")


def id32_to_id3(id: ID32, /) -> ID3:
    """Convert an :class:`ID32` to an :class:`ID3`.

    The type is always :attr:`.Type.Individual`.
    """
    match = _match_id32(id)
    server = int(match["server"])
    account = _parse_uint("account", match["account"], 32)
    return ID3(f"{TypeChar.U.name}:1:{account * 2 + server}")


def id64_to_id32(id: ID64, /) -> ID32:
    """Convert an :class:`ID64` to an :class:`ID32`.

    Note
    ----
    The ``X`` of ``STEAM_X:Y:Z`` should be the universe but clients have always displayed ``0`` there, so ``0`` is
    used whatever the universe is.
    """
    info = id.info()
    return ID32(f"STEAM_0:{info.authentication_server}:{info.account}")


def id32_to_id64(id: ID32, /) -> ID64:
    """Convert an :class:`ID32` to an :class:`ID64`.

    Note
    ----
    A universe of ``0`` is treated as :attr:`.Universe.Public` as ``0`` is what clients display for it. The type is
    always :attr:`.Type.Individual` and the instance is always ``1``.
    """
    match = _match_id32(id)
    universe = int(match["universe"])
    if universe == 0:
        log.debug("Treating universe 0 of %r as Public", id.value)
        universe = Universe.Public
    server = int(match["server"])
    account = _parse_uint("account", match["account"], 32)
    return ID64(encode_id64_simple(Universe.from_value(universe), server, account))


def id3_to_id64(id: ID3, /) -> ID64:
    """Convert an :class:`ID3` to an :class:`ID64` by way of an :class:`ID32`."""
    return id32_to_id64(id3_to_id32(id))


def id64_to_id3(id: ID64, /) -> ID3:
    """Convert an :class:`ID64` to an :class:`ID3` by way of an :class:`ID32`."""
    return id32_to_id3(id64_to_id32(id))


def to_id64(id: AnyID, /) -> ID64:
    match id:
        case ID64():
            return id
        case ID32():
            return id32_to_id64(id)
        case ID3():
            return id3_to_id64(id)
        case _:
            assert_never(id)


def to_id32(id: AnyID, /) -> ID32:
    match id:
        case ID64():
            return id64_to_id32(id)
        case ID32():
            return id
        case ID3():
            return id3_to_id32(id)
        case _:
            assert_never(id)


def to_id3(id: AnyID, /) -> ID3:
    match id:
        case ID64():
            return id64_to_id3(id)
        case ID32():
            return id32_to_id3(id)
        case ID3():
            return id
        case _:
            assert_never(id)


def parse_id(value: str, /) -> AnyID:
    """Parse a Steam ID from any of its textual formats.

    Examples
    --------
    .. code:: python

        parse_id("76561197983318796")  # ID64
        parse_id("STEAM_0:0:11526534")  # ID32
        parse_id("U:1:23053068")  # ID3

    Raises
    ------
    :exc:`.InvalidID`
        ``value`` isn't in any of the formats.
    """
    if UINT_REGEX.fullmatch(value) is not None and (id64 := int(value)) < 1 << 64:
        return ID64(id64)
    if ID32_REGEX.fullmatch(value) is not None:
        return ID32(value)
    if ID3_REGEX.fullmatch(value) is not None:
        return ID3(value)
    log.debug("%r didn't match any Steam ID format", value)
    raise InvalidID(value, "it cannot be parsed")


def is_same(a: ID, b: ID, /) -> bool:
    """Whether ``a`` and ``b`` represent the same account. See :meth:`ID.is_same`."""
    return a.is_same(b)
