"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""

from __future__ import annotations

from collections.abc import Generator, Mapping
from enum import Enum as _Enum, EnumMeta as _EnumMeta
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Literal, cast

from ._const import DOCS_BUILDING
from .errors import InvalidAccountType, InvalidUniverse

if TYPE_CHECKING:
    from typing_extensions import Never, Self

__all__ = (
    "Enum",
    "IntEnum",
    "Universe",
    "Type",
    "TypeChar",
    "OnlineState",
)


def _is_descriptor(obj: object, /) -> bool:
    """Returns True if obj is a descriptor, False otherwise."""
    return hasattr(obj, "__get__") or hasattr(obj, "__set__") or hasattr(obj, "__delete__")


class EnumDict(dict[str, Any]):
    """Required to detect the difference between:

    class MyEnum(steamidio.Enum):
        A = 1
        B = 2
        C = A  # this is an alias for A and not a new member
        D = 2  # this is a distinct member
    """

    def __init__(self):
        self.aliases: set[str] = set()

    def __getitem__(self, key: str) -> Any:
        self.aliases.add(key)
        return super().__getitem__(key)


class EnumType(_EnumMeta if TYPE_CHECKING else type):
    _value_map_: Mapping[Any, Enum]
    _member_map_: Mapping[str, Enum]  # type: ignore

    @classmethod
    def __prepare__(mcs, name: str, bases: tuple[type, ...]) -> EnumDict:  # type: ignore
        return EnumDict()

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: EnumDict) -> type[Enum]:
        value_map: dict[Any, Enum] = {}
        member_map: dict[str, Enum] = {}

        new_mcs: type[Self] = type(
            f"{name}Type",
            tuple(
                dict.fromkeys([base.__class__ for base in bases if base.__class__ is not type] + [EnumType, type])
            ),  # keep EnumType and type last so the generated metaclass has a consistent MRO
            {"_value_map_": value_map, "_member_map_": member_map},
        )  # type: ignore

        members = {name: value for name, value in namespace.items() if not _is_descriptor(value) and name[0] != "_"}

        cls = cast(
            "type[Enum]",
            type.__new__(new_mcs, name, bases, {key: value for key, value in namespace.items() if key not in members}),
        )

        for name, value in members.items():
            if (member := value_map.get(value)) is None or member.name not in namespace.aliases:
                member = cls._new_member(name=name, value=value)
                value_map[value] = member

            member_map[name] = member
            type.__setattr__(new_mcs, name, member)

        return cls

    if not TYPE_CHECKING:

        def __iter__(cls) -> Generator[Enum, None, None]:
            yield from cls._member_map_.values()

        def __getitem__(cls, key: str) -> Enum:
            return cls._member_map_[key]

        @property
        def __members__(cls) -> MappingProxyType[str, Enum]:
            return MappingProxyType(cls._member_map_)

    def __repr__(cls) -> str:
        return f"<enum {cls.__name__!r}>"

    def __len__(cls) -> int:
        return len(cls._member_map_)

    def __setattr__(cls, name: str, value: Any) -> Never:
        if name.startswith("__") and name.endswith("__"):
            return super().__setattr__(name, value)  # type: ignore
        raise AttributeError(f"{cls.__name__}: cannot reassign Enum members.")

    def __delattr__(cls, name: str) -> Never:
        raise AttributeError(f"{cls.__name__}: cannot delete Enum members.")

    def __contains__(cls, member: object) -> bool:
        return isinstance(member, Enum) and isinstance(member, cls) and member.name in cls._member_map_


# pretending these are enum subclasses makes things much nicer for linters as enums have custom behaviour you can't
# replicate in the current type system
class Enum(_Enum if TYPE_CHECKING else object, metaclass=EnumType):
    """A general enumeration, emulates `enum.Enum`."""

    _member_map_: Mapping[str, Self]
    _value_map_: Mapping[Any, Self]
    _display_names_: ClassVar[Mapping[str, str]] = MappingProxyType({})

    def __new__(cls, value: Any) -> Self:
        try:
            return cls._value_map_[value]
        except (KeyError, TypeError):
            raise ValueError(f"{value!r} is not a valid {cls.__name__}") from None

    @classmethod
    def _new_member(cls, *, name: str, value: Any) -> Self:
        self = (
            super().__new__(cls, value)
            if any(not issubclass(base, Enum) for base in cls.__mro__[:-1])  # is it is a mixin enum
            else super().__new__(cls)  # type: ignore
        )
        super().__setattr__(self, "name", name)
        super().__setattr__(self, "value", value)

        return self

    if not DOCS_BUILDING:

        def __setattr__(self, key: str, value: Any) -> Never:
            raise AttributeError(f"Cannot reassign {self.__class__.__name__} members attribute's.")

        def __delattr__(self, item: Any) -> Never:
            raise AttributeError(f"Cannot delete {self.__class__.__name__} attribute's.")

    def __bool__(self) -> Literal[True]:
        return True  # an enum member with a zero value would return False otherwise

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"

    @property
    def display_name(self) -> str:
        """The human readable name of the member."""
        return self._display_names_.get(self.name, self.name)


class IntEnum(Enum, int):
    """An enumeration where all the values are integers, emulates `enum.IntEnum`."""

    if TYPE_CHECKING:

        def __new__(cls, value: int) -> Self: ...


# fmt: off
class Universe(IntEnum):
    """Steam universes. Each universe is a self-contained Steam instance."""
    IndividualOrUnspecified = 0
    """An individual account or an unspecified universe."""
    Public                  = 1
    """The standard public universe."""
    Beta                    = 2
    """Beta universe used inside Valve."""
    Internal                = 3
    """Internal universe used inside Valve."""
    Developer               = 4
    """Dev universe used inside Valve."""
    RC                      = 5
    """Release candidate universe."""

    _display_names_ = MappingProxyType({"IndividualOrUnspecified": "Individual or unspecified"})

    @classmethod
    def from_value(cls, value: int, /) -> Self:
        """Get the universe for ``value``.

        Raises
        ------
        :exc:`.InvalidUniverse`
            ``value`` isn't a known universe.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidUniverse(value) from None


class Type(IntEnum):
    """Steam account types."""
    Invalid        = 0
    """Used for invalid Steam IDs."""
    Individual     = 1
    """Single user account."""
    Multiseat      = 2
    """Multiseat (e.g. cybercafe) account."""
    GameServer     = 3
    """Game server account registered with Steam."""
    AnonGameServer = 4
    """Anonymous game server account."""
    Pending        = 5
    """Account pending approval."""
    ContentServer  = 6
    """Valve internal content server account."""
    Clan           = 7
    """Steam clan."""
    Chat           = 8
    """Steam group chat or lobby."""
    P2PSuperSeeder = 9
    """Peer to peer super seeder account."""
    AnonUser       = 10
    """Anonymous user account. (Used to create an account or reset a password)"""

    _display_names_ = MappingProxyType({
        "GameServer": "Game server",
        "AnonGameServer": "Anonymous game server",
        "ContentServer": "Content server",
        "P2PSuperSeeder": "Peer to peer superseeder",
        "AnonUser": "Anonymous user",
    })

    @classmethod
    def from_value(cls, value: int, /) -> Self:
        """Get the account type for ``value``.

        Raises
        ------
        :exc:`.InvalidAccountType`
            ``value`` isn't a known account type.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidAccountType(value) from None


class TypeChar(IntEnum):
    """Steam account type characters used by the ID3 format."""
    I = Type.Invalid
    """The character used for :class:`~steamidio.Type.Invalid`."""
    U = Type.Individual
    """The character used for :class:`~steamidio.Type.Individual`."""
    M = Type.Multiseat
    """The character used for :class:`~steamidio.Type.Multiseat`."""
    G = Type.GameServer
    """The character used for :class:`~steamidio.Type.GameServer`."""
    A = Type.AnonGameServer
    """The character used for :class:`~steamidio.Type.AnonGameServer`."""
    P = Type.Pending
    """The character used for :class:`~steamidio.Type.Pending`."""
    C = Type.ContentServer
    """The character used for :class:`~steamidio.Type.ContentServer`."""
    g = Type.Clan
    """The character used for :class:`~steamidio.Type.Clan`."""
    T = Type.Chat
    """The character used for :class:`~steamidio.Type.Chat`."""
    L = Type.Chat
    """The character used for :class:`~steamidio.Type.Chat` (Chat lobby)."""
    c = Type.Chat
    """The character used for :class:`~steamidio.Type.Chat` (Clan chat)."""
    a = Type.AnonUser
    """The character used for :class:`~steamidio.Type.AnonUser`."""

    @classmethod
    def to_type(cls, char: str, /) -> Type:
        """Get the account type that ``char`` stands for.

        Raises
        ------
        :exc:`.InvalidAccountType`
            ``char`` isn't exactly one known type character.
        """
        if len(char) != 1:
            raise InvalidAccountType(char)
        try:
            return Type(cls[char].value)
        except KeyError:
            raise InvalidAccountType(char) from None


class OnlineState(Enum):
    """The online state of a user as reported by steamid.co."""
    Offline = "offline"
    """The user is not currently logged on."""
    Online  = "online"
    """The user is logged on."""
    InGame  = "in-game"
    """The user is playing a game."""
    Other   = "other"
    """Any other state."""

    _display_names_ = MappingProxyType({"InGame": "In game"})

    @classmethod
    def try_value(cls, value: Any, /) -> OnlineState:
        """Get the state for ``value``, :attr:`Other` if it isn't a known state."""
        try:
            return cls._value_map_[value]
        except (KeyError, TypeError):
            return cls.Other
# fmt: on
