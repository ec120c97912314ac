"""Licensed under The MIT License (MIT) - Copyright (c) 2020-present James H-B. See LICENSE"""

from __future__ import annotations

from typing import Any

__all__ = (
    "SteamIDException",
    "InvalidID",
    "InvalidUniverse",
    "InvalidAccountType",
    "FieldOutOfRange",
    "NumericParseFailure",
    "ProfileParseError",
)


class SteamIDException(Exception):
    """Base exception class for steamidio."""


class InvalidID(SteamIDException, ValueError):
    """Exception that's thrown when a Steam ID cannot be valid.

    Subclass of :exc:`SteamIDException` and :exc:`ValueError`.
    """

    def __init__(self, id: Any, msg: str | None = None):
        self.id = id
        """The invalid id."""
        super().__init__(f"{id!r} is not a valid Steam ID{f' as {msg}' if msg is not None else ''}")


class InvalidUniverse(InvalidID):
    """Exception that's thrown when a value doesn't represent a known :class:`.Universe`.

    Subclass of :exc:`InvalidID`.
    """

    def __init__(self, value: Any):
        self.value = value
        """The raw universe value."""
        super().__init__(value, "it is not a known universe")


class InvalidAccountType(InvalidID):
    """Exception that's thrown when a value or character doesn't represent a known :class:`.Type`.

    Subclass of :exc:`InvalidID`.
    """

    def __init__(self, value: Any):
        self.value = value
        """The raw account type value or character."""
        super().__init__(value, "it is not a known account type")


class FieldOutOfRange(InvalidID):
    """Exception that's thrown when a field is too wide to be packed into a 64-bit Steam ID.

    Subclass of :exc:`InvalidID`.
    """

    def __init__(self, field: str, value: Any, width: int):
        self.field = field
        """The name of the field."""
        self.value = value
        """The offending value."""
        self.width = width
        """The width in bits the field has to fit in."""
        super().__init__(value, f"{field} is bigger than {width} bits")


class NumericParseFailure(InvalidID):
    """Exception that's thrown when a numeric component of a Steam ID cannot be parsed.

    Subclass of :exc:`InvalidID`.
    """

    def __init__(self, text: str):
        self.text = text
        """The text that failed to parse."""
        super().__init__(text, "it cannot be parsed as an unsigned integer")


class ProfileParseError(SteamIDException):
    """Exception that's thrown when a profile payload is missing or has malformed fields.

    Subclass of :exc:`SteamIDException`.
    """

    def __init__(self, key: str, msg: str):
        self.key = key
        """The key in the payload that caused the failure."""
        super().__init__(f"Cannot parse profile field {key!r}: {msg}")
