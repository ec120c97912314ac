"""
The MIT License (MIT)

Copyright (c) 2020 James

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from __future__ import annotations

import pytest

from steamidio import (
    ID,
    ID3,
    ID32,
    ID64,
    FieldOutOfRange,
    Info,
    InvalidAccountType,
    InvalidID,
    InvalidUniverse,
    NumericParseFailure,
    Type,
    Universe,
    decode_id64,
    encode_id64,
    encode_id64_simple,
    is_same,
    parse_id,
)

ID64_VALUE = 76561197983318796
ID32_VALUE = "STEAM_0:0:11526534"
ID3_VALUE = "U:1:23053068"


def test_decode() -> None:
    info = decode_id64(ID64_VALUE)
    assert info == Info(
        universe=Universe.Public,
        type=Type.Individual,
        instance=1,
        account=11526534,
        authentication_server=0,
    )
    assert encode_id64_simple(info.universe, info.authentication_server, info.account) == ID64_VALUE


def test_decode_clan() -> None:
    info = decode_id64(103582791429521412)
    assert info.universe == Universe.Public
    assert info.type == Type.Clan
    assert info.instance == 0
    assert info.account == 2
    assert info.authentication_server == 0


@pytest.mark.parametrize(
    "info",
    [
        Info(Universe.Public, Type.Individual, 1, 11526534, 0),
        Info(Universe.Beta, Type.Clan, 0, 4, 1),
        Info(Universe.RC, Type.AnonUser, 2**20 - 1, 2**31 - 1, 1),
        Info(Universe.IndividualOrUnspecified, Type.Invalid, 0, 0, 0),
        Info(Universe.Developer, Type.Chat, 1 << 19, 123456, 0),
    ],
)
def test_encode_decode(info: Info) -> None:
    id64 = encode_id64(info.universe, info.type, info.instance, info.authentication_server, info.account)
    assert decode_id64(id64) == info
    assert ID64.from_info(info).info() == info


def test_encode_zero() -> None:
    assert encode_id64(Universe.IndividualOrUnspecified, Type.Invalid, 0, 0, 0) == 0


@pytest.mark.parametrize(
    "fields, field",
    [
        ((Universe.Public, Type.Individual, 1 << 20, 0, 1), "instance"),
        ((Universe.Public, Type.Individual, 1, 0, 1 << 31), "account"),
        ((Universe.Public, Type.Individual, 1, 2, 1), "authentication_server"),
        ((Universe.Public, Type.Individual, 1, 0, -1), "account"),
        ((256, Type.Individual, 1, 0, 1), "universe"),
        ((Universe.Public, 16, 1, 0, 1), "type"),
    ],
)
def test_encode_out_of_range(fields: tuple[int, int, int, int, int], field: str) -> None:
    with pytest.raises(FieldOutOfRange) as exc_info:
        encode_id64(*fields)
    assert exc_info.value.field == field


def test_encode_unknown_enum_values() -> None:
    with pytest.raises(InvalidUniverse):
        encode_id64(6, Type.Individual, 1, 0, 1)
    with pytest.raises(InvalidAccountType):
        encode_id64(Universe.Public, 11, 1, 0, 1)


def test_decode_invalid() -> None:
    with pytest.raises(InvalidUniverse) as universe_exc:
        decode_id64(6 << 56 | 1 << 52 | 1 << 32)
    assert universe_exc.value.value == 6
    with pytest.raises(InvalidAccountType) as type_exc:
        decode_id64(1 << 56 | 11 << 52 | 1 << 32)
    assert type_exc.value.value == 11


@pytest.mark.parametrize(
    "steam_id, id64, id32, id3",
    [
        (ID64(ID64_VALUE), ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE)),
        (ID32(ID32_VALUE), ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE)),
        (ID3(ID3_VALUE), ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE)),
        (ID3("U:1:23053069"), ID64(ID64_VALUE + 1), ID32("STEAM_0:1:11526534"), ID3("U:1:23053069")),
        (ID32("STEAM_1:1:11526534"), ID64(ID64_VALUE + 1), ID32("STEAM_1:1:11526534"), ID3("U:1:23053069")),
    ],
)
def test_conversions(steam_id: ID, id64: ID64, id32: ID32, id3: ID3) -> None:
    assert steam_id.id64() == id64
    assert steam_id.id32() == id32
    assert steam_id.id3() == id3


def test_conversions_are_identity_for_same_format() -> None:
    id64 = ID64(ID64_VALUE)
    id32 = ID32("STEAM_1:0:11526534")
    id3 = ID3("g:1:23053068")
    assert id64.id64() is id64
    assert id32.id32() is id32
    assert id3.id3() is id3


def test_id3_to_id32_ignores_type() -> None:
    assert ID3("g:1:23053068").id32() == ID32(ID32_VALUE)
    assert ID3("a:0:23053068").id32() == ID32(ID32_VALUE)


def test_id64_to_id32_always_uses_universe_zero() -> None:
    beta = ID64(encode_id64_simple(Universe.Beta, 1, 5))
    assert beta.info().universe == Universe.Beta
    assert beta.id32() == ID32("STEAM_0:1:5")


def test_id32_universe_zero_is_public() -> None:
    assert ID32("STEAM_0:0:11526534").id64() == ID32("STEAM_1:0:11526534").id64() == ID64(ID64_VALUE)
    assert ID32("STEAM_2:0:11526534").id64().info().universe == Universe.Beta


def test_id32_to_id64_defaults() -> None:
    info = ID32("STEAM_4:1:42").id64().info()
    assert info == Info(Universe.Developer, Type.Individual, 1, 42, 1)


@pytest.mark.parametrize("account", [0, 1, 2, 11526534, 2**31 - 1])
@pytest.mark.parametrize("server", [0, 1])
def test_id32_id3_round_trip(account: int, server: int) -> None:
    id32 = ID32(f"STEAM_0:{server}:{account}")
    assert id32.id3().id32() == id32
    assert id32.id3().id32().id3() == id32.id3()


@pytest.mark.parametrize(
    "steam_id, exc",
    [
        (ID32("STEAM_6:0:1"), InvalidUniverse),
        (ID32("STEAM_0:2:1"), FieldOutOfRange),
        (ID32("STEAM_0:0:2147483648"), FieldOutOfRange),
        (ID32("STEAM_0:0"), InvalidID),
        (ID32("U:1:23053068"), InvalidID),
        (ID3("X:1:23053068"), InvalidAccountType),
        (ID3("STEAM_0:0:11526534"), InvalidID),
        (ID3("U:1:4294967296"), FieldOutOfRange),
    ],
)
def test_invalid_conversions(steam_id: ID, exc: type[Exception]) -> None:
    with pytest.raises(exc):
        steam_id.id64()


def test_invalid_id64_conversions() -> None:
    steam_id = ID64(6 << 56)
    assert steam_id.id64() is steam_id  # not validated until it is decoded
    with pytest.raises(InvalidUniverse):
        steam_id.id32()
    with pytest.raises(InvalidUniverse):
        steam_id.id3()


@pytest.mark.parametrize(
    "value, expected",
    [
        (str(ID64_VALUE), ID64(ID64_VALUE)),
        ("0", ID64(0)),
        (str(2**64 - 1), ID64(2**64 - 1)),
        (ID32_VALUE, ID32(ID32_VALUE)),
        ("STEAM_9:9:1", ID32("STEAM_9:9:1")),
        (ID3_VALUE, ID3(ID3_VALUE)),
        ("T:12:3", ID3("T:12:3")),
    ],
)
def test_parse(value: str, expected: ID) -> None:
    assert parse_id(value) == expected
    assert ID.parse(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "not-an-id",
        "STEAM_0:0",
        "U:23053068",
        "",
        "-5",
        str(2**64),
        "STEAM_0:0:1:2",
        "STEAM_10:0:1",
        "[U:1:23053068]",
        " 76561197983318796",
        "UU:1:23053068",
    ],
)
def test_parse_invalid(value: str) -> None:
    with pytest.raises(InvalidID) as exc_info:
        parse_id(value)
    assert exc_info.value.id == value


def test_is_same() -> None:
    ids = [ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE)]
    for a in ids:
        for b in ids:
            assert a.is_same(b)
            assert is_same(a, b)
    assert not ID64(ID64_VALUE).is_same(ID3("U:1:23053069"))


def test_is_same_propagates_errors() -> None:
    with pytest.raises(InvalidID):
        ID64(ID64_VALUE).is_same(ID32("STEAM_0:0"))
    with pytest.raises(InvalidID):
        ID3("X:1:1").is_same(ID64(ID64_VALUE))


def test_equality_is_by_format() -> None:
    assert ID64(ID64_VALUE) == ID64(ID64_VALUE)
    assert ID32(ID32_VALUE) == ID32(ID32_VALUE)
    assert ID32(ID32_VALUE) != ID3(ID3_VALUE)
    assert ID64(ID64_VALUE) != ID32(ID32_VALUE)
    assert ID64(ID64_VALUE) != ID64_VALUE
    assert ID32("STEAM_1:0:11526534") != ID32(ID32_VALUE)
    assert hash(ID3(ID3_VALUE)) == hash(ID3(ID3_VALUE))
    assert len({ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE), ID64(ID64_VALUE)}) == 3


def test_immutable() -> None:
    with pytest.raises(AttributeError):
        ID64(ID64_VALUE).value = 1  # type: ignore
    with pytest.raises(AttributeError):
        decode_id64(ID64_VALUE).account = 1  # type: ignore


def test_dunders() -> None:
    assert str(ID64(ID64_VALUE)) == str(ID64_VALUE)
    assert str(ID32(ID32_VALUE)) == ID32_VALUE
    assert str(ID3(ID3_VALUE)) == ID3_VALUE
    assert f"{ID3(ID3_VALUE)}" == ID3_VALUE
    assert int(ID3(ID3_VALUE)) == ID64_VALUE
    assert int(ID32(ID32_VALUE)) == ID64_VALUE
    assert repr(ID32(ID32_VALUE)) == f"ID32(value={ID32_VALUE!r})"
    assert format(ID64(ID64_VALUE), "64x") == "1100001015fc30c"
    assert format(ID3(ID3_VALUE), "64") == str(ID64_VALUE)
    assert format(ID32(ID32_VALUE), "32") == "11526534"
    assert format(ID3(ID3_VALUE), "32x") == format(11526534, "x")
    with pytest.raises(ValueError):
        format(ID64(ID64_VALUE), "x")


@pytest.mark.parametrize("steam_id", [ID64(ID64_VALUE), ID32(ID32_VALUE), ID3(ID3_VALUE)])
def test_format_account_is_the_same_for_every_format(steam_id: ID) -> None:
    assert format(steam_id, "32") == "11526534"
    assert format(steam_id, "64") == str(ID64_VALUE)


@pytest.mark.parametrize("value", [-1, 2**64, True])
def test_id64_range(value: int) -> None:
    with pytest.raises(InvalidID):
        ID64(value)


def test_from_int() -> None:
    assert ID.from_int(ID64_VALUE) == ID64(ID64_VALUE)
    with pytest.raises(InvalidUniverse):
        ID.from_int(6 << 56)
    with pytest.raises(InvalidAccountType):
        ID.from_int(1 << 56 | 15 << 52)


@pytest.mark.parametrize(
    "value, expected",
    [
        (ID64_VALUE, ID64(ID64_VALUE)),
        (str(ID64_VALUE), ID64(ID64_VALUE)),
        (ID32_VALUE, ID32(ID32_VALUE)),
        (ID3_VALUE, ID3(ID3_VALUE)),
    ],
)
def test_json(value: int | str, expected: ID) -> None:
    steam_id = ID.from_json(value)
    assert steam_id == expected
    assert steam_id.to_json() == ID64_VALUE


@pytest.mark.parametrize("value", [True, 1.5, None, [ID64_VALUE], "nope"])
def test_json_invalid(value: object) -> None:
    with pytest.raises(InvalidID):
        ID.from_json(value)  # type: ignore


def test_id3_info() -> None:
    assert ID3(ID3_VALUE).info() == Info(Universe.IndividualOrUnspecified, Type.Individual, 1, 23053068, 1)
    assert ID3("g:0:4").info().type == Type.Clan
    assert ID3("L:1:4").info().type == Type.Chat


def test_id3_info_reads_server_as_a_byte() -> None:
    info = ID3("U:5:4").info()
    assert info.authentication_server == 5
    assert info.account == 4
    with pytest.raises(FieldOutOfRange):
        ID3("U:256:4").info()


@pytest.mark.parametrize(
    "value, exc",
    [
        ("U:1", InvalidID),
        ("U:1:2:3", InvalidID),
        ("U:x:5", NumericParseFailure),
        ("U:1:-5", NumericParseFailure),
        ("Q:1:5", InvalidAccountType),
        ("U:1:4294967296", FieldOutOfRange),
    ],
)
def test_id3_info_invalid(value: str, exc: type[Exception]) -> None:
    with pytest.raises(exc):
        ID3(value).info()


def test_id32_info() -> None:
    assert ID32(ID32_VALUE).info() == decode_id64(ID64_VALUE)
