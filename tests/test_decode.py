"""Tests for `jsonany.decode`: numeric kinds, scenarios, canonical mode, parse failures."""

import math

import pytest

from jsonany.config import DecodeSettings
from jsonany.decode import decode, decode_canonical, from_python, load
from jsonany.errors import EncodeError, InputTooLargeError, ParseError
from jsonany.tags import Tag
from jsonany.values import (
    Array,
    Bool,
    Null,
    NumberFloat,
    NumberInt,
    NumberUint,
    Object,
    String,
    array_ok,
    object_ok,
)

IMAGE = b"""{
    "Image": {
        "Width":  800,
        "Height": 600,
        "Title":  "View from 15th Floor",
        "Thumbnail": {
            "Url":    "http://www.example.com/image/481989943",
            "Height": 125,
            "Width":  100
        },
        "Animated" : false,
        "IDs": [116, 943, 234, 38793],
        "GeoInfo": {
            "Latitude":  37.7668,
            "Longitude": -122.3959
        }
    }
}"""


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", NumberInt(42)),
        ("-1", NumberInt(-1)),
        ("0", NumberInt(0)),
        ("9223372036854775807", NumberInt(2**63 - 1)),
        ("-9223372036854775808", NumberInt(-(2**63))),
        ("9223372036854775808", NumberUint(2**63)),
        ("18446744073709551615", NumberUint(2**64 - 1)),
        ("18446744073709551616", NumberFloat(1.8446744073709552e19)),
        ("-9223372036854775809", NumberFloat(-9.223372036854776e18)),
        ("37.7668", NumberFloat(37.7668)),
        ("1.0", NumberFloat(1.0)),
        ("1e3", NumberFloat(1000.0)),
        ('"s"', String("s")),
        ("true", Bool(True)),
        ("null", Null()),
    ],
)
def test_scalar_kind_selection(text: str, expected) -> None:
    got = decode(text.encode())
    assert got == expected
    assert got.tag() is expected.tag()


def test_image_scenario() -> None:
    root, ok = object_ok(decode(IMAGE))
    assert ok
    image, ok = object_ok(root["Image"])
    assert ok
    assert image["Width"] == NumberInt(800)
    assert image["Animated"] == Bool(False)
    assert image["Title"].render() == "View from 15th Floor"
    ids, ok = array_ok(image["IDs"])
    assert ok
    assert [v.int64() for v in ids] == [116, 943, 234, 38793]
    geo, _ = object_ok(image["GeoInfo"])
    lat = geo["Latitude"]
    assert lat.tag() is Tag.NUMBER_FLOAT and lat.float64() == 37.7668
    assert geo["Longitude"].render() == "-122.3959"


def test_image_scenario_canonical_sorts_ids() -> None:
    root = decode_canonical(IMAGE)
    ids = root["Image"]["IDs"]
    assert [v.render() for v in ids] == ["116", "234", "38793", "943"]


def test_canonical_small_array() -> None:
    arr = decode_canonical(b"[3,1,2]")
    assert arr == Array([NumberInt(1), NumberInt(2), NumberInt(3)])
    assert decode(b"[3,1,2]").render() == "[3,1,2]"


def test_canonical_applies_at_every_level() -> None:
    a = decode_canonical(b'{"x": [[2, 1], {"y": [true, false]}], "z": [["b", "a"]]}')
    b = decode_canonical(b'{"z": [["a", "b"]], "x": [{"y": [false, true]}, [1, 2]]}')
    assert a.to_json() == b.to_json()
    assert a.to_json() == b'{"x":[[1,2],{"y":[false,true]}],"z":[["a","b"]]}'


def test_not_json_raises_parse_error() -> None:
    with pytest.raises(ParseError) as ei:
        decode(b"not json")
    assert ei.value.pos == 0
    assert ei.value.lineno == 1 and ei.value.colno == 1
    assert isinstance(ei.value, ValueError)


@pytest.mark.parametrize(
    "text",
    [b"", b"[1,]", b"{'a': 1}", b"[1] // c", b"NaN", b"[Infinity]", b"-Infinity", b"\xff\xfe\xfd"],
)
def test_non_standard_json_rejected(text: bytes) -> None:
    with pytest.raises(ParseError):
        decode(text)


def test_accepts_str_and_buffers() -> None:
    for data in ("[1]", b"[1]", bytearray(b"[1]"), memoryview(b"[1]")):
        assert decode(data) == Array([NumberInt(1)])


def test_duplicate_keys_last_wins() -> None:
    assert decode(b'{"a": 1, "a": 2}') == Object({"a": NumberInt(2)})


@pytest.mark.parametrize(
    "text",
    [b"1e400", b"-1e400", b"[1, 1e400]", b'{"a": 2.5e999}', b"1" * 400, b"-" + b"9" * 320],
)
def test_overflowing_literal_is_parse_error(text: bytes) -> None:
    with pytest.raises(ParseError, match="overflows float64"):
        decode(text)
    with pytest.raises(ParseError):
        decode_canonical(text)


def test_wide_but_finite_integer_becomes_float() -> None:
    v = decode(b"1" * 300)
    assert v.tag() is Tag.NUMBER_FLOAT and not math.isinf(v.float64())


def test_canonical_mode_sorts_unencodable_element_first() -> None:
    arr = decode_canonical(b'[2, "\\ud800", 1]')
    assert arr.index(0).tag() is Tag.STRING
    with pytest.raises(EncodeError):
        arr.index(0).to_json()
    assert [e.render() for e in arr][1:] == ["1", "2"]
    assert arr.render() == ""


def test_deeply_nested_arrays_round_trip() -> None:
    text = b"[" * 500 + b"]" * 500
    assert decode_canonical(text).to_json() == text
    assert decode(text).render() == text.decode()
    v = decode(text).to_python()
    for _ in range(499):
        assert len(v) == 1
        v = v[0]
    assert v == []


def test_deeply_nested_objects_round_trip() -> None:
    text = '{"a":' * 500 + "1" + "}" * 500
    v = decode(text)
    assert v.render() == text
    assert from_python(v.to_python()).to_json() == text.encode()


def test_canonicalizes_arrays_at_depth() -> None:
    text = b"[" * 300 + b"[3,1,2],[0]" + b"]" * 300
    inner = b"[0],[1,2,3]"
    assert decode_canonical(text).to_json() == b"[" * 300 + inner + b"]" * 300


@pytest.mark.parametrize(
    "text",
    [
        b'{"a": [1, -2, 18446744073709551615, 2.5, "x", true, null, {}, []]}',
        b'[{"k": "\xc3\xa9"}, 0.1, 1e-7, -0.0]',
        b'"line\\nbreak \\u00e9"',
    ],
)
def test_round_trip_preserves_structure_and_kinds(text: bytes) -> None:
    first = decode(text)
    assert decode(first.to_json()) == first


def test_from_python_unknown_shapes_become_null() -> None:
    tree = from_python({"s": {1, 2}, "t": (3, 1), "n": None, 5: 2**70}, canonical=True)
    assert tree["s"] == Null()
    assert tree["t"] == Array([NumberInt(1), NumberInt(3)])
    assert tree["5"].tag() is Tag.NUMBER_FLOAT


def test_from_python_bool_is_not_int() -> None:
    assert from_python([True, 1]) == Array([Bool(True), NumberInt(1)])


def test_load_uses_settings() -> None:
    assert load(b"[2,1]", DecodeSettings(canonicalize=True)).render() == "[1,2]"
    assert load(b"[2,1]").render() == "[2,1]"
    with pytest.raises(InputTooLargeError):
        load("[1, 2, 3]", DecodeSettings(max_input_bytes=4))
    assert load(b"[1]", DecodeSettings(max_input_bytes=3)) == Array([NumberInt(1)])
