from __future__ import annotations

import array
from fractions import Fraction

import pytest

from featureview.config.settings import configure
from featureview.errors import UnsupportedValueType
from featureview.kinds import (
    Kind,
    converter,
    kind_of_source,
    kind_of_value,
    new_storage,
    resolve_kind,
)


@pytest.mark.parametrize(
    "spec, expected",
    [
        (int, Kind.INT64),
        (bool, Kind.INT64),
        (float, Kind.FLOAT),
        (Fraction, Kind.FLOAT),
        (str, Kind.BYTES),
        (bytes, Kind.BYTES),
        (bytearray, Kind.BYTES),
        (memoryview, Kind.BYTES),
        ("int64", Kind.INT64),
        ("FLOAT", Kind.FLOAT),
        (" bytes_list ", Kind.BYTES),
        (Kind.FLOAT, Kind.FLOAT),
    ],
)
def test_resolve_kind_maps_specifiers(spec, expected):
    assert resolve_kind(spec) is expected


def test_resolve_kind_follows_integral_subclasses():
    class Small(int):
        pass

    assert resolve_kind(Small) is Kind.INT64


@pytest.mark.parametrize("spec", [complex, list, "int32", 3, None])
def test_resolve_kind_rejects_unknown_specifiers(spec):
    with pytest.raises(UnsupportedValueType):
        resolve_kind(spec)


def test_kind_of_value_uses_the_value_type():
    assert kind_of_value(7) is Kind.INT64
    assert kind_of_value(7.5) is Kind.FLOAT
    assert kind_of_value("seven") is Kind.BYTES
    with pytest.raises(UnsupportedValueType):
        kind_of_value(object())


def test_kind_of_source_reads_typecodes_and_dtypes():
    class FakeDtype:
        kind = "U"

    class FakeArray:
        dtype = FakeDtype()

    assert kind_of_source(array.array("i", [1])) is Kind.INT64
    assert kind_of_source(array.array("d", [1.0])) is Kind.FLOAT
    assert kind_of_source(FakeArray()) is Kind.BYTES
    assert kind_of_source([1, 2]) is None


def test_new_storage_layouts():
    assert new_storage(Kind.INT64).typecode == "q"
    assert new_storage(Kind.FLOAT).typecode == "f"
    assert new_storage(Kind.BYTES) == []


def test_new_storage_follows_float_setting():
    configure(float_storage="float64")
    assert new_storage(Kind.FLOAT).typecode == "d"


def test_int64_converter_rejects_floats():
    convert = converter(Kind.INT64)
    assert convert(True) == 1
    with pytest.raises(UnsupportedValueType):
        convert(1.5)


def test_float_converter_widens_integers_and_rejects_strings():
    convert = converter(Kind.FLOAT)
    assert convert(3) == 3.0
    assert isinstance(convert(3), float)
    with pytest.raises(UnsupportedValueType):
        convert("3.0")


def test_bytes_converter_copies_buffers():
    convert = converter(Kind.BYTES)
    buffer = bytearray(b"abc")
    converted = convert(memoryview(buffer))
    buffer[0] = ord("z")
    assert converted == b"abc"
    assert convert("héllo") == "héllo".encode("utf-8")
    with pytest.raises(UnsupportedValueType):
        convert(5)


def test_bytes_converter_uses_configured_encoding():
    configure(string_encoding="latin-1")
    assert converter(Kind.BYTES)("é") == b"\xe9"


def test_kind_field_names():
    assert [kind.field_name for kind in Kind] == ["int64_list", "float_list", "bytes_list"]
