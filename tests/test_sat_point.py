import json

import pytest

from ordinals.sat_point import OutPoint, SatPoint

ONES = "1" * 64


def test_from_str_ok():
    assert SatPoint.parse(f"{ONES}:1:1") == SatPoint(OutPoint.parse(f"{ONES}:1"), 1)


@pytest.mark.parametrize(
    "text", ["abc", "abc:xyz", f"{ONES}:1", f"{ONES}:1:foo"]
)
def test_from_str_err(text):
    with pytest.raises(ValueError):
        SatPoint.parse(text)


def test_deserialize_ok():
    raw = json.loads(f'"{ONES}:1:1"')
    assert SatPoint.parse(raw) == SatPoint(OutPoint.parse(f"{ONES}:1"), 1)


def test_display_round_trip():
    text = f"{ONES}:7:42"
    assert str(SatPoint.parse(text)) == text


def test_outpoint_uppercase_normalised():
    assert str(OutPoint.parse("AB" * 32 + ":3")) == "ab" * 32 + ":3"


def test_outpoint_leading_zero_vout_rejected():
    with pytest.raises(ValueError):
        OutPoint.parse(f"{ONES}:01")


def test_encode_decode_round_trip():
    point = SatPoint(OutPoint("0123456789abcdef" * 4, 5), 99)
    data = point.encode()
    assert len(data) == 44
    assert data[:32] == bytes.fromhex("0123456789abcdef" * 4)[::-1]
    assert SatPoint.decode(data) == point


def test_decode_short_data():
    with pytest.raises(ValueError):
        SatPoint.decode(b"\x00" * 10)