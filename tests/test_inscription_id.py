import pytest

from ordinals.inscription_id import (
    InscriptionId,
    InscriptionIdParseError,
    ParseErrorKind,
)

ONES = "1" * 64
ZEROS = "0" * 64


def test_display():
    assert str(InscriptionId(ONES, 1)) == f"{ONES}i1"
    assert str(InscriptionId(ONES, 0)) == f"{ONES}i0"
    assert str(InscriptionId(ONES, 0xFFFFFFFF)) == f"{ONES}i4294967295"


def test_from_str():
    assert InscriptionId.parse(f"{ONES}i1") == InscriptionId(ONES, 1)
    assert InscriptionId.parse(f"{ONES}i4294967295") == InscriptionId(ONES, 0xFFFFFFFF)


def test_from_str_bad_character():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("→")
    assert info.value.kind is ParseErrorKind.CHARACTER
    assert info.value.detail == "→"


def test_from_str_bad_length():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("foo")
    assert info.value.kind is ParseErrorKind.LENGTH
    assert info.value.detail == 3


def test_from_str_bad_separator():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse(f"{ZEROS}x0")
    assert info.value.kind is ParseErrorKind.SEPARATOR
    assert info.value.detail == "x"


def test_from_str_bad_index():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse(f"{ZEROS}ifoo")
    assert info.value.kind is ParseErrorKind.INDEX


def test_from_str_index_overflow():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse(f"{ZEROS}i4294967296")
    assert info.value.kind is ParseErrorKind.INDEX


def test_from_str_bad_txid():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("x" + "0" * 63 + "i0")
    assert info.value.kind is ParseErrorKind.TXID