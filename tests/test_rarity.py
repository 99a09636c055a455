import json

import pytest

from ordinals.rarity import Rarity
from ordinals.sat import (
    COIN_VALUE,
    DIFFCHANGE_INTERVAL,
    SUBSIDY_HALVING_INTERVAL,
    Degree,
    Sat,
)


def test_rarity():
    assert Sat(0).rarity() is Rarity.MYTHIC
    assert Sat(1).rarity() is Rarity.COMMON

    assert Sat(50 * COIN_VALUE - 1).rarity() is Rarity.COMMON
    assert Sat(50 * COIN_VALUE).rarity() is Rarity.UNCOMMON
    assert Sat(50 * COIN_VALUE + 1).rarity() is Rarity.COMMON

    assert Sat(50 * COIN_VALUE * DIFFCHANGE_INTERVAL - 1).rarity() is Rarity.COMMON
    assert Sat(50 * COIN_VALUE * DIFFCHANGE_INTERVAL).rarity() is Rarity.RARE
    assert Sat(50 * COIN_VALUE * DIFFCHANGE_INTERVAL + 1).rarity() is Rarity.COMMON

    assert Sat(50 * COIN_VALUE * SUBSIDY_HALVING_INTERVAL - 1).rarity() is Rarity.COMMON
    assert Sat(50 * COIN_VALUE * SUBSIDY_HALVING_INTERVAL).rarity() is Rarity.EPIC
    assert Sat(50 * COIN_VALUE * SUBSIDY_HALVING_INTERVAL + 1).rarity() is Rarity.COMMON

    assert Sat(2067187500000000 - 1).rarity() is Rarity.COMMON
    assert Sat(2067187500000000).rarity() is Rarity.LEGENDARY
    assert Sat(2067187500000000 + 1).rarity() is Rarity.COMMON


@pytest.mark.parametrize(
    "text, expected",
    [
        ("common", Rarity.COMMON),
        ("uncommon", Rarity.UNCOMMON),
        ("rare", Rarity.RARE),
        ("epic", Rarity.EPIC),
        ("legendary", Rarity.LEGENDARY),
        ("mythic", Rarity.MYTHIC),
    ],
)
def test_from_str_and_deserialize_ok(text, expected):
    actual = Rarity.parse(text)
    assert actual is expected
    assert Rarity.parse(str(actual)) is expected
    serialized = json.dumps(str(expected))
    assert serialized == f'"{text}"'
    assert Rarity.parse(json.loads(serialized)) is expected


@pytest.mark.parametrize("text", ["abc", ""])
def test_from_str_err(text):
    with pytest.raises(ValueError, match="invalid rarity"):
        Rarity.parse(text)


def test_ordering():
    parsed = [
        Rarity.parse(name)
        for name in ("mythic", "common", "epic", "rare", "legendary", "uncommon")
    ]
    assert sorted(parsed) == [
        Rarity.COMMON,
        Rarity.UNCOMMON,
        Rarity.RARE,
        Rarity.EPIC,
        Rarity.LEGENDARY,
        Rarity.MYTHIC,
    ]
    assert Sat(0).rarity() > Sat(1).rarity()
    assert Sat(50 * COIN_VALUE).rarity() < Sat(50 * COIN_VALUE * DIFFCHANGE_INTERVAL).rarity()


def test_from_degree_directly():
    assert Rarity.from_degree(Degree(0, 0, 0, 0)) is Rarity.MYTHIC
    assert Rarity.from_degree(Degree(1, 0, 0, 0)) is Rarity.LEGENDARY
    assert Rarity.from_degree(Degree(0, 0, 336, 0)) is Rarity.EPIC
    assert Rarity.from_degree(Degree(0, 2016, 0, 0)) is Rarity.RARE
    assert Rarity.from_degree(Degree(0, 1, 1, 0)) is Rarity.UNCOMMON
    assert Rarity.from_degree(Degree(0, 1, 1, 1)) is Rarity.COMMON