"""Bitcoin amounts with a denomination, stored as whole satoshis."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

_MAX_SATS = 2**64 - 1
_VALUE_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")

_DENOMINATIONS: dict[str, Decimal] = {}
for _names, _factor in (
    (("BTC", "btc"), Decimal(100_000_000)),
    (("cBTC", "cbtc"), Decimal(1_000_000)),
    (("mBTC", "mbtc"), Decimal(100_000)),
    (("uBTC", "ubtc"), Decimal(100)),
    (("nBTC", "nbtc"), Decimal("0.1")),
    (("pBTC", "pbtc"), Decimal("0.0001")),
    (("bit", "bits", "BIT", "BITS"), Decimal(100)),
    (
        ("SATOSHI", "satoshi", "SATOSHIS", "satoshis", "SAT", "sat", "SATS", "sats"),
        Decimal(1),
    ),
    (("mSAT", "msat", "mSATs", "msats"), Decimal("0.001")),
):
    for _name in _names:
        _DENOMINATIONS[_name] = _factor


@dataclass(frozen=True, order=True)
class Amount:
    sats: int

    @classmethod
    def parse(cls, s: str) -> "Amount":
        """Parse ``<value> <denomination>``, e.g. ``1.5 BTC`` or ``100 sat``."""
        value, sep, denomination = s.partition(" ")
        if not sep:
            raise ValueError(f"missing denomination in amount: {s!r}")
        factor = _DENOMINATIONS.get(denomination)
        if factor is None:
            raise ValueError(f"unknown denomination: {denomination}")
        if not value or value == "." or not _VALUE_PATTERN.fullmatch(value):
            raise ValueError(f"invalid amount: {value!r}")
        sats = Decimal(value) * factor
        if sats != sats.to_integral_value():
            raise ValueError("amount has too much precision")
        if sats > _MAX_SATS:
            raise ValueError("amount too big")
        return cls(int(sats))

    def __str__(self) -> str:
        whole, frac = divmod(self.sats, 100_000_000)
        if frac:
            return f"{whole}.{frac:08d}".rstrip("0") + " BTC"
        return f"{whole} BTC"