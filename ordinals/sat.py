"""Satoshi numbers and the notations used to name them."""

from __future__ import annotations

import bisect
import math
import re
import string
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import ClassVar

from .rarity import Rarity

COIN_VALUE = 100_000_000
DIFFCHANGE_INTERVAL = 2016
SUBSIDY_HALVING_INTERVAL = 210_000
CYCLE_EPOCHS = 6
FIRST_POST_SUBSIDY_EPOCH = 33
SUPPLY = 2_099_999_997_690_000

_HALVING_INCREMENT = SUBSIDY_HALVING_INTERVAL % DIFFCHANGE_INTERVAL
_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")


def epoch_subsidy(epoch: int) -> int:
    """Block subsidy, in satoshis, paid during the given epoch."""
    if epoch < FIRST_POST_SUBSIDY_EPOCH:
        return (50 * COIN_VALUE) >> epoch
    return 0


def _compute_starting_sats() -> tuple[int, ...]:
    starting = []
    total = 0
    for epoch in range(FIRST_POST_SUBSIDY_EPOCH + 1):
        starting.append(total)
        total += epoch_subsidy(epoch) * SUBSIDY_HALVING_INTERVAL
    return tuple(starting)


_STARTING_SATS = _compute_starting_sats()


def _epoch_of_sat(n: int) -> int:
    return min(bisect.bisect_right(_STARTING_SATS, n) - 1, FIRST_POST_SUBSIDY_EPOCH)


def _epoch_of_height(height: int) -> int:
    return height // SUBSIDY_HALVING_INTERVAL


def height_subsidy(height: int) -> int:
    """Block subsidy, in satoshis, paid at the given height."""
    return epoch_subsidy(_epoch_of_height(height))


def epoch_starting_sat(epoch: int) -> "Sat":
    """First satoshi mined in the given epoch."""
    return Sat(_STARTING_SATS[min(epoch, FIRST_POST_SUBSIDY_EPOCH)])


def height_starting_sat(height: int) -> "Sat":
    """First satoshi mined at the given height."""
    epoch = _epoch_of_height(height)
    start = epoch_starting_sat(epoch)
    return start + (height - epoch * SUBSIDY_HALVING_INTERVAL) * epoch_subsidy(epoch)


def epoch_starting_sats() -> list["Sat"]:
    """The first satoshi of every reward epoch, ending with the total supply."""
    return [Sat(n) for n in _STARTING_SATS]


def _parse_u64(text: str) -> int:
    if not _U64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"number too large: {text}")
    return value


def _format_float(value: float) -> str:
    """Format a float in shortest round-trip form, without exponent or trailing zeros."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _round_half_away(value: float) -> int:
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


@dataclass(frozen=True)
class Degree:
    """Degree notation of a satoshi: cycle, block in epoch, block in period, offset."""

    hour: int
    minute: int
    second: int
    third: int

    def __str__(self) -> str:
        return f"{self.hour}°{self.minute}′{self.second}″{self.third}‴"


@total_ordering
@dataclass(frozen=True, eq=False)
class Sat:
    """A satoshi, identified by its ordinal number."""

    n: int

    SUPPLY: ClassVar[int] = SUPPLY
    LAST: ClassVar["Sat"]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sat):
            return self.n == other.n
        if isinstance(other, int) and not isinstance(other, bool):
            return self.n == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Sat):
            return self.n < other.n
        if isinstance(other, int) and not isinstance(other, bool):
            return self.n < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.n)

    def __add__(self, other: int) -> "Sat":
        if isinstance(other, int) and not isinstance(other, bool):
            return Sat(self.n + other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.n)

    def epoch(self) -> int:
        return _epoch_of_sat(self.n)

    def epoch_position(self) -> int:
        return self.n - _STARTING_SATS[self.epoch()]

    def height(self) -> int:
        epoch = self.epoch()
        return epoch * SUBSIDY_HALVING_INTERVAL + self.epoch_position() // epoch_subsidy(epoch)

    def cycle(self) -> int:
        return self.epoch() // CYCLE_EPOCHS

    def period(self) -> int:
        return self.height() // DIFFCHANGE_INTERVAL

    def third(self) -> int:
        return self.epoch_position() % epoch_subsidy(self.epoch())

    def degree(self) -> Degree:
        height = self.height()
        return Degree(
            hour=height // (CYCLE_EPOCHS * SUBSIDY_HALVING_INTERVAL),
            minute=height % SUBSIDY_HALVING_INTERVAL,
            second=height % DIFFCHANGE_INTERVAL,
            third=self.third(),
        )

    def decimal(self) -> str:
        """Decimal notation: block height and offset within the block."""
        return f"{self.height()}.{self.third()}"

    def percentile(self) -> str:
        return _format_float(self.n / Sat.LAST.n * 100.0) + "%"

    def rarity(self) -> Rarity:
        return Rarity.from_degree(self.degree())

    def is_common(self) -> bool:
        """Cheap check equivalent to ``rarity() is Rarity.COMMON``."""
        epoch = self.epoch()
        return (self.n - _STARTING_SATS[epoch]) % epoch_subsidy(epoch) != 0

    def name(self) -> str:
        x = SUPPLY - self.n
        letters = []
        while x > 0:
            letters.append(string.ascii_lowercase[(x - 1) % 26])
            x = (x - 1) // 26
        return "".join(reversed(letters))

    @classmethod
    def parse(cls, s: str) -> "Sat":
        """Parse a satoshi from a number, name, degree, percentile or decimal."""
        if any("a" <= c <= "z" for c in s):
            return cls._from_name(s)
        if "°" in s:
            return cls._from_degree(s)
        if "%" in s:
            return cls._from_percentile(s)
        if "." in s:
            return cls._from_decimal(s)
        sat = cls(_parse_u64(s))
        if sat > cls.LAST:
            raise ValueError("invalid sat")
        return sat

    @classmethod
    def _from_name(cls, s: str) -> "Sat":
        x = 0
        for c in s:
            if not "a" <= c <= "z":
                raise ValueError(f"invalid character in sat name: {c}")
            x = x * 26 + ord(c) - ord("a") + 1
        if x > SUPPLY:
            raise ValueError("sat name out of range")
        return cls(SUPPLY - x)

    @classmethod
    def _from_degree(cls, degree: str) -> "Sat":
        cycle_text, sep, rest = degree.partition("°")
        if not sep:
            raise ValueError("missing degree symbol")
        cycle_number = _parse_u64(cycle_text)

        epoch_text, sep, rest = rest.partition("′")
        if not sep:
            raise ValueError("missing minute symbol")
        epoch_offset = _parse_u64(epoch_text)
        if epoch_offset >= SUBSIDY_HALVING_INTERVAL:
            raise ValueError("invalid epoch offset")

        period_text, sep, rest = rest.partition("″")
        if not sep:
            raise ValueError("missing second symbol")
        period_offset = _parse_u64(period_text)
        if period_offset >= DIFFCHANGE_INTERVAL:
            raise ValueError("invalid period offset")

        cycle_start_epoch = cycle_number * CYCLE_EPOCHS

        # For valid degrees, period offset minus epoch offset advances by 336 every halving.
        relationship = period_offset + SUBSIDY_HALVING_INTERVAL * CYCLE_EPOCHS - epoch_offset
        if relationship % _HALVING_INCREMENT != 0:
            raise ValueError(
                "relationship between epoch offset and period offset must be multiple of 336"
            )

        epochs_since_cycle_start = relationship % DIFFCHANGE_INTERVAL // _HALVING_INCREMENT
        epoch = cycle_start_epoch + epochs_since_cycle_start
        height = epoch * SUBSIDY_HALVING_INTERVAL + epoch_offset

        block_text, sep, tail = rest.partition("‴")
        if sep:
            block_offset = _parse_u64(block_text)
            rest = tail
        else:
            block_offset = 0

        if rest:
            raise ValueError("trailing characters")
        if block_offset >= height_subsidy(height):
            raise ValueError("invalid block offset")

        return height_starting_sat(height) + block_offset

    @classmethod
    def _from_decimal(cls, decimal: str) -> "Sat":
        height_text, sep, offset_text = decimal.partition(".")
        if not sep:
            raise ValueError("missing period")
        height = _parse_u64(height_text)
        offset = _parse_u64(offset_text)
        if offset >= height_subsidy(height):
            raise ValueError("invalid block offset")
        return height_starting_sat(height) + offset

    @classmethod
    def _from_percentile(cls, percentile: str) -> "Sat":
        if not percentile.endswith("%"):
            raise ValueError(f"invalid percentile: {percentile}")
        number = percentile[:-1]
        if any(c.isspace() or c == "_" for c in number):
            raise ValueError(f"invalid percentile: {percentile}")
        value = float(number)
        if value < 0.0:
            raise ValueError(f"invalid percentile: {value}")
        last = float(cls.LAST.n)
        scaled = value / 100.0 * last
        if math.isnan(scaled):
            return cls(0)
        if math.isinf(scaled):
            raise ValueError(f"invalid percentile: {value}")
        n = _round_half_away(scaled)
        if n > last:
            raise ValueError(f"invalid percentile: {value}")
        return cls(n)


Sat.LAST = Sat(SUPPLY - 1)