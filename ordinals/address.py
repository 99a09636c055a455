"""Segregated-witness (bech32 and bech32m) addresses."""

from __future__ import annotations

from dataclasses import dataclass

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_KNOWN_HRPS = ("bc", "tb", "bcrt")
_MAX_LENGTH = 90


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: list[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise ValueError("invalid padding in address data")
    return out


@dataclass(frozen=True)
class Address:
    """A segwit address: network prefix, witness version and witness program."""

    hrp: str
    witness_version: int
    program: bytes

    @classmethod
    def parse(cls, s: str) -> "Address":
        if len(s) > _MAX_LENGTH:
            raise ValueError("address too long")
        if s.lower() != s and s.upper() != s:
            raise ValueError("mixed case in address")
        text = s.lower()
        hrp, sep, data_part = text.rpartition("1")
        if not sep or not hrp:
            raise ValueError("missing separator in address")
        if hrp not in _KNOWN_HRPS:
            raise ValueError(f"unknown address prefix: {hrp}")
        if len(data_part) < 7:
            raise ValueError("address data too short")
        try:
            data = [_CHARSET.index(c) for c in data_part]
        except ValueError:
            raise ValueError("invalid character in address") from None
        const = _polymod(_hrp_expand(hrp) + data)
        if const not in (_BECH32_CONST, _BECH32M_CONST):
            raise ValueError("invalid address checksum")
        version = data[0]
        if version > 16:
            raise ValueError(f"invalid witness version: {version}")
        program = bytes(_convert_bits(data[1:-6], 5, 8, pad=False))
        if not 2 <= len(program) <= 40:
            raise ValueError("invalid witness program length")
        if version == 0:
            if len(program) not in (20, 32):
                raise ValueError("invalid v0 witness program length")
            if const != _BECH32_CONST:
                raise ValueError("v0 address must use bech32 checksum")
        elif const != _BECH32M_CONST:
            raise ValueError("v1+ address must use bech32m checksum")
        return cls(hrp, version, program)

    def __str__(self) -> str:
        const = _BECH32_CONST if self.witness_version == 0 else _BECH32M_CONST
        data = [self.witness_version] + _convert_bits(list(self.program), 8, 5, pad=True)
        polymod = _polymod(_hrp_expand(self.hrp) + data + [0] * 6) ^ const
        checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
        return self.hrp + "1" + "".join(_CHARSET[d] for d in data + checksum)