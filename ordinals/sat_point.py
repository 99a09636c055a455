"""Transaction outpoints and satpoints: positions of satoshis in outputs."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass

_TXID_PATTERN = re.compile(r"[0-9A-Fa-f]{64}")
_VOUT_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_MAX_OUTPOINT_LEN = 75


def parse_txid(text: str) -> str:
    """Validate a 64-digit hex transaction id and return it in lower case."""
    if len(text) != 64:
        raise ValueError(f"invalid txid length: {len(text)}")
    if not _TXID_PATTERN.fullmatch(text):
        raise ValueError(f"invalid hex character in txid: {text!r}")
    return text.lower()


def _parse_vout(text: str) -> int:
    if len(text) > 1 and text.startswith("0"):
        raise ValueError("vout has leading zeros")
    if not _VOUT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid vout: {text!r}")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"vout out of range: {text}")
    return value


def _parse_offset(text: str) -> int:
    if not _VOUT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid offset: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"offset out of range: {text}")
    return value


@dataclass(frozen=True, order=True)
class OutPoint:
    """A transaction output, identified by transaction id and output index."""

    txid: str
    vout: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "txid", parse_txid(self.txid))
        if not 0 <= self.vout <= _U32_MAX:
            raise ValueError(f"vout out of range: {self.vout}")

    @classmethod
    def parse(cls, s: str) -> "OutPoint":
        """Parse ``txid:vout``."""
        if len(s) > _MAX_OUTPOINT_LEN:
            raise ValueError("outpoint string too long")
        txid, sep, vout = s.partition(":")
        if not sep:
            raise ValueError(f"missing colon in outpoint: {s}")
        if ":" in vout:
            raise ValueError(f"too many colons in outpoint: {s}")
        return cls(parse_txid(txid), _parse_vout(vout))

    def __str__(self) -> str:
        return f"{self.txid}:{self.vout}"

    def encode(self) -> bytes:
        """Consensus encoding: reversed txid bytes followed by little-endian vout."""
        return bytes.fromhex(self.txid)[::-1] + struct.pack("<I", self.vout)

    @classmethod
    def decode(cls, data: bytes) -> "OutPoint":
        if len(data) < 36:
            raise ValueError("unexpected end of data decoding outpoint")
        (vout,) = struct.unpack("<I", data[32:36])
        return cls(data[:32][::-1].hex(), vout)


@dataclass(frozen=True, order=True)
class SatPoint:
    """A satoshi's position: an outpoint and an offset within it."""

    outpoint: OutPoint
    offset: int

    @classmethod
    def parse(cls, s: str) -> "SatPoint":
        """Parse ``txid:vout:offset``."""
        outpoint, sep, offset = s.rpartition(":")
        if not sep:
            raise ValueError(f"invalid satpoint: {s}")
        return cls(OutPoint.parse(outpoint), _parse_offset(offset))

    def __str__(self) -> str:
        return f"{self.outpoint}:{self.offset}"

    def encode(self) -> bytes:
        return self.outpoint.encode() + struct.pack("<Q", self.offset)

    @classmethod
    def decode(cls, data: bytes) -> "SatPoint":
        if len(data) < 44:
            raise ValueError("unexpected end of data decoding satpoint")
        (offset,) = struct.unpack("<Q", data[36:44])
        return cls(OutPoint.decode(data[:36]), offset)