"""Any object that can be named on the command line: sats, ids, points, etc."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union

from .address import Address
from .inscription_id import InscriptionId
from .representation import Representation
from .sat import Sat
from .sat_point import OutPoint, SatPoint

_U128_MAX = 2**128 - 1
_HASH_PATTERN = re.compile(r"[0-9A-Fa-f]{64}")


class ObjectKind(enum.Enum):
    ADDRESS = "address"
    HASH = "hash"
    INSCRIPTION_ID = "inscription_id"
    INTEGER = "integer"
    OUT_POINT = "outpoint"
    SAT = "sat"
    SAT_POINT = "satpoint"


ObjectValue = Union[Address, bytes, InscriptionId, int, OutPoint, Sat, SatPoint]


@dataclass(frozen=True)
class Object:
    kind: ObjectKind
    value: ObjectValue

    @classmethod
    def parse(cls, s: str) -> "Object":
        representation = Representation.detect(s)
        if representation is Representation.ADDRESS:
            return cls(ObjectKind.ADDRESS, Address.parse(s))
        if representation in (
            Representation.DECIMAL,
            Representation.DEGREE,
            Representation.PERCENTILE,
            Representation.NAME,
        ):
            return cls(ObjectKind.SAT, Sat.parse(s))
        if representation is Representation.HASH:
            if not _HASH_PATTERN.fullmatch(s):
                raise ValueError(f"invalid hash: {s}")
            return cls(ObjectKind.HASH, bytes.fromhex(s))
        if representation is Representation.INSCRIPTION_ID:
            return cls(ObjectKind.INSCRIPTION_ID, InscriptionId.parse(s))
        if representation is Representation.INTEGER:
            if not s:
                raise ValueError("cannot parse integer from empty string")
            value = int(s)
            if value > _U128_MAX:
                raise ValueError("number too large")
            return cls(ObjectKind.INTEGER, value)
        if representation is Representation.OUT_POINT:
            return cls(ObjectKind.OUT_POINT, OutPoint.parse(s))
        return cls(ObjectKind.SAT_POINT, SatPoint.parse(s))

    def __str__(self) -> str:
        if isinstance(self.value, bytes):
            return self.value.hex()
        return str(self.value)