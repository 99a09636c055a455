"""What a wallet send command is asked to send."""

from __future__ import annotations

from typing import Union

from .amount import Amount
from .inscription_id import InscriptionId
from .sat_point import SatPoint

Outgoing = Union[Amount, InscriptionId, SatPoint]


def parse_outgoing(s: str) -> Outgoing:
    """Parse a satpoint, an inscription id, or an amount such as ``5sat``."""
    if ":" in s:
        return SatPoint.parse(s)
    if len(s) >= 66:
        return InscriptionId.parse(s)
    if " " in s:
        return Amount.parse(s)
    for i, c in enumerate(s):
        if c.isalpha():
            return Amount.parse(s[:i] + " " + s[i:])
    return Amount.parse(s)