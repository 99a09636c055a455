"""Recognition of the textual notation an object is written in."""

from __future__ import annotations

import enum
import re

_XDIGIT = "[0-9A-Fa-f]"


class Representation(enum.Enum):
    ADDRESS = r"^(bc|BC|tb|TB|bcrt|BCRT)1.*$"
    DECIMAL = r"^.*\..*$"
    DEGREE = r"^.*°.*′.*″(.*‴)?$"
    HASH = rf"^{_XDIGIT}{{64}}$"
    INSCRIPTION_ID = rf"^{_XDIGIT}{{64}}i\d+$"
    INTEGER = r"^[0-9]*$"
    NAME = r"^[a-z]{1,11}$"
    OUT_POINT = rf"^{_XDIGIT}{{64}}:\d+$"
    PERCENTILE = r"^.*%$"
    SAT_POINT = rf"^{_XDIGIT}{{64}}:\d+:\d+$"

    @property
    def pattern(self) -> str:
        return self.value

    @classmethod
    def detect(cls, s: str) -> "Representation":
        """Return the first representation whose pattern matches ``s``."""
        for representation in cls:
            if _COMPILED[representation].fullmatch(s):
                return representation
        raise ValueError("unrecognized object")


_COMPILED = {r: re.compile(r.value) for r in Representation}