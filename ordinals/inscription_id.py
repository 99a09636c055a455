"""Inscription identifiers of the form ``<txid>i<index>``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .sat_point import parse_txid

_TXID_LEN = 64
_MIN_LEN = _TXID_LEN + 2
_INDEX_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


class ParseErrorKind(enum.Enum):
    CHARACTER = "character"
    LENGTH = "length"
    SEPARATOR = "separator"
    TXID = "txid"
    INDEX = "index"


class InscriptionIdParseError(ValueError):
    """Raised when a string is not a valid inscription id."""

    def __init__(self, kind: ParseErrorKind, detail: object) -> None:
        self.kind = kind
        self.detail = detail
        messages = {
            ParseErrorKind.CHARACTER: f"invalid character: '{detail}'",
            ParseErrorKind.LENGTH: f"invalid length: {detail}",
            ParseErrorKind.SEPARATOR: f"invalid seprator: `{detail}`",
            ParseErrorKind.TXID: f"invalid txid: {detail}",
            ParseErrorKind.INDEX: f"invalid index: {detail}",
        }
        super().__init__(messages[kind])


@dataclass(frozen=True)
class InscriptionId:
    txid: str
    index: int

    @classmethod
    def parse(cls, s: str) -> "InscriptionId":
        for char in s:
            if not char.isascii():
                raise InscriptionIdParseError(ParseErrorKind.CHARACTER, char)
        if len(s) < _MIN_LEN:
            raise InscriptionIdParseError(ParseErrorKind.LENGTH, len(s))
        separator = s[_TXID_LEN]
        if separator != "i":
            raise InscriptionIdParseError(ParseErrorKind.SEPARATOR, separator)
        try:
            txid = parse_txid(s[:_TXID_LEN])
        except ValueError as err:
            raise InscriptionIdParseError(ParseErrorKind.TXID, err) from None
        vout = s[_TXID_LEN + 1 :]
        if not _INDEX_PATTERN.fullmatch(vout) or int(vout) > _U32_MAX:
            raise InscriptionIdParseError(ParseErrorKind.INDEX, vout)
        return cls(txid, int(vout))

    def __str__(self) -> str:
        return f"{self.txid}i{self.index}"