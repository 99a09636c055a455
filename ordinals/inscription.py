"""Inscriptions: content embedded in taproot witness scripts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .media import Media, content_type_for_path
from .sat_point import OutPoint
from .script import (
    OP_ENDIF,
    OP_FALSE,
    OP_IF,
    Instruction,
    ScriptBuilder,
    ScriptError,
    instructions,
)

PROTOCOL_ID = b"ord"
BODY_TAG = b""
CONTENT_TYPE_TAG = b"\x01"
TAPROOT_ANNEX_PREFIX = 0x50
_CHUNK_SIZE = 520


class Curse(enum.Enum):
    NOT_IN_FIRST_INPUT = "not_in_first_input"
    NOT_AT_OFFSET_ZERO = "not_at_offset_zero"
    REINSCRIPTION = "reinscription"
    UNRECOGNIZED_EVEN_FIELD = "unrecognized_even_field"


class InscriptionErrorKind(enum.Enum):
    EMPTY_WITNESS = "empty witness"
    INVALID_INSCRIPTION = "invalid inscription"
    KEY_PATH_SPEND = "key path spend"
    SCRIPT = "script error"


class InscriptionError(ValueError):
    """Raised when a witness does not hold well-formed inscriptions."""

    def __init__(
        self, kind: InscriptionErrorKind, script_error: Optional[ScriptError] = None
    ) -> None:
        self.kind = kind
        self.script_error = script_error
        message = kind.value if script_error is None else f"{kind.value}: {script_error}"
        super().__init__(message)


@dataclass(frozen=True)
class Inscription:
    body: Optional[bytes] = None
    content_type: Optional[bytes] = None
    unrecognized_even_field: bool = False

    @classmethod
    def from_transaction(cls, tx: "Transaction") -> List["TransactionInscription"]:
        """All inscriptions in a transaction's inputs; unparsable inputs are skipped."""
        result = []
        for index, tx_in in enumerate(tx.inputs):
            try:
                inscriptions = parse_witness(tx_in.witness)
            except InscriptionError:
                continue
            result.extend(
                TransactionInscription(inscription, index, offset)
                for offset, inscription in enumerate(inscriptions)
            )
        return result

    @classmethod
    def from_file(
        cls, path: Union[str, Path], content_size_limit: Optional[int] = None
    ) -> "Inscription":
        """Build an inscription from a file, typing it by its extension."""
        path = Path(path)
        try:
            body = path.read_bytes()
        except OSError as err:
            raise OSError(f"io error reading {path}") from err
        if content_size_limit is not None and len(body) > content_size_limit:
            raise ValueError(
                f"content size of {len(body)} bytes exceeds "
                f"{content_size_limit} byte limit for inscriptions"
            )
        content_type = content_type_for_path(path)
        return cls(body=body, content_type=content_type.encode())

    def _append_to_builder(self, builder: ScriptBuilder) -> ScriptBuilder:
        builder.push_opcode(OP_FALSE).push_opcode(OP_IF).push_slice(PROTOCOL_ID)
        if self.content_type is not None:
            builder.push_slice(CONTENT_TYPE_TAG).push_slice(self.content_type)
        if self.body is not None:
            builder.push_slice(BODY_TAG)
            for start in range(0, len(self.body), _CHUNK_SIZE):
                builder.push_slice(self.body[start : start + _CHUNK_SIZE])
        return builder.push_opcode(OP_ENDIF)

    def append_reveal_script(self, builder: ScriptBuilder) -> bytes:
        """Append this inscription's envelope to ``builder`` and return the script."""
        return self._append_to_builder(builder).into_script()

    def media(self) -> Media:
        if self.body is None:
            return Media.UNKNOWN
        content_type = self.content_type_str()
        if content_type is None:
            return Media.UNKNOWN
        try:
            return Media.parse(content_type)
        except ValueError:
            return Media.UNKNOWN

    def content_length(self) -> Optional[int]:
        return None if self.body is None else len(self.body)

    def content_type_str(self) -> Optional[str]:
        if self.content_type is None:
            return None
        try:
            return self.content_type.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def to_witness(self) -> List[bytes]:
        return [self.append_reveal_script(ScriptBuilder()), b""]


@dataclass(frozen=True)
class TransactionInscription:
    inscription: Inscription
    tx_in_index: int
    tx_in_offset: int


@dataclass
class TxIn:
    witness: Sequence[bytes] = ()
    previous_output: Optional[OutPoint] = None
    script_sig: bytes = b""
    sequence: int = 0


@dataclass
class Transaction:
    inputs: List[TxIn] = field(default_factory=list)
    outputs: list = field(default_factory=list)
    version: int = 0
    lock_time: int = 0


class _NoInscription(Exception):
    """The script ran out before another envelope was found."""


_ENVELOPE_START = (
    Instruction.push(b""),
    Instruction.op(OP_IF),
    Instruction.push(PROTOCOL_ID),
)
_ENDIF = Instruction.op(OP_ENDIF)
_EMPTY = object()


class _Parser:
    def __init__(self, script: bytes) -> None:
        self._instructions = instructions(script)
        self._peeked: object = _EMPTY

    def _peek(self) -> object:
        if self._peeked is _EMPTY:
            try:
                self._peeked = next(self._instructions, None)
            except ScriptError as err:
                self._peeked = err
        return self._peeked

    def _advance(self) -> Instruction:
        item = self._peek()
        self._peeked = _EMPTY
        if item is None:
            raise _NoInscription
        if isinstance(item, ScriptError):
            raise InscriptionError(InscriptionErrorKind.SCRIPT, item) from item
        return item

    def _accept(self, expected: Instruction) -> bool:
        item = self._peek()
        if item is None:
            return False
        if isinstance(item, ScriptError):
            raise InscriptionError(InscriptionErrorKind.SCRIPT, item) from item
        if item == expected:
            self._advance()
            return True
        return False

    def _expect_push(self) -> bytes:
        instruction = self._advance()
        if not instruction.is_push:
            raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)
        return instruction.data

    def _match(self, expected: Sequence[Instruction]) -> bool:
        return all(self._advance() == instruction for instruction in expected)

    def inscriptions(self) -> Iterator[Inscription]:
        while True:
            try:
                yield self._parse_one()
            except _NoInscription:
                return

    def _parse_one(self) -> Inscription:
        while not self._match(_ENVELOPE_START):
            pass

        fields: dict = {}
        while True:
            instruction = self._advance()
            if instruction.is_push and instruction.data == BODY_TAG:
                body = bytearray()
                while not self._accept(_ENDIF):
                    body += self._expect_push()
                fields[BODY_TAG] = bytes(body)
                break
            if instruction.is_push:
                if instruction.data in fields:
                    raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)
                fields[instruction.data] = self._expect_push()
            elif instruction == _ENDIF:
                break
            else:
                raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)

        body = fields.pop(BODY_TAG, None)
        content_type = fields.pop(CONTENT_TYPE_TAG, None)
        even = any(tag and tag[0] % 2 == 0 for tag in fields)
        return Inscription(body=body, content_type=content_type, unrecognized_even_field=even)


def parse_witness(witness: Sequence[bytes]) -> List[Inscription]:
    """Extract every inscription from a script-path spend's witness."""
    witness = list(witness)
    if not witness:
        raise InscriptionError(InscriptionErrorKind.EMPTY_WITNESS)
    if len(witness) == 1:
        raise InscriptionError(InscriptionErrorKind.KEY_PATH_SPEND)
    last = witness[-1]
    annex = bool(last) and last[0] == TAPROOT_ANNEX_PREFIX
    if len(witness) == 2 and annex:
        raise InscriptionError(InscriptionErrorKind.KEY_PATH_SPEND)
    script = witness[-1] if annex else witness[-2]
    return list(_Parser(bytes(script)).inscriptions())