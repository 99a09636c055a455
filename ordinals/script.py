"""A minimal reader and writer of Bitcoin script: pushes and opcodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

OP_FALSE = 0x00
OP_PUSHDATA1 = 0x4C
OP_PUSHDATA2 = 0x4D
OP_PUSHDATA4 = 0x4E
OP_IF = 0x63
OP_ENDIF = 0x68
OP_CHECKSIG = 0xAC

_MAX_DIRECT_PUSH = 0x4B


class ScriptError(ValueError):
    """Raised when a script cannot be decoded into instructions."""


@dataclass(frozen=True)
class Instruction:
    """Either a data push (``data`` set) or a bare opcode (``opcode`` set)."""

    data: Optional[bytes] = None
    opcode: Optional[int] = None

    @classmethod
    def push(cls, data: bytes) -> "Instruction":
        return cls(data=bytes(data))

    @classmethod
    def op(cls, opcode: int) -> "Instruction":
        return cls(opcode=opcode)

    @property
    def is_push(self) -> bool:
        return self.data is not None


def instructions(script: bytes) -> Iterator[Instruction]:
    """Decode ``script`` into instructions, raising ScriptError if it is truncated."""
    script = bytes(script)
    length = len(script)
    pos = 0
    while pos < length:
        opcode = script[pos]
        pos += 1
        if opcode <= _MAX_DIRECT_PUSH:
            size = opcode
        elif opcode in (OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4):
            width = {OP_PUSHDATA1: 1, OP_PUSHDATA2: 2, OP_PUSHDATA4: 4}[opcode]
            if pos + width > length:
                raise ScriptError("early end of script")
            size = int.from_bytes(script[pos : pos + width], "little")
            pos += width
        else:
            yield Instruction.op(opcode)
            continue
        if pos + size > length:
            raise ScriptError("early end of script")
        yield Instruction.push(script[pos : pos + size])
        pos += size


class ScriptBuilder:
    """Accumulates opcodes and minimally encoded data pushes into a script."""

    def __init__(self) -> None:
        self._script = bytearray()

    def push_opcode(self, opcode: int) -> "ScriptBuilder":
        if not 0 <= opcode <= 0xFF:
            raise ValueError(f"invalid opcode: {opcode}")
        self._script.append(opcode)
        return self

    def push_slice(self, data: bytes) -> "ScriptBuilder":
        data = bytes(data)
        size = len(data)
        if size <= _MAX_DIRECT_PUSH:
            self._script.append(size)
        elif size < 0x100:
            self._script += bytes([OP_PUSHDATA1, size])
        elif size < 0x10000:
            self._script.append(OP_PUSHDATA2)
            self._script += size.to_bytes(2, "little")
        elif size < 0x100000000:
            self._script.append(OP_PUSHDATA4)
            self._script += size.to_bytes(4, "little")
        else:
            raise ValueError("push too large")
        self._script += data
        return self

    def into_script(self) -> bytes:
        return bytes(self._script)