"""Command-line entry point and the offline subcommands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .object import Object
from .rarity import Rarity
from .sat import Sat, epoch_starting_sats
from .sat_point import OutPoint


@dataclass(frozen=True)
class ListOutput:
    """One range of satoshis held by an output."""

    output: OutPoint
    start: int
    end: int
    size: int
    offset: int
    rarity: Rarity
    name: str

    def to_json(self) -> dict:
        return {
            "output": str(self.output),
            "start": self.start,
            "end": self.end,
            "size": self.size,
            "offset": self.offset,
            "rarity": str(self.rarity),
            "name": self.name,
        }


def list_ranges(outpoint: OutPoint, ranges: Iterable[Tuple[int, int]]) -> List[ListOutput]:
    """Describe each sat range of an output, with its offset inside the output."""
    outputs = []
    offset = 0
    for start, end in ranges:
        size = end - start
        sat = Sat(start)
        outputs.append(
            ListOutput(
                output=outpoint,
                start=start,
                end=end,
                size=size,
                offset=offset,
                rarity=sat.rarity(),
                name=sat.name(),
            )
        )
        offset += size
    return outputs


def run_epochs() -> dict:
    """The first satoshi of each reward epoch."""
    return {"starting_sats": [sat.n for sat in epoch_starting_sats()]}


def run_parse(text: str) -> dict:
    """Parse an object from ordinal notation."""
    return {"object": str(Object.parse(text))}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordinals")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("epochs", help="List the first satoshis of each reward epoch")
    parse = commands.add_parser("parse", help="Parse a satoshi from ordinal notation")
    parse.add_argument("object", help="Parse <OBJECT>.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "epochs":
            output = run_epochs()
        else:
            output = run_parse(args.object)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        cause = err.__cause__
        while cause is not None:
            print(f"because: {cause}", file=sys.stderr)
            cause = cause.__cause__
        return 1
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0