#!/usr/bin/env python3
"""Example: Custom block grammars

The block combinators take the parser for the block body, so new block
kinds are built by composition. This example parses a module of
``sound`` blocks with a hand-written body, and an unnamed ``imports``
block.

Usage:
    python examples/02_custom_blocks.py

Requirements:
    pip install pzscript
"""
from __future__ import annotations

from dataclasses import dataclass

import pzscript
from pzscript.parser import field_value, identifier, named_block, unnamed_block
from pzscript.parser.combinators import map_value, multispace1, separated_list1, terminated, tag

SOUND_MODULE = '''
module Sounds {
  sound Door Bang {
    File = DoorBang,
  }
  sound Window Smash
  {
    File = WindowSmash,
  }
}
'''

IMPORTS = '''
imports
{
  Base,
  Farming,
}
'''


@dataclass(frozen=True)
class Sound:
    name: str
    file: str


sound = map_value(
    named_block("sound", field_value("File", "=", identifier)),
    lambda parsed: Sound(name=parsed[0], file=parsed[1]),
)

imports = unnamed_block("imports", separated_list1(multispace1, terminated(identifier, tag(","))))


def main() -> None:
    sounds = pzscript.parse_module(SOUND_MODULE, sound)
    print(f"Module '{sounds.name}':")
    for entry in sounds.definitions:
        print(f"  {entry.name!r} plays {entry.file}")

    print(f"Imports: {pzscript.parse(IMPORTS, imports)}")


if __name__ == "__main__":
    main()
