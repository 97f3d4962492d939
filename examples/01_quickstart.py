#!/usr/bin/env python3
"""Example: Quickstart for pzscript

Minimal working example: parse a script file made of modules holding
items and recipes, then look at the parsed values.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install pzscript
"""
from __future__ import annotations

import pzscript

SCRIPT_SOURCE = '''
module Base {
  item RedRadish {
    DisplayCategory = Food,
    Type            = Food,
    DisplayName     = Radish,
    Icon            = Radish,
  }

  recipe Make Mildew Cure
  {
    GardeningSprayEmpty,
    Base.Milk,

    Result:GardeningSprayMilk,
    Time:40.0,
    Category:Farming,
    NeedToBeLearn:true,
  }
}
'''


def main() -> None:
    print(f"pzscript version: {pzscript.__version__}")

    # Step 1: Parse the whole script
    script = pzscript.parse_script(SCRIPT_SOURCE)
    for block in script.blocks:
        print(f"Module '{block.name}': {len(block.definitions)} definition(s)")

        # Step 2: Walk the definitions
        for definition in block.definitions:
            if isinstance(definition, pzscript.Recipe):
                print(f"  recipe '{definition.name}' -> {definition.result} "
                      f"({', '.join(definition.ingredients)}; {definition.time}s)")
            else:
                print(f"  item '{definition.name}' ({definition.display_name})")

    # Step 3: Errors carry the position of the failure
    try:
        pzscript.parse_recipe("recipe Broken {\n  Water,\n  Time:1,\n}")
    except pzscript.ParseError as exc:
        print(f"\nExpected failure: {exc}")


if __name__ == "__main__":
    main()
