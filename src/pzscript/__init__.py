"""pzscript: parser for block-structured game script definitions.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import pzscript

    recipe = pzscript.parse_recipe('''
        recipe Make Mildew Cure
        {
          GardeningSprayEmpty,
          Base.Milk,

          Result:GardeningSprayMilk,
          Time:40.0,
          Category:Farming,
          NeedToBeLearn:true,
        }
    ''')
    recipe.ingredients
    ('GardeningSprayEmpty', 'Base.Milk')

    # Modules take the parser for their definitions
    base = pzscript.parse_module(source, pzscript.item)

    # A whole script file: modules holding items and recipes
    script = pzscript.parse_script(source)
"""
from __future__ import annotations

from pzscript.ast.nodes import Item, Module, ModuleBlock, Recipe
from pzscript.parser import (
    ErrorKind,
    ParseError,
    Parser,
    Position,
    definition,
    item,
    module,
    named_block,
    named_block_repeated,
    parse,
    parse_item,
    parse_module,
    parse_recipe,
    parse_script,
    recipe,
    script,
    unnamed_block,
)

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    "Item",
    "Module",
    "ModuleBlock",
    "Recipe",
    "ErrorKind",
    "ParseError",
    "Parser",
    "Position",
    "definition",
    "item",
    "module",
    "named_block",
    "named_block_repeated",
    "unnamed_block",
    "recipe",
    "script",
    "parse",
    "parse_item",
    "parse_module",
    "parse_recipe",
    "parse_script",
]
