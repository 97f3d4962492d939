"""Game script parser.

Exports the block combinators, the domain grammars, the whole-document
``parse`` helpers and the parse error types.
"""
from __future__ import annotations

from pzscript.parser.atoms import bool_value, float_value, identifier
from pzscript.parser.block import (
    block,
    block_name,
    named_block,
    named_block_repeated,
    unnamed_block,
)
from pzscript.parser.combinators import Parser
from pzscript.parser.errors import ErrorKind, ParseError, Position
from pzscript.parser.fields import field_value, fields_in_order
from pzscript.parser.item import item
from pzscript.parser.module import module
from pzscript.parser.parser import (
    parse,
    parse_item,
    parse_module,
    parse_recipe,
    parse_script,
)
from pzscript.parser.recipe import recipe
from pzscript.parser.script import definition, script

__all__ = [
    "Parser",
    "ParseError",
    "ErrorKind",
    "Position",
    "identifier",
    "bool_value",
    "float_value",
    "block",
    "block_name",
    "unnamed_block",
    "named_block",
    "named_block_repeated",
    "field_value",
    "fields_in_order",
    "module",
    "item",
    "recipe",
    "definition",
    "script",
    "parse",
    "parse_module",
    "parse_recipe",
    "parse_item",
    "parse_script",
]
