"""Module grammar: a named block holding one or more definitions."""
from __future__ import annotations

from typing import TypeVar

from pzscript.ast.nodes import ModuleBlock
from pzscript.grammar.grammar import MODULE_TAG
from pzscript.parser.block import named_block_repeated
from pzscript.parser.combinators import Parser, map_value

T = TypeVar("T")


def module(item: Parser[T]) -> Parser[ModuleBlock[T]]:
    """Return a parser for ``module Name { item item ... }``.

    ``item`` parses a single definition and is usually a block parser
    itself, e.g. ``module(item_definition)``.
    """
    return map_value(named_block_repeated(MODULE_TAG, item), ModuleBlock.from_parsed)
