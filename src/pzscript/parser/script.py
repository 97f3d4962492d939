"""Whole-script grammar: one or more module blocks filling the input."""
from __future__ import annotations

from typing import Any, TypeVar

from pzscript.ast.nodes import Module
from pzscript.parser.combinators import (
    Parser,
    all_consuming,
    alt,
    delimited,
    map_value,
    multispace0,
    multispace1,
    separated_list1,
)
from pzscript.parser.item import item
from pzscript.parser.module import module
from pzscript.parser.recipe import recipe

T = TypeVar("T")

# Default module content: items and recipes in any order.
definition: Parser[Any] = alt(item, recipe)


def script(item_parser: Parser[T] = definition) -> Parser[Module[T]]:
    """Return a parser for a complete script made of module blocks.

    Leading and trailing whitespace is allowed; anything else after the
    last module fails the parse.
    """
    blocks = separated_list1(multispace1, module(item_parser))
    return map_value(
        all_consuming(delimited(multispace0, blocks, multispace0)),
        lambda parsed: Module(blocks=tuple(parsed)),
    )
