"""Entry points that run a grammar over a complete source string.

The combinators work on ``(text, pos)`` and may stop anywhere in the
input. The functions here apply a grammar to a whole document: leading
and trailing whitespace is skipped and any other leftover text is an
error.
"""
from __future__ import annotations

import logging
from typing import TypeVar

from pzscript.ast.nodes import Item, Module, ModuleBlock, Recipe
from pzscript.parser.combinators import Parser, all_consuming, delimited, multispace0
from pzscript.parser.errors import ParseError
from pzscript.parser.item import item as item_grammar
from pzscript.parser.module import module
from pzscript.parser.recipe import recipe
from pzscript.parser.script import definition, script

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse(source: str, grammar: Parser[T]) -> T:
    """Parse the whole of ``source`` with ``grammar``.

    Parameters
    ----------
    source:
        Complete source text.
    grammar:
        Any parser, e.g. ``recipe`` or ``module(item)``.

    Returns
    -------
    T
        The value produced by ``grammar``.

    Raises
    ------
    ParseError
        If ``grammar`` fails or does not consume the whole input.
    """
    logger.debug("Parsing %d characters", len(source))
    try:
        value, _ = all_consuming(delimited(multispace0, grammar, multispace0))(source, 0)
    except ParseError as exc:
        logger.debug("Parse failed at %s: %s", exc.position, exc.message)
        raise
    logger.debug("Parsed %s", type(value).__name__)
    return value


def parse_module(source: str, item: Parser[T]) -> ModuleBlock[T]:
    """Parse a single ``module Name { ... }`` block whose items use ``item``."""
    return parse(source, module(item))


def parse_recipe(source: str) -> Recipe:
    """Parse a single ``recipe Name { ... }`` block."""
    return parse(source, recipe)


def parse_item(source: str) -> Item:
    """Parse a single ``item Name { ... }`` block."""
    return parse(source, item_grammar)


def parse_script(source: str, item: Parser[T] = definition) -> Module[T]:
    """Parse a script made of one or more module blocks."""
    logger.debug("Parsing script of %d characters", len(source))
    modules, _ = script(item)(source, 0)
    logger.debug("Parsed %d module block(s)", len(modules.blocks))
    return modules
