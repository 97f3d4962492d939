"""Block grammar: ``tag [name] { body }`` constructs.

The functions here are higher-order: each takes the parser for the block
body and returns a new parser. Nesting is plain composition, e.g.::

    named_block_repeated("module", named_block("item", item_body))

parses a module whose body is a whitespace-separated list of items.

Once a block's tag and the whitespace after it have matched, the rest of
the block is committed (see ``cut``): a failure deeper inside is reported
where it happened instead of being taken as the end of an enclosing list.
"""
from __future__ import annotations

from typing import TypeVar

from pzscript.parser.combinators import (
    Parser,
    cut,
    delimited,
    multispace1,
    pair,
    preceded,
    separated_list1,
    space1,
    tag,
    terminated,
)
from pzscript.parser.errors import ErrorKind, failure

T = TypeVar("T")


def block_name(text: str, pos: int) -> tuple[str, int]:
    """Extract a block name that may contain interior spaces.

    Everything up to the first ``{`` is taken, the single separator
    character right before the brace is dropped and trailing whitespace
    is trimmed. The returned position is just past the name, so the
    whitespace before the brace is left for the caller.

    A name can never contain ``{``.
    """
    brace = text.find("{", pos)
    if brace == -1:
        raise failure(
            text,
            pos,
            "'{'",
            message="missing open brace after block name",
            kind=ErrorKind.INCOMPLETE,
        )
    name = text[pos:brace][:-1].rstrip()
    if not name:
        raise failure(text, pos, "block name")
    return name, pos + len(name)


def block(item: Parser[T]) -> Parser[T]:
    """Parse ``{ item }`` with mandatory whitespace inside both braces."""
    return delimited(pair(tag("{"), multispace1), item, pair(multispace1, tag("}")))


def unnamed_block(block_tag: str, item: Parser[T]) -> Parser[T]:
    """Parse ``block_tag { item }``; the brace may sit on the next line."""
    return preceded(pair(tag(block_tag), multispace1), cut(block(item)))


def named_block(block_tag: str, item: Parser[T]) -> Parser[tuple[str, T]]:
    """Parse ``block_tag Name { item }`` and return ``(name, item_result)``.

    The block is committed once ``block_tag`` and the whitespace after it
    have matched: any later failure is raised as committed, so an enclosing
    ``alt`` does not try its other branches. Two alternatives that share a
    tag, e.g. ``alt(named_block("item", a), named_block("item", b))``, never
    reach ``b``. Dispatch on the body inside one block instead, as in
    ``named_block("item", alt(a, b))``.
    """
    return preceded(
        pair(tag(block_tag), space1),
        cut(pair(terminated(block_name, multispace1), block(item))),
    )


def named_block_repeated(block_tag: str, item: Parser[T]) -> Parser[tuple[str, list[T]]]:
    """Parse ``block_tag Name { item item ... }`` with one or more items.

    Items are separated by whitespace only.
    """
    return named_block(block_tag, separated_list1(multispace1, item))
