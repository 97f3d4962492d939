"""Field-value grammar: ``Name <sep> value,``."""
from __future__ import annotations

from typing import TypeVar

from pzscript.parser.combinators import (
    Parser,
    delimited,
    multispace1,
    pair,
    preceded,
    space0,
    tag,
    terminated,
)

T = TypeVar("T")


def field_value(field_name: str, separator: str, value: Parser[T]) -> Parser[T]:
    """Parse one comma-terminated field and return the parsed value.

    Spaces are allowed before the name and around the separator. The
    trailing comma is mandatory, also for the last field of a block.
    Each call site fixes the name, separator and value type, so a body
    built from these parsers has a fixed schema.
    """
    key = preceded(space0, tag(field_name))
    sep = delimited(space0, tag(separator), space0)
    return terminated(preceded(pair(key, sep), value), tag(","))


def fields_in_order(fields: list[tuple[str, str, Parser[object]]]) -> Parser[list[object]]:
    """Parse ``fields`` in exactly the given order, separated by whitespace.

    ``fields`` holds ``(field name, separator, value parser)`` triples. A
    field that is missing, out of place or unknown fails the parse.
    """
    if not fields:
        raise ValueError("fields_in_order() needs at least one field")
    parsers = [field_value(name, separator, value) for name, separator, value in fields]

    def parser(text: str, pos: int) -> tuple[list[object], int]:
        values: list[object] = []
        for index, field in enumerate(parsers):
            if index:
                _, pos = multispace1(text, pos)
            value, pos = field(text, pos)
            values.append(value)
        return values, pos

    return parser
