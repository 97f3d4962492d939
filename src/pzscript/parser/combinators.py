"""Primitive parser combinators.

A parser is any callable ``parser(text, pos)`` that returns a
``(value, new_pos)`` pair on success and raises ``ParseError`` on failure.
Parsers never mutate shared state, so a parser object may be built once at
import time and reused for any number of inputs.

The combinators below are the building blocks for the block grammar in
``pzscript.parser.block`` and the domain grammars layered on top of it.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeVar

from pzscript.parser.errors import ErrorKind, ParseError, failure

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], tuple[T, int]]

# ---------------------------------------------------------------------------
# Terminals
# ---------------------------------------------------------------------------


def tag(literal: str) -> Parser[str]:
    """Match ``literal`` exactly (case-sensitive)."""
    expected = repr(literal)

    def parser(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(literal, pos):
            return literal, pos + len(literal)
        rest = text[pos : pos + len(literal)]
        if len(rest) < len(literal) and literal.startswith(rest):
            raise failure(text, pos, expected, kind=ErrorKind.INCOMPLETE)
        raise failure(text, pos, expected)

    return parser


def regex(pattern: str | re.Pattern[str], expected: str) -> Parser[str]:
    """Match ``pattern`` anchored at the current position.

    A pattern that can match the empty string never fails.
    """
    compiled = re.compile(pattern)

    def parser(text: str, pos: int) -> tuple[str, int]:
        match = compiled.match(text, pos)
        if match is None:
            raise failure(text, pos, expected)
        return match.group(), match.end()

    return parser


# Horizontal whitespace only.
space0: Parser[str] = regex(r"[ \t]*", "whitespace")
space1: Parser[str] = regex(r"[ \t]+", "whitespace")

# Any whitespace, line breaks included.
multispace0: Parser[str] = regex(r"[ \t\r\n]*", "whitespace")
multispace1: Parser[str] = regex(r"[ \t\r\n]+", "whitespace")


def eof(text: str, pos: int) -> tuple[None, int]:
    """Succeed only at the end of the input."""
    if pos != len(text):
        raise failure(text, pos, "end of input")
    return None, pos


# ---------------------------------------------------------------------------
# Sequencing
# ---------------------------------------------------------------------------


def pair(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Run ``first`` then ``second`` and return both results."""

    def parser(text: str, pos: int) -> tuple[tuple[T, U], int]:
        a, pos = first(text, pos)
        b, pos = second(text, pos)
        return (a, b), pos

    return parser


def preceded(first: Parser[Any], second: Parser[T]) -> Parser[T]:
    """Run ``first`` then ``second``, keeping only the result of ``second``."""

    def parser(text: str, pos: int) -> tuple[T, int]:
        _, pos = first(text, pos)
        return second(text, pos)

    return parser


def terminated(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Run ``first`` then ``second``, keeping only the result of ``first``."""

    def parser(text: str, pos: int) -> tuple[T, int]:
        value, pos = first(text, pos)
        _, pos = second(text, pos)
        return value, pos

    return parser


def delimited(open_: Parser[Any], item: Parser[T], close: Parser[Any]) -> Parser[T]:
    """Run ``open_``, ``item`` and ``close``, keeping the result of ``item``."""
    return preceded(open_, terminated(item, close))


def map_value(inner: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """Apply ``func`` to the result of ``inner``."""

    def parser(text: str, pos: int) -> tuple[U, int]:
        value, pos = inner(text, pos)
        return func(value), pos

    return parser


def all_consuming(inner: Parser[T]) -> Parser[T]:
    """Run ``inner`` and require that it consumed the whole input."""
    return terminated(inner, eof)


# ---------------------------------------------------------------------------
# Choice, repetition and commitment
# ---------------------------------------------------------------------------


def _furthest(text: str, errors: list[ParseError]) -> ParseError:
    """Pick the error that got furthest into the input.

    Expectations of errors tied at the furthest offset are merged.
    """
    offset = max(err.offset for err in errors)
    best = [err for err in errors if err.offset == offset]
    if len(best) == 1:
        return best[0]
    expected = " or ".join(dict.fromkeys(err.expected for err in best))
    if any(err.kind is ErrorKind.INCOMPLETE for err in best):
        kind = ErrorKind.INCOMPLETE
    else:
        kind = best[0].kind
    return failure(text, offset, expected, kind=kind)


def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try each parser in order and return the first success.

    A committed failure is raised immediately without trying the remaining
    alternatives. If every alternative fails, the failure that got furthest
    into the input is raised.
    """
    if not parsers:
        raise ValueError("alt() needs at least one parser")

    def parser(text: str, pos: int) -> tuple[Any, int]:
        errors: list[ParseError] = []
        for candidate in parsers:
            try:
                return candidate(text, pos)
            except ParseError as exc:
                if exc.committed:
                    raise
                errors.append(exc)
        raise _furthest(text, errors)

    return parser


def separated_list1(separator: Parser[Any], item: Parser[T]) -> Parser[list[T]]:
    """Parse one or more ``item`` separated by ``separator``.

    The first item is mandatory. After that, an uncommitted failure of
    either the separator or the following item ends the list, and the
    position is rewound to just after the last successful item.
    """

    def parser(text: str, pos: int) -> tuple[list[T], int]:
        value, pos = item(text, pos)
        values = [value]
        while True:
            try:
                _, after_sep = separator(text, pos)
                value, after_item = item(text, after_sep)
            except ParseError as exc:
                if exc.committed:
                    raise
                return values, pos
            if after_item == pos:
                return values, pos
            values.append(value)
            pos = after_item

    return parser


def cut(inner: Parser[T]) -> Parser[T]:
    """Mark every failure of ``inner`` as committed."""

    def parser(text: str, pos: int) -> tuple[T, int]:
        try:
            return inner(text, pos)
        except ParseError as exc:
            raise exc.commit() from None

    return parser
