"""Atom recognizers: identifiers, booleans and floating-point numbers."""
from __future__ import annotations

import math
import re
import struct
from typing import Final

from pzscript.parser.combinators import Parser, alt, map_value, regex, tag
from pzscript.parser.errors import ErrorKind, failure

_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# Alphanumeric runs plus ``.`` for namespaced names such as ``Base.Milk``.
identifier: Parser[str] = regex(r"[A-Za-z0-9.]+", "identifier")

bool_value: Parser[bool] = alt(
    map_value(tag("true"), lambda _: True),
    map_value(tag("false"), lambda _: False),
)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def float_value(text: str, pos: int) -> tuple[float, int]:
    """Recognize a signed float literal and convert it to 32-bit precision.

    Raises
    ------
    ParseError
        With ``ErrorKind.CONVERSION`` if the literal is outside the range of
        a 32-bit float.
    """
    match = _FLOAT.match(text, pos)
    if match is None:
        raise failure(text, pos, "number")
    literal = match.group()
    try:
        value = float(literal)
        if not math.isfinite(value):
            raise OverflowError(literal)
        value = _to_float32(value)
    except OverflowError:
        raise failure(
            text,
            pos,
            "number",
            message=f"number {literal!r} does not fit in a 32-bit float",
            kind=ErrorKind.CONVERSION,
        ) from None
    return value, match.end()
