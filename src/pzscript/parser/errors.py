"""Parse error types for the pzscript parser.

Every failure carries the source position where it happened and a short
description of the construct that was expected there, so that the CLI can
point at the exact offending character.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, auto
from functools import cached_property


class ErrorKind(Enum):
    """Classification of a parse failure.

    SYNTAX
        An expected token, tag or brace was not found at the position.
    INCOMPLETE
        The input ended in the middle of a construct.
    CONVERSION
        A lexically valid atom could not be converted to its value type,
        e.g. a numeral outside the 32-bit float range.
    """

    SYNTAX = auto()
    INCOMPLETE = auto()
    CONVERSION = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """A location in the source text.

    Parameters
    ----------
    offset:
        0-based character offset.
    line:
        1-based line number.
    col:
        1-based column number.
    """

    offset: int
    line: int
    col: int

    @classmethod
    def of(cls, text: str, offset: int) -> "Position":
        """Compute the line and column of ``offset`` within ``text``."""
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(
            offset=offset,
            line=text.count("\n", 0, offset) + 1,
            col=offset - line_start + 1,
        )

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class ParseError(Exception):
    """A single parse failure with location and expectation.

    Only the character offset is recorded while parsing. Line and column
    are resolved from ``source`` the first time ``position`` is read.

    Parameters
    ----------
    message:
        Human-readable description of the error.
    offset:
        0-based character offset of the failure.
    expected:
        The construct that was expected at ``offset``.
    kind:
        Failure classification, see ``ErrorKind``.
    committed:
        ``True`` once the failure happened inside a block whose tag had
        already matched. Committed failures are never backtracked over by
        ``alt`` or ``separated_list1``.
    source:
        The text being parsed, used to resolve ``position``.
    """

    message: str
    offset: int
    expected: str
    kind: ErrorKind = ErrorKind.SYNTAX
    committed: bool = False
    source: str = field(default="", repr=False, compare=False)

    def __str__(self) -> str:
        return f"ParseError at {self.position}: {self.message}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (self.message,))

    @cached_property
    def position(self) -> Position:
        """Line and column of the failure within ``source``."""
        return Position.of(self.source, self.offset)

    def commit(self) -> "ParseError":
        """Return a committed copy of this error."""
        if self.committed:
            return self
        return dataclasses.replace(self, committed=True)


def failure(
    text: str,
    pos: int,
    expected: str,
    message: str | None = None,
    kind: ErrorKind | None = None,
) -> ParseError:
    """Build a ``ParseError`` for ``expected`` at ``pos`` in ``text``.

    When ``kind`` is omitted, failures at the end of the input are
    classified as ``ErrorKind.INCOMPLETE`` and all others as
    ``ErrorKind.SYNTAX``.
    """
    if kind is None:
        kind = ErrorKind.INCOMPLETE if pos >= len(text) else ErrorKind.SYNTAX
    if message is None:
        found = repr(text[pos]) if pos < len(text) else "end of input"
        message = f"expected {expected}, found {found}"
    return ParseError(
        message=message,
        offset=pos,
        expected=expected,
        kind=kind,
        source=text,
    )
