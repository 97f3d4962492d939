"""Value types produced by the game script parser.

Every node is a frozen dataclass holding only strings, numbers, booleans
and tuples, so parsed values are immutable, hashable and compare by
structure. None of them keep a reference to the source text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ModuleBlock(Generic[T]):
    """A ``module Name { ... }`` block.

    Parameters
    ----------
    name:
        The module name, e.g. ``"Base"``.
    definitions:
        The definitions inside the module, in source order. Never empty.
    """

    name: str
    definitions: tuple[T, ...]

    @classmethod
    def from_parsed(cls, parsed: tuple[str, list[T]]) -> "ModuleBlock[T]":
        """Build a block from a ``(name, items)`` pair produced by the parser."""
        name, definitions = parsed
        return cls(name=name, definitions=tuple(definitions))


@dataclass(frozen=True, slots=True)
class Module(Generic[T]):
    """All module blocks of one script, in source order."""

    blocks: tuple[ModuleBlock[T], ...]


@dataclass(frozen=True, slots=True)
class Item:
    """An ``item Name { ... }`` definition."""

    name: str
    display_category: str
    type: str
    display_name: str
    icon: str


@dataclass(frozen=True, slots=True)
class Recipe:
    """A ``recipe Name { ... }`` definition.

    Parameters
    ----------
    name:
        Display name of the recipe; may contain spaces.
    ingredients:
        Ingredient identifiers in source order. Never empty.
    result:
        Identifier of the produced item.
    time:
        Crafting time, at 32-bit float precision. Not range-checked.
    category:
        Recipe category identifier.
    need_to_be_learned:
        Whether the recipe has to be learned before use.
    """

    name: str
    ingredients: tuple[str, ...]
    result: str
    time: float
    category: str
    need_to_be_learned: bool
