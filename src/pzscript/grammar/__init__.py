"""Grammar reference for the game script language.

Exports the EBNF documentation constants, the block tags and the fixed
field orders used by the domain parsers.
"""
from __future__ import annotations

from pzscript.grammar.grammar import (
    FULL_GRAMMAR,
    ITEM_FIELD_ORDER,
    ITEM_TAG,
    MODULE_TAG,
    RECIPE_FIELD_ORDER,
    RECIPE_TAG,
)

__all__ = [
    "FULL_GRAMMAR",
    "ITEM_FIELD_ORDER",
    "ITEM_TAG",
    "MODULE_TAG",
    "RECIPE_FIELD_ORDER",
    "RECIPE_TAG",
]
