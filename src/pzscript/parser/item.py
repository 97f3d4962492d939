"""Item grammar: ``item Name { DisplayCategory = ..., ... }``."""
from __future__ import annotations

from pzscript.ast.nodes import Item
from pzscript.grammar.grammar import ITEM_FIELD_ORDER, ITEM_TAG
from pzscript.parser.atoms import identifier
from pzscript.parser.block import named_block
from pzscript.parser.combinators import Parser, map_value
from pzscript.parser.fields import fields_in_order

item_body: Parser[list[object]] = fields_in_order(
    [(name, separator, identifier) for name, separator in ITEM_FIELD_ORDER]
)


def _build_item(parsed: tuple[str, list[object]]) -> Item:
    name, (display_category, type_, display_name, icon) = parsed
    return Item(
        name=name,
        display_category=str(display_category),
        type=str(type_),
        display_name=str(display_name),
        icon=str(icon),
    )


item: Parser[Item] = map_value(named_block(ITEM_TAG, item_body), _build_item)
