"""Recipe grammar.

A recipe body is an ingredient list followed by four mandatory fields in
a fixed order::

    recipe Make Mildew Cure
    {
      GardeningSprayEmpty,
      Base.Milk,

      Result:GardeningSprayMilk,
      Time:40.0,
      Category:Farming,
      NeedToBeLearn:true,
    }

The schema is positional: reordering, omitting or adding a field fails.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from pzscript.ast.nodes import Recipe
from pzscript.grammar.grammar import RECIPE_FIELD_ORDER, RECIPE_TAG
from pzscript.parser.atoms import bool_value, float_value, identifier
from pzscript.parser.block import named_block
from pzscript.parser.combinators import (
    Parser,
    map_value,
    multispace1,
    separated_list1,
    tag,
    terminated,
)
from pzscript.parser.fields import fields_in_order


@dataclass(frozen=True, slots=True)
class RecipeBody:
    """The content of a recipe block, before the name is attached."""

    ingredients: tuple[str, ...]
    result: str
    time: float
    category: str
    need_to_be_learned: bool


_FIELD_VALUES: dict[str, Parser[object]] = {
    "Result": identifier,
    "Time": float_value,
    "Category": identifier,
    "NeedToBeLearn": bool_value,
}

ingredient: Parser[str] = terminated(identifier, tag(","))

_ingredients = separated_list1(multispace1, ingredient)
_fields = fields_in_order(
    [(name, separator, _FIELD_VALUES[name]) for name, separator in RECIPE_FIELD_ORDER]
)


def recipe_body(text: str, pos: int) -> tuple[RecipeBody, int]:
    """Parse the ingredient list and the four fields of a recipe."""
    ingredients, pos = _ingredients(text, pos)
    _, pos = multispace1(text, pos)
    (result, time, category, need_to_be_learned), pos = _fields(text, pos)
    body = RecipeBody(
        ingredients=tuple(ingredients),
        result=str(result),
        time=cast(float, time),
        category=str(category),
        need_to_be_learned=bool(need_to_be_learned),
    )
    return body, pos


def _build_recipe(parsed: tuple[str, RecipeBody]) -> Recipe:
    name, body = parsed
    return Recipe(
        name=name,
        ingredients=body.ingredients,
        result=body.result,
        time=body.time,
        category=body.category,
        need_to_be_learned=body.need_to_be_learned,
    )


recipe: Parser[Recipe] = map_value(named_block(RECIPE_TAG, recipe_body), _build_recipe)
