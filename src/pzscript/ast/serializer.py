"""Serialization of parsed script values to JSON and YAML.

The serialized form is a plain dict/list structure with a ``"kind"``
discriminator on every node, which maps naturally to both formats.

Usage
-----
::

    from pzscript.ast.serializer import ScriptSerializer

    serializer = ScriptSerializer()
    data = serializer.to_dict(parsed_script)
    json_text = serializer.to_json(parsed_script)
"""
from __future__ import annotations

import json

import yaml

from pzscript.ast.nodes import Item, Module, ModuleBlock, Recipe


class ScriptSerializer:
    """Converts parsed script values into plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (value -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, node: object) -> dict[str, object]:
        """Serialize any parsed node to a JSON-compatible dict.

        Raises
        ------
        TypeError
            If ``node`` is not a script value.
        """
        if isinstance(node, Module):
            return {
                "kind": "Module",
                "blocks": [self.to_dict(b) for b in node.blocks],
            }
        if isinstance(node, ModuleBlock):
            return {
                "kind": "ModuleBlock",
                "name": node.name,
                "definitions": [self._definition_to_dict(d) for d in node.definitions],
            }
        if isinstance(node, Item):
            return self._item_to_dict(node)
        if isinstance(node, Recipe):
            return self._recipe_to_dict(node)
        raise TypeError(f"Cannot serialize {type(node).__name__!r}")

    def _definition_to_dict(self, definition: object) -> object:
        # Modules may hold caller-defined values; plain data passes through.
        if isinstance(definition, (Module, ModuleBlock, Item, Recipe)):
            return self.to_dict(definition)
        return definition

    def _item_to_dict(self, item: Item) -> dict[str, object]:
        return {
            "kind": "Item",
            "name": item.name,
            "display_category": item.display_category,
            "type": item.type,
            "display_name": item.display_name,
            "icon": item.icon,
        }

    def _recipe_to_dict(self, recipe: Recipe) -> dict[str, object]:
        return {
            "kind": "Recipe",
            "name": recipe.name,
            "ingredients": list(recipe.ingredients),
            "result": recipe.result,
            "time": recipe.time,
            "category": recipe.category,
            "need_to_be_learned": recipe.need_to_be_learned,
        }

    # ------------------------------------------------------------------
    # JSON / YAML helpers
    # ------------------------------------------------------------------

    def to_json(self, node: object, indent: int = 2) -> str:
        """Serialize a parsed node to a JSON string."""
        return json.dumps(self.to_dict(node), indent=indent, ensure_ascii=False)

    def to_yaml(self, node: object) -> str:
        """Serialize a parsed node to a YAML string."""
        return yaml.dump(
            self.to_dict(node),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
