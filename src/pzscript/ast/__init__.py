"""Parsed value types.

Exports the node types produced by the parser and the serializer for
dumping them to JSON/YAML.
"""
from __future__ import annotations

from pzscript.ast.nodes import Item, Module, ModuleBlock, Recipe
from pzscript.ast.serializer import ScriptSerializer

__all__ = [
    "Item",
    "Module",
    "ModuleBlock",
    "Recipe",
    "ScriptSerializer",
]
