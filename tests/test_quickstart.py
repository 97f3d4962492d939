"""Test that the quickstart API works for pzscript."""
from __future__ import annotations


def test_quickstart_parse_import() -> None:
    import pzscript

    assert callable(pzscript.parse)
    assert callable(pzscript.parse_recipe)
    assert callable(pzscript.parse_module)
    assert callable(pzscript.parse_script)


def test_quickstart_version(expected_version: str) -> None:
    import pzscript

    assert pzscript.__version__ == expected_version


def test_quickstart_parse_recipe(mildew_recipe_source: str) -> None:
    import pzscript

    recipe = pzscript.parse_recipe(mildew_recipe_source)
    assert recipe.name == "Make Mildew Cure"
    assert recipe.ingredients == ("GardeningSprayEmpty", "Base.Milk")
    assert recipe.result == "GardeningSprayMilk"
    assert recipe.time == 40.0
    assert recipe.category == "Farming"
    assert recipe.need_to_be_learned is True


def test_quickstart_parse_module(radish_module_source: str) -> None:
    import pzscript

    base = pzscript.parse_module(radish_module_source, pzscript.item)
    assert base.name == "Base"
    radish = base.definitions[0]
    assert (radish.display_category, radish.type, radish.display_name, radish.icon) == (
        "Food",
        "Food",
        "Radish",
        "Radish",
    )


def test_quickstart_custom_blocks() -> None:
    import pzscript
    from pzscript.parser.combinators import tag

    grammar = pzscript.named_block_repeated("module", pzscript.named_block("item", tag("Nil")))
    assert pzscript.parse("module Base { item A { Nil } item B { Nil } }", grammar) == (
        "Base",
        [("A", "Nil"), ("B", "Nil")],
    )
