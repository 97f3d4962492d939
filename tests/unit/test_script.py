"""Unit tests for pzscript.parser.script: whole script files."""
from __future__ import annotations

import pytest

from pzscript import Item, Module, ParseError, Recipe, item, parse_script
from pzscript.parser.errors import ErrorKind, Position


class TestScript:
    def test_modules_in_order(self, mixed_script_source: str) -> None:
        parsed = parse_script(mixed_script_source)
        assert isinstance(parsed, Module)
        assert [b.name for b in parsed.blocks] == ["Base", "Farming"]

    def test_items_and_recipes_mix(self, mixed_script_source: str) -> None:
        base = parse_script(mixed_script_source).blocks[0]
        assert [type(d) for d in base.definitions] == [Item, Recipe]
        assert base.definitions[1].name == "Make Mildew Cure"

    def test_dotted_field_value(self, mixed_script_source: str) -> None:
        farming = parse_script(mixed_script_source).blocks[1]
        assert farming.definitions[0].icon == "Base.MilkSpray"

    def test_custom_item_parser(self, radish_module_source: str) -> None:
        parsed = parse_script(radish_module_source, item)
        assert parsed.blocks[0].definitions[0].name == "RedRadish"

    def test_custom_item_parser_rejects_recipes(self, mixed_script_source: str) -> None:
        with pytest.raises(ParseError):
            parse_script(mixed_script_source, item)

    def test_unknown_definition_kind(self) -> None:
        source = "module Base {\n  sound Bang {\n    File = bang,\n  }\n}\n"
        with pytest.raises(ParseError) as exc_info:
            parse_script(source)
        assert exc_info.value.offset == source.index("sound")
        assert exc_info.value.expected == "'item' or 'recipe'"

    def test_broken_recipe_is_not_retried_as_item(self, mixed_script_source: str) -> None:
        source = mixed_script_source.replace("Time:40.0,", "Time:forty,")
        with pytest.raises(ParseError) as exc_info:
            parse_script(source)
        assert exc_info.value.expected == "number"
        assert exc_info.value.offset == source.index("forty")

    def test_trailing_garbage_fails(self, mixed_script_source: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_script(mixed_script_source + "\n}")
        assert exc_info.value.expected == "end of input"

    def test_empty_script_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_script("   \n")
        assert exc_info.value.kind is ErrorKind.INCOMPLETE

    def test_truncated_script_is_incomplete(self, mixed_script_source: str) -> None:
        source = mixed_script_source.rstrip()[:-1]
        with pytest.raises(ParseError) as exc_info:
            parse_script(source)
        assert exc_info.value.kind is ErrorKind.INCOMPLETE

    def test_parsing_is_deterministic(self, mixed_script_source: str) -> None:
        assert parse_script(mixed_script_source) == parse_script(mixed_script_source)


# ---------------------------------------------------------------------------
# Large scripts
# ---------------------------------------------------------------------------


def brew_recipe(index: int) -> str:
    """Nine lines of recipe source, indented for a module body."""
    return (
        f"  recipe Brew {index}\n"
        "  {\n"
        "    Water,\n"
        "\n"
        "    Result:Tea,\n"
        "    Time:5.0,\n"
        "    Category:Cooking,\n"
        "    NeedToBeLearn:false,\n"
        "  }\n"
    )


def brew_script(count: int) -> str:
    return "module Base {\n" + "".join(brew_recipe(i) for i in range(count)) + "}\n"


class TestLargeScript:
    COUNT = 2000

    def test_parses_every_definition(self) -> None:
        parsed = parse_script(brew_script(self.COUNT))
        assert len(parsed.blocks[0].definitions) == self.COUNT
        assert parsed.blocks[0].definitions[-1].name == f"Brew {self.COUNT - 1}"

    def test_backtracked_failures_do_not_resolve_positions(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        resolved: list[int] = []
        original = Position.of

        def recording_of(text: str, offset: int) -> Position:
            resolved.append(offset)
            return original(text, offset)

        monkeypatch.setattr(Position, "of", recording_of)
        parse_script(brew_script(50))
        assert resolved == []

    def test_late_error_reports_line_and_column(self) -> None:
        source = brew_script(self.COUNT)
        cut_at = source.rindex("Time:5.0,")
        source = source[:cut_at] + "Time:soon," + source[cut_at + len("Time:5.0,"):]
        with pytest.raises(ParseError) as exc_info:
            parse_script(source)
        err = exc_info.value
        assert err.offset == source.rindex("soon")
        # module header, then nine lines per recipe; Time is the sixth line
        assert err.position.line == 2 + 9 * (self.COUNT - 1) + 5
        assert err.position.col == 10
        assert str(err).startswith(f"ParseError at {err.position.line}:10:")
