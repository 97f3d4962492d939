"""Unit tests for pzscript.parser.atoms: identifiers, booleans and floats."""
from __future__ import annotations

import pytest

from pzscript.parser.atoms import bool_value, float_value, identifier
from pzscript.parser.errors import ErrorKind, ParseError


class TestIdentifier:
    @pytest.mark.parametrize("source, expected", [
        ("Radish,", "Radish"),
        ("Base.Milk,", "Base.Milk"),
        ("Farming1 ", "Farming1"),
        ("42", "42"),
    ])
    def test_recognizes_identifier(self, source: str, expected: str) -> None:
        value, pos = identifier(source, 0)
        assert value == expected
        assert pos == len(expected)

    def test_stops_at_space(self) -> None:
        assert identifier("Base Milk", 0) == ("Base", 4)

    def test_stops_at_underscore(self) -> None:
        assert identifier("Base_Milk", 0) == ("Base", 4)

    def test_empty_identifier_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            identifier(",", 0)
        assert exc_info.value.expected == "identifier"


class TestBoolValue:
    def test_true(self) -> None:
        assert bool_value("true,", 0) == (True, 4)

    def test_false(self) -> None:
        assert bool_value("false,", 0) == (False, 5)

    @pytest.mark.parametrize("source", ["True", "FALSE", "yes", "1"])
    def test_rejects_other_spellings(self, source: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            bool_value(source, 0)
        assert exc_info.value.expected == "'true' or 'false'"

    def test_truncated_literal_is_incomplete(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            bool_value("tr", 0)
        assert exc_info.value.kind is ErrorKind.INCOMPLETE


class TestFloatValue:
    @pytest.mark.parametrize("source, expected", [
        ("40.0", 40.0),
        ("40", 40.0),
        ("-1.5", -1.5),
        ("+2.25", 2.25),
        (".5", 0.5),
        ("3.", 3.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
    ])
    def test_recognizes_number(self, source: str, expected: float) -> None:
        value, pos = float_value(source + ",", 0)
        assert value == expected
        assert pos == len(source)

    def test_rounds_to_single_precision(self) -> None:
        value, _ = float_value("0.1", 0)
        assert value != 0.1
        assert value == pytest.approx(0.1)

    def test_exponent_without_digits_is_not_consumed(self) -> None:
        assert float_value("1e,", 0) == (1.0, 1)

    @pytest.mark.parametrize("source", ["abc", "-", ".", ""])
    def test_rejects_non_numbers(self, source: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            float_value(source, 0)
        assert exc_info.value.kind is not ErrorKind.CONVERSION

    @pytest.mark.parametrize("source", ["1e39", "-4e38", "1e400"])
    def test_overflow_is_conversion_error(self, source: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            float_value(source, 0)
        assert exc_info.value.kind is ErrorKind.CONVERSION
        assert exc_info.value.offset == 0
