"""Tests for hack declaration detection."""

import pytest

from longhand.stylesheet import Declaration, is_hack, parse_stylesheet


def first_declaration(css: str) -> Declaration:
    return next(parse_stylesheet(css).walk_declarations())


class TestIsHack:
    @pytest.mark.parametrize(
        "prop,value",
        [
            ("_height", "1px"),
            ("*zoom", "1"),
            ("color", "red\\9"),
            ("color", "red\\0/"),
            ("color", "red !ie"),
            ("color", "red ! IE"),
        ],
    )
    def test_hacks(self, prop, value):
        assert is_hack(Declaration(prop, value))

    @pytest.mark.parametrize(
        "prop,value",
        [
            ("color", "red"),
            ("margin", "0"),
            ("font-family", "iemobile"),
            ("--x", "red\\9"),
        ],
    )
    def test_not_hacks(self, prop, value):
        assert not is_hack(Declaration(prop, value))

    def test_parsed_backslash_nine(self):
        decl = first_declaration("a { color: red\\9 }")
        assert decl.value == "red\\9"
        assert is_hack(decl)

    def test_parsed_backslash_zero(self):
        decl = first_declaration("a { color: red\\0/ }")
        assert decl.value == "red\\0/"
        assert is_hack(decl)

    def test_parsed_dimension_backslash_nine(self):
        decl = first_declaration("a { width: 0\\9 }")
        assert decl.value == "0\\9"
        assert is_hack(decl)

    def test_parsed_underscore(self):
        assert is_hack(first_declaration("a { _color: red }"))
