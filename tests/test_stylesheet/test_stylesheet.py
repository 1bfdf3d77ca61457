"""Tests for the stylesheet parser and tree model."""

import pytest

from longhand.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    ParseError,
    RawDeclaration,
    Rule,
    Stylesheet,
    parse_stylesheet,
)


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        ss = parse_stylesheet("a { color: red; margin: 0 }")
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selector == "a"
        assert [(d.prop, d.value) for d in rule.declarations()] == [
            ("color", "red"),
            ("margin", "0"),
        ]

    def test_selector_list(self):
        ss = parse_stylesheet(".a > .b, #c { top: 0 }")
        assert ss.rules[0].selector == ".a > .b, #c"

    def test_multiple_rules(self):
        ss = parse_stylesheet("a { top: 0 } b { left: 0 }")
        assert [r.selector for r in ss.rules] == ["a", "b"]

    def test_empty_stylesheet(self):
        ss = parse_stylesheet("")
        assert ss.nodes == []
        assert ss.rules == []


class TestDeclarations:
    def test_property_is_lowercased(self):
        decl = parse_stylesheet("A { COLOR: Red }").rules[0].declarations()[0]
        assert decl.prop == "color"
        assert decl.value == "Red"

    def test_custom_property_keeps_case(self):
        decl = parse_stylesheet("a { --Main-Color: #FFF }").rules[0].declarations()[0]
        assert decl.prop == "--Main-Color"
        assert decl.is_custom_property

    def test_important(self):
        decl = parse_stylesheet("a { color: red !important }").rules[0].declarations()[0]
        assert decl.value == "red"
        assert decl.important

    def test_value_whitespace_is_trimmed(self):
        decl = parse_stylesheet("a { margin :   1px   2px  ; }").rules[0].declarations()[0]
        assert decl.value == "1px   2px"

    def test_parent_link(self):
        rule = parse_stylesheet("a { color: red }").rules[0]
        assert rule.declarations()[0].parent is rule

    def test_star_hack_is_kept_raw(self):
        rule = parse_stylesheet("a { *zoom: 1; color: red }").rules[0]
        assert rule.nodes[0] == RawDeclaration("*zoom: 1")
        assert [d.prop for d in rule.declarations()] == ["color"]

    def test_comments(self):
        ss = parse_stylesheet("/* top */ a { /* inside */ color: red }")
        assert ss.nodes[0] == Comment(" top ")
        assert ss.rules[0].nodes[0] == Comment(" inside ")


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_holds_rules(self):
        ss = parse_stylesheet("@media (min-width: 10px) { a { top: 0 } }")
        media = ss.nodes[0]
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.prelude == "(min-width: 10px)"
        assert media.nested
        assert [r.selector for r in ss.walk_rules()] == ["a"]

    def test_keyframes(self):
        ss = parse_stylesheet("@keyframes spin { from { top: 0 } to { top: 1px } }")
        assert [r.selector for r in ss.walk_rules()] == ["from", "to"]

    def test_font_face_holds_declarations(self):
        ss = parse_stylesheet("@font-face { font-family: X; src: url(x.woff) }")
        assert ss.rules == []
        assert [d.prop for d in ss.walk_declarations()] == ["font-family", "src"]

    def test_statement_at_rule(self):
        ss = parse_stylesheet('@import url(a.css);')
        rule = ss.nodes[0]
        assert rule.name == "import"
        assert rule.nodes is None
        assert rule.declarations() == []


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseError:
    def test_rule_without_block(self):
        with pytest.raises(ParseError) as excinfo:
            parse_stylesheet("a color: red")
        assert excinfo.value.line == 1
        assert "line 1" in str(excinfo.value)

    def test_str_without_position(self):
        assert str(ParseError("boom")) == "boom"


# ---------------------------------------------------------------------------
# Tree mutation
# ---------------------------------------------------------------------------


class TestMutation:
    def _rule(self) -> Rule:
        return parse_stylesheet("a { color: red; top: 0 }").rules[0]

    def test_clone_is_detached(self):
        decl = self._rule().declarations()[0]
        copy = decl.clone(prop="background-color")
        assert copy.parent is None
        assert copy.value == "red"
        assert decl.prop == "color"

    def test_insert_before_and_after(self):
        rule = self._rule()
        color, top = rule.declarations()
        rule.insert_before(top, Declaration("left", "0"))
        rule.insert_after(top, Declaration("right", "0"))
        assert [d.prop for d in rule.declarations()] == ["color", "left", "top", "right"]
        assert rule.declarations()[1].parent is rule

    def test_remove(self):
        rule = self._rule()
        color = rule.declarations()[0]
        color.remove()
        assert [d.prop for d in rule.declarations()] == ["top"]
        assert color.parent is None

    def test_snapshot_ignores_inserted_nodes(self):
        rule = self._rule()
        seen = []
        for decl in rule.declarations():
            seen.append(decl.prop)
            rule.insert_before(decl, Declaration("x", "1"))
        assert seen == ["color", "top"]
        assert len(rule.declarations()) == 4

    def test_unknown_reference(self):
        with pytest.raises(ValueError):
            self._rule().insert_before(Declaration("x", "1"), Declaration("y", "2"))

    def test_declaration_str(self):
        assert str(Declaration("color", "red", important=True)) == (
            "color: red !important;"
        )

    def test_stylesheet_adopts_nodes(self):
        rule = Rule("a")
        ss = Stylesheet([rule])
        assert rule.parent is ss
