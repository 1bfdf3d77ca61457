"""Tests for stylesheet serialization."""

from longhand.stylesheet import parse_stylesheet, serialize_stylesheet


def roundtrip(css: str, **kwargs) -> str:
    return serialize_stylesheet(parse_stylesheet(css), **kwargs)


class TestSerialize:
    def test_empty(self):
        assert roundtrip("") == ""

    def test_one_declaration_per_line(self):
        assert roundtrip("a{color:red;top:0}") == "a {\n    color: red;\n    top: 0;\n}\n"

    def test_rules_separated_by_blank_line(self):
        assert roundtrip("a{top:0}b{left:0}") == (
            "a {\n    top: 0;\n}\n\nb {\n    left: 0;\n}\n"
        )

    def test_empty_rule(self):
        assert roundtrip("a {}") == "a {}\n"

    def test_important(self):
        assert roundtrip("a{color:red!important}") == "a {\n    color: red !important;\n}\n"

    def test_custom_indent(self):
        assert roundtrip("a{top:0}", indent="  ") == "a {\n  top: 0;\n}\n"

    def test_nested_at_rule(self):
        assert roundtrip("@media print{a{top:0}}") == (
            "@media print {\n    a {\n        top: 0;\n    }\n}\n"
        )

    def test_statement_at_rule(self):
        assert roundtrip("@import url(a.css);") == "@import url(a.css);\n"

    def test_comments_and_raw_declarations(self):
        assert roundtrip("/* c */ a { *zoom: 1; /* d */ top: 0 }") == (
            "/* c */\n\na {\n    *zoom: 1;\n    /* d */\n    top: 0;\n}\n"
        )

    def test_output_is_stable(self):
        css = "@media screen { .a, .b { margin: 0 auto; } } p { font: 12px/1.5 serif }"
        once = roundtrip(css)
        assert roundtrip(once) == once
