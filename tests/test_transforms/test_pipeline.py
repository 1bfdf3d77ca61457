"""Tests for the composed pipeline and the public text API."""

import pytest

from longhand import NormalizeConfig, normalize
from longhand.stylesheet import ParseError, parse_stylesheet, serialize_stylesheet
from longhand.stylesheet.model import Declaration
from longhand.transforms import (
    DefaultsTransform,
    ExplodeTransform,
    UnitsTransform,
    apply_transforms,
    builtin_transforms,
)


class _MarkTransform:
    """Appends a marker declaration to every rule."""

    def apply(self, sheet):
        for rule in sheet.walk_rules():
            rule.append(Declaration("content", '"seen"'))
        return sheet


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_all_passes_in_order(self):
        out = normalize("a { margin: 0 auto; flex: 1; transition: opacity 1s }")
        assert out == (
            "a {\n"
            "    margin-top: 0px;\n"
            "    margin-right: auto;\n"
            "    margin-bottom: 0px;\n"
            "    margin-left: auto;\n"
            "    flex: 1 1 0%;\n"
            "    transition: opacity 1s ease 0s;\n"
            "}\n"
        )

    def test_defaults_then_units(self):
        out = normalize("a { box-shadow: 1px 2px red }")
        assert "box-shadow: 1px 2px 0px 0px red;" in out

    def test_disable_explode(self):
        out = normalize("a { margin: 0 auto }", NormalizeConfig(explode=False))
        assert "margin: 0px auto;" in out

    def test_disable_units(self):
        out = normalize("a { margin: 0 }", NormalizeConfig(add_units=False))
        assert "margin-top: 0;" in out

    def test_ignored_property_is_untouched(self):
        out = normalize("a { margin: 0 }", NormalizeConfig.from_ignore("margin"))
        assert out == "a {\n    margin: 0;\n}\n"

    @pytest.mark.parametrize("decl", ["--foo: 0", "margin: inherit", "flex: unset"])
    def test_untouched_by_every_pass(self, decl):
        assert normalize(f"a {{ {decl} }}") == f"a {{\n    {decl};\n}}\n"

    def test_parse_error(self):
        with pytest.raises(ParseError):
            normalize("a color: red")


# ---------------------------------------------------------------------------
# Transform plumbing
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_builtin_order(self):
        transforms = builtin_transforms()
        assert [type(t) for t in transforms] == [
            ExplodeTransform,
            DefaultsTransform,
            UnitsTransform,
        ]

    def test_builtin_respects_config(self):
        transforms = builtin_transforms(NormalizeConfig(explode=False, add_units=False))
        assert [type(t) for t in transforms] == [DefaultsTransform]

    def test_custom_transforms_run_last(self):
        sheet = parse_stylesheet("a { margin: 0 }")
        sheet = apply_transforms(sheet, custom_transforms=[_MarkTransform()])
        decls = sheet.rules[0].declarations()
        assert decls[-1].prop == "content"
        assert decls[0].value == "0px"

    def test_explicit_transform_list(self):
        sheet = apply_transforms(parse_stylesheet("a { margin: 0 }"), [UnitsTransform()])
        assert serialize_stylesheet(sheet) == "a {\n    margin: 0px;\n}\n"


class TestConfig:
    def test_ignore_is_normalized(self):
        config = NormalizeConfig(ignore=["Margin", " OPACITY "])
        assert config.ignore == frozenset({"margin", "opacity"})

    def test_from_comma_separated_string(self):
        config = NormalizeConfig.from_ignore("margin, padding,,", add_units=False)
        assert config.ignore == frozenset({"margin", "padding"})
        assert config.add_units is False

    def test_empty(self):
        assert NormalizeConfig.from_ignore(None).ignore == frozenset()
