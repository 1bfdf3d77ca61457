"""Tests for property unit categories."""

import pytest

from longhand.values.units import (
    FUNCTION_UNIT_CATEGORIES,
    UnitCategory,
    unit_category,
)


class TestUnitCategory:
    @pytest.mark.parametrize(
        "category,unit",
        [
            (UnitCategory.LENGTH, "px"),
            (UnitCategory.TIME, "s"),
            (UnitCategory.ANGLE, "deg"),
            (UnitCategory.FREQUENCY, "Hz"),
            (UnitCategory.RESOLUTION, "dppx"),
            (UnitCategory.NONE, ""),
        ],
    )
    def test_canonical_units(self, category, unit):
        assert category.unit == unit

    @pytest.mark.parametrize(
        "prop,category",
        [
            ("margin", UnitCategory.LENGTH),
            ("Margin-Top", UnitCategory.LENGTH),
            ("border-left-width", UnitCategory.LENGTH),
            ("transition-duration", UnitCategory.TIME),
            ("animation-delay", UnitCategory.TIME),
            ("rotate", UnitCategory.ANGLE),
            ("opacity", UnitCategory.NONE),
            ("line-height", UnitCategory.NONE),
            ("z-index", UnitCategory.NONE),
        ],
    )
    def test_property_categories(self, prop, category):
        assert unit_category(prop) is category

    def test_unknown_property_is_unitless(self):
        assert unit_category("not-a-property") is UnitCategory.NONE

    def test_transform_functions(self):
        assert FUNCTION_UNIT_CATEGORIES["translatex"] is UnitCategory.LENGTH
        assert FUNCTION_UNIT_CATEGORIES["skew"] is UnitCategory.ANGLE
        assert FUNCTION_UNIT_CATEGORIES["scale"] is UnitCategory.NONE
