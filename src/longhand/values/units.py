"""Unit categories: which physical dimension a property's numbers carry."""

from __future__ import annotations

from enum import Enum


class UnitCategory(Enum):
    """Dimension of a property's numeric values."""

    LENGTH = "length"
    TIME = "time"
    ANGLE = "angle"
    FREQUENCY = "frequency"
    RESOLUTION = "resolution"
    NONE = "none"

    @property
    def unit(self) -> str:
        """Canonical unit appended to bare zeros, empty for NONE."""
        return _CANONICAL_UNITS[self]


_CANONICAL_UNITS = {
    UnitCategory.LENGTH: "px",
    UnitCategory.TIME: "s",
    UnitCategory.ANGLE: "deg",
    UnitCategory.FREQUENCY: "Hz",
    UnitCategory.RESOLUTION: "dppx",
    UnitCategory.NONE: "",
}

_LENGTH_PROPERTIES = (
    "width",
    "height",
    "min-width",
    "max-width",
    "min-height",
    "max-height",
    "inline-size",
    "block-size",
    "margin",
    "margin-top",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
    "border",
    "border-top",
    "border-right",
    "border-bottom",
    "border-left",
    "border-width",
    "border-top-width",
    "border-right-width",
    "border-bottom-width",
    "border-left-width",
    "border-radius",
    "border-top-left-radius",
    "border-top-right-radius",
    "border-bottom-left-radius",
    "border-bottom-right-radius",
    "border-spacing",
    "outline",
    "outline-width",
    "outline-offset",
    "column-rule-width",
    "top",
    "right",
    "bottom",
    "left",
    "inset",
    "text-indent",
    "text-shadow",
    "box-shadow",
    "letter-spacing",
    "word-spacing",
    "font-size",
    "column-width",
    "column-gap",
    "row-gap",
    "gap",
    "grid-gap",
    "grid-column-gap",
    "grid-row-gap",
    "grid-template-columns",
    "grid-template-rows",
    "grid-auto-columns",
    "grid-auto-rows",
    "flex-basis",
    "background-size",
    "background-position",
    "background-position-x",
    "background-position-y",
    "object-position",
    "offset-distance",
    "transform-origin",
    "perspective",
    "perspective-origin",
    "mask-position",
    "mask-size",
    "mask-border-width",
    "clip-path",
    "stroke-width",
    "stroke-dasharray",
    "stroke-dashoffset",
    "scroll-margin",
    "scroll-padding",
)

_TIME_PROPERTIES = (
    "transition",
    "transition-duration",
    "transition-delay",
    "animation",
    "animation-duration",
    "animation-delay",
)

_ANGLE_PROPERTIES = (
    "transform",
    "rotate",
    "offset-rotate",
    "azimuth",
    "elevation",
)

# Unitless numbers are meaningful here; a bare zero must stay bare.
_UNITLESS_PROPERTIES = (
    "line-height",
    "font-weight",
    "font-size-adjust",
    "vertical-align",
    "opacity",
    "z-index",
    "order",
    "flex",
    "flex-grow",
    "flex-shrink",
    "counter-increment",
    "counter-reset",
    "orphans",
    "widows",
    "fill-opacity",
    "flood-opacity",
    "stop-opacity",
    "stroke-opacity",
    "shape-image-threshold",
    "column-count",
    "animation-iteration-count",
    "scale",
    "zoom",
)

PROPERTY_UNIT_CATEGORIES: dict[str, UnitCategory] = {
    **dict.fromkeys(_LENGTH_PROPERTIES, UnitCategory.LENGTH),
    **dict.fromkeys(_TIME_PROPERTIES, UnitCategory.TIME),
    **dict.fromkeys(_ANGLE_PROPERTIES, UnitCategory.ANGLE),
    "audio-pitch": UnitCategory.FREQUENCY,
    "resolution": UnitCategory.RESOLUTION,
    "image-resolution": UnitCategory.RESOLUTION,
    **dict.fromkeys(_UNITLESS_PROPERTIES, UnitCategory.NONE),
}

# Inside ``transform`` the dimension depends on the function, not the
# property: translate(0) is a length, rotate(0) an angle, scale(0) unitless.
FUNCTION_UNIT_CATEGORIES: dict[str, UnitCategory] = {
    **dict.fromkeys(
        ("translate", "translatex", "translatey", "translatez", "translate3d", "perspective"),
        UnitCategory.LENGTH,
    ),
    **dict.fromkeys(
        ("rotate", "rotatex", "rotatey", "rotatez", "rotate3d", "skew", "skewx", "skewy"),
        UnitCategory.ANGLE,
    ),
    **dict.fromkeys(
        ("scale", "scalex", "scaley", "scalez", "scale3d", "matrix", "matrix3d"),
        UnitCategory.NONE,
    ),
}

# Function bodies that are returned untouched.
OPAQUE_FUNCTIONS = frozenset({"calc", "min", "max", "clamp", "var", "env"})

# Functions whose numbers are unitless in every property: colors and easing.
UNITLESS_FUNCTIONS = frozenset({
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "hwb",
    "lab",
    "lch",
    "oklab",
    "oklch",
    "color",
    "color-mix",
    "light-dark",
    "cubic-bezier",
    "steps",
    "linear",
})


def unit_category(prop: str) -> UnitCategory:
    """Return the category of *prop*; unknown properties are NONE."""
    return PROPERTY_UNIT_CATEGORIES.get(prop.lower(), UnitCategory.NONE)
