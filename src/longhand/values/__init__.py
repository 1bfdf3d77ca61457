from longhand.values.shorthands import SHORTHANDS, ShorthandSpec, shorthand
from longhand.values.tokens import GLOBAL_KEYWORDS, split_comma, split_space
from longhand.values.trbl import TRBL, parse_trbl
from longhand.values.units import UnitCategory, unit_category
from longhand.values.wsc import WSC, WSC_DEFAULTS, Wsc, is_valid_wsc, parse_wsc

__all__ = [
    "SHORTHANDS",
    "ShorthandSpec",
    "shorthand",
    "GLOBAL_KEYWORDS",
    "split_space",
    "split_comma",
    "TRBL",
    "parse_trbl",
    "UnitCategory",
    "unit_category",
    "WSC",
    "WSC_DEFAULTS",
    "Wsc",
    "parse_wsc",
    "is_valid_wsc",
]
