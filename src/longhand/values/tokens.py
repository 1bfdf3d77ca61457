"""Value tokenization and token-shape predicates shared by every pass.

Values are split with the tinycss2 tokenizer, so quotes, function arguments
and bracketed blocks are never broken apart: ``1px solid rgb(0, 0, 0)``
splits into three words.
"""

from __future__ import annotations

from typing import Callable

import tinycss2

GLOBAL_KEYWORDS = frozenset({"inherit", "initial", "unset", "revert"})

LENGTH_UNITS = frozenset({
    "em", "ex", "ch", "rem", "lh", "rlh", "cap", "ic",
    "vw", "vh", "vi", "vb", "vmin", "vmax",
    "svw", "svh", "lvw", "lvh", "dvw", "dvh",
    "cqw", "cqh", "cqi", "cqb", "cqmin", "cqmax",
    "cm", "mm", "q", "in", "pt", "pc", "px",
})
TIME_UNITS = frozenset({"s", "ms"})
ANGLE_UNITS = frozenset({"deg", "grad", "rad", "turn"})
FREQUENCY_UNITS = frozenset({"hz", "khz"})
RESOLUTION_UNITS = frozenset({"dpi", "dpcm", "dppx", "x"})

# Math functions that resolve to a number or dimension.
MATH_FUNCTIONS = ("calc(", "min(", "max(", "clamp(")


def _tokens(value: str) -> list:
    return tinycss2.parse_component_value_list(value, skip_comments=True)


def _is_whitespace(token) -> bool:
    return token.type == "whitespace"


def _is_comma(token) -> bool:
    return token.type == "literal" and token.value == ","


def _split(value: str, is_separator: Callable[[object], bool]) -> list[str]:
    words: list[str] = []
    current: list = []
    for token in _tokens(value):
        if is_separator(token):
            words.append(tinycss2.serialize(current).strip())
            current = []
        else:
            current.append(token)
    words.append(tinycss2.serialize(current).strip())
    return words


def split_space(value: str) -> list[str]:
    """Split *value* on top-level whitespace, dropping empty words."""
    return [word for word in _split(value, _is_whitespace) if word]


def split_comma(value: str) -> list[str]:
    """Split *value* on top-level commas.

    Empty items are kept so callers can tell ``a, , b`` from ``a, b``.
    A blank value yields an empty list.
    """
    if not value.strip():
        return []
    return _split(value, _is_comma)


def single_token(word: str):
    """Return the tinycss2 token for a one-token *word*, else None."""
    token = tinycss2.parse_one_component_value(word, skip_comments=True)
    if token.type == "error":
        return None
    return token


def is_global_keyword(value: str) -> bool:
    return value.strip().lower() in GLOBAL_KEYWORDS


def is_number(word: str) -> bool:
    """A plain number without unit: ``0``, ``1.5``, ``-2``."""
    token = single_token(word)
    return token is not None and token.type == "number"


def is_integer(word: str) -> bool:
    token = single_token(word)
    return token is not None and token.type == "number" and token.is_integer


def is_percentage(word: str) -> bool:
    token = single_token(word)
    return token is not None and token.type == "percentage"


def unit_of(word: str) -> str | None:
    """Lowercased unit of a dimension word, ``%`` for percentages, else None."""
    token = single_token(word)
    if token is None:
        return None
    if token.type == "dimension":
        return token.lower_unit
    if token.type == "percentage":
        return "%"
    return None


def is_dimension(word: str) -> bool:
    """A number carrying any unit (not a percentage)."""
    token = single_token(word)
    return token is not None and token.type == "dimension"


def is_zero(word: str) -> bool:
    token = single_token(word)
    return token is not None and token.type == "number" and token.value == 0


def is_length(word: str) -> bool:
    """A length dimension, or a unitless zero."""
    return unit_of(word) in LENGTH_UNITS or is_zero(word)


def is_length_percentage(word: str) -> bool:
    return is_length(word) or is_percentage(word)


def is_time(word: str) -> bool:
    return unit_of(word) in TIME_UNITS


def is_numeric(word: str) -> bool:
    """Any number, percentage or dimension, or a math function."""
    token = single_token(word)
    if token is None:
        return False
    if token.type in ("number", "percentage", "dimension"):
        return True
    return word.lower().startswith(MATH_FUNCTIONS)


def is_function(word: str, *names: str) -> bool:
    """True when *word* is a single function call, optionally one of *names*."""
    token = single_token(word)
    if token is None or token.type != "function":
        return False
    return not names or token.lower_name in names
