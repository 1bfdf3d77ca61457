"""Explode transform: replaces box, column and border shorthands by longhands."""

from __future__ import annotations

import logging
from typing import Iterable

from longhand.config import normalize_ignore
from longhand.model.outcome import Outcome
from longhand.stylesheet.hacks import is_hack
from longhand.stylesheet.model import Stylesheet
from longhand.transforms.base import apply_outcome, skip_reason
from longhand.values.tokens import is_dimension, split_space
from longhand.values.trbl import TRBL, parse_trbl
from longhand.values.wsc import WSC, WSC_DEFAULTS, is_valid_wsc, parse_wsc

logger = logging.getLogger(__name__)

BOX_PROPERTIES = frozenset({"margin", "padding"})
BORDER_DIRECTIONS = tuple(f"border-{side}" for side in TRBL)
BORDER_KINDS = tuple(f"border-{kind}" for kind in WSC)
BORDER_PROPERTIES = frozenset({"border", *BORDER_DIRECTIONS, *BORDER_KINDS})

# Per rule, each stage sees a fresh snapshot of the declarations, so the
# longhands one stage inserts are never exploded again in the same run.
STAGES: tuple[frozenset[str], ...] = (
    frozenset({"margin"}),
    frozenset({"padding"}),
    frozenset({"columns"}),
    BORDER_PROPERTIES,
)


def explode_box(prop: str, value: str) -> Outcome:
    """``margin``/``padding`` -> the four ``{prop}-{side}`` longhands."""
    values = parse_trbl(value)
    if None in values:
        return Outcome.unchanged("expected 1 to 4 values")
    return Outcome.replaced(
        (f"{prop}-{side}", side_value) for side, side_value in zip(TRBL, values)
    )


def explode_columns(value: str) -> Outcome:
    """``columns`` -> ``column-width`` and ``column-count``."""
    words = split_space(value)
    if not 1 <= len(words) <= 2:
        return Outcome.unchanged("expected 1 or 2 values")

    width = count = None
    for word in words:
        if word.lower() == "auto":
            continue
        if is_dimension(word):
            if width is not None:
                return Outcome.unchanged("two column widths")
            width = word
        else:
            if count is not None:
                return Outcome.unchanged("two column counts")
            count = word
    # auto, or a missing second value, fills whichever slot is still open.
    return Outcome.replaced([
        ("column-width", width or "auto"),
        ("column-count", count or "auto"),
    ])


def explode_border(prop: str, value: str) -> Outcome:
    """Explode one border declaration by a single level.

    ``border`` -> the four directional shorthands with the same value,
    ``border-{side}`` -> its width/style/color longhands, and
    ``border-{width,style,color}`` -> the four directional longhands.
    """
    if prop == "border":
        if not is_valid_wsc(parse_wsc(value)):
            return Outcome.unchanged("invalid width/style/color value")
        return Outcome.replaced((direction, value) for direction in BORDER_DIRECTIONS)

    if prop in BORDER_DIRECTIONS:
        wsc = parse_wsc(value)
        if not is_valid_wsc(wsc):
            return Outcome.unchanged("invalid width/style/color value")
        return Outcome.replaced(
            (f"{prop}-{kind}", kind_value)
            for kind, kind_value in zip(WSC, wsc.filled(WSC_DEFAULTS))
        )

    if prop in BORDER_KINDS:
        values = parse_trbl(value)
        if None in values:
            return Outcome.unchanged("expected 1 to 4 values")
        kind = prop[len("border-"):]
        return Outcome.replaced(
            (f"border-{side}-{kind}", side_value) for side, side_value in zip(TRBL, values)
        )

    return Outcome.unchanged("not a border shorthand")


def explode_declaration(
    prop: str, value: str, ignore: Iterable[str] = frozenset()
) -> Outcome:
    """Explode ``prop: value`` by one level, or leave it unchanged."""
    reason = skip_reason(prop, value, normalize_ignore(ignore))
    if reason:
        return Outcome.unchanged(reason)
    prop = prop.lower()
    if prop in BOX_PROPERTIES:
        return explode_box(prop, value)
    if prop == "columns":
        return explode_columns(value)
    if prop in BORDER_PROPERTIES:
        return explode_border(prop, value)
    return Outcome.unchanged("not an exploded shorthand")


class ExplodeTransform:
    """Replace shorthand declarations by their longhands, in place.

    Stages run margin, padding, columns, then border for every rule.
    Longhands are inserted at the shorthand's position, keep its
    ``!important`` flag, and the shorthand is removed.
    """

    def __init__(self, ignore: Iterable[str] = ()) -> None:
        self.ignore = normalize_ignore(ignore)

    def apply(self, sheet: Stylesheet) -> Stylesheet:
        exploded = 0
        for rule in sheet.walk_rules():
            for stage in STAGES:
                for decl in rule.declarations():
                    if decl.prop not in stage or is_hack(decl):
                        continue
                    outcome = explode_declaration(decl.prop, decl.value, self.ignore)
                    if not outcome.changed:
                        logger.debug(
                            "explode: kept %s: %s (%s)", decl.prop, decl.value, outcome.reason
                        )
                        continue
                    logger.debug(
                        "explode: %s -> %s",
                        decl.prop,
                        ", ".join(prop for prop, _ in outcome.declarations),
                    )
                    apply_outcome(decl, outcome)
                    exploded += 1
        logger.info("explode: %d declaration(s) exploded", exploded)
        return sheet
