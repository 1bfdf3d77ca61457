"""Defaults transform: fills omitted shorthand components with their defaults."""

from __future__ import annotations

import logging
from typing import Iterable

from longhand.config import normalize_ignore
from longhand.model.outcome import Outcome
from longhand.stylesheet.hacks import is_hack
from longhand.stylesheet.model import Stylesheet
from longhand.transforms.base import apply_outcome, skip_reason
from longhand.values.shorthands import SHORTHANDS

logger = logging.getLogger(__name__)


def add_defaults_to_value(
    prop: str, value: str, ignore: Iterable[str] = frozenset()
) -> Outcome:
    """Return ``prop`` with every shorthand slot populated.

    ``transition: opacity 1s`` becomes ``transition: opacity 1s ease 0s``.
    Properties without a registered grammar, and values the grammar cannot
    classify, are left unchanged.
    """
    reason = skip_reason(prop, value, normalize_ignore(ignore))
    if reason:
        return Outcome.unchanged(reason)
    prop = prop.lower()
    spec = SHORTHANDS.get(prop)
    if spec is None:
        return Outcome.unchanged("no shorthand grammar")
    expanded = spec.expand(value)
    if expanded is None:
        return Outcome.unchanged("value not classifiable")
    if expanded == value:
        return Outcome.unchanged("already complete")
    return Outcome.replaced([(prop, expanded)])


class DefaultsTransform:
    """Populate every slot of the known shorthands in all declarations."""

    def __init__(self, ignore: Iterable[str] = ()) -> None:
        self.ignore = normalize_ignore(ignore)

    def apply(self, sheet: Stylesheet) -> Stylesheet:
        filled = 0
        for decl in sheet.walk_declarations():
            if decl.prop not in SHORTHANDS or is_hack(decl):
                continue
            outcome = add_defaults_to_value(decl.prop, decl.value, self.ignore)
            if not outcome.changed:
                logger.debug(
                    "add-defaults: kept %s: %s (%s)", decl.prop, decl.value, outcome.reason
                )
                continue
            logger.debug(
                "add-defaults: %s: %s -> %s",
                decl.prop,
                decl.value,
                outcome.declarations[0][1],
            )
            apply_outcome(decl, outcome)
            filled += 1
        logger.info("add-defaults: %d declaration(s) completed", filled)
        return sheet
