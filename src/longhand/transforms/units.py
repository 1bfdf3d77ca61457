"""Units transform: gives bare zeros the unit their property implies."""

from __future__ import annotations

import logging
from typing import Iterable

import tinycss2
from tinycss2.ast import DimensionToken

from longhand.config import normalize_ignore
from longhand.model.outcome import Outcome
from longhand.stylesheet.hacks import is_hack
from longhand.stylesheet.model import Stylesheet
from longhand.transforms.base import apply_outcome
from longhand.values.shorthands import SHORTHANDS
from longhand.values.units import (
    FUNCTION_UNIT_CATEGORIES,
    OPAQUE_FUNCTIONS,
    UNITLESS_FUNCTIONS,
    UnitCategory,
    unit_category,
)

logger = logging.getLogger(__name__)


def _with_unit(token, unit: str) -> DimensionToken:
    # Keep the author's spelling: 0.0 -> 0.0px, -0 -> -0px.
    return DimensionToken(
        token.source_line,
        token.source_column,
        token.value,
        None if token.int_value is None else 0,
        token.representation,
        unit,
    )


def _inject(
    nodes: list, category: UnitCategory, by_function: bool, keep: frozenset[int] = frozenset()
) -> bool:
    """Rewrite bare zeros in *nodes* in place; return True if any changed.

    Nodes whose ``id()`` is in *keep* are left as written.
    """
    changed = False
    for index, node in enumerate(nodes):
        if id(node) in keep:
            continue
        if node.type == "number" and node.value == 0:
            if category.unit:
                nodes[index] = _with_unit(node, category.unit)
                changed = True
        elif node.type == "function":
            if node.lower_name in OPAQUE_FUNCTIONS or node.lower_name in UNITLESS_FUNCTIONS:
                continue
            inner = category
            if by_function:
                inner = FUNCTION_UNIT_CATEGORIES.get(node.lower_name, category)
            changed |= _inject(node.arguments, inner, by_function)
        elif node.type in ("() block", "[] block"):
            changed |= _inject(node.content, category, by_function)
    return changed


def _split_layers(nodes: list) -> list[list]:
    layers: list[list] = [[]]
    for node in nodes:
        if node.type == "literal" and node.value == ",":
            layers.append([])
        else:
            layers[-1].append(node)
    return layers


def _iteration_counts(value: str, nodes: list) -> frozenset[int] | None:
    """Return the ids of the animation iteration-count numbers in *nodes*.

    None means the value could not be classified.
    """
    spec = SHORTHANDS["animation"]
    layers = spec.classify(value)
    if layers is None:
        return None
    slot = spec.slots.index("iteration-count")
    keep = set()
    for layer_nodes, slots in zip(_split_layers(nodes), layers):
        for node in layer_nodes:
            if node.type == "number" and node.serialize() == slots[slot]:
                keep.add(id(node))
                break
    return frozenset(keep)


def add_units_to_value(
    prop: str, value: str, ignore: Iterable[str] = frozenset()
) -> Outcome:
    """Append the canonical unit of *prop* to every bare zero in *value*.

    ``margin: 0 auto`` becomes ``margin: 0px auto``. Numbers that already
    carry a unit are never touched, and the bodies of calc(), min(), max(),
    clamp(), var() and env() are returned unchanged. Color and easing
    functions keep their unitless numbers, and so does the iteration count
    of ``animation``.
    """
    if prop.startswith("--"):
        return Outcome.unchanged("custom property")
    prop = prop.lower()
    if prop in normalize_ignore(ignore):
        return Outcome.unchanged("ignored property")
    category = unit_category(prop)
    if category is UnitCategory.NONE:
        return Outcome.unchanged("unitless property")

    nodes = tinycss2.parse_component_value_list(value)
    keep = frozenset()
    if prop == "animation":
        # A bare number there is the iteration count, not a time.
        keep = _iteration_counts(value, nodes)
        if keep is None:
            return Outcome.unchanged("value not classifiable")
    if not _inject(nodes, category, by_function=prop == "transform", keep=keep):
        return Outcome.unchanged("no bare zero")
    return Outcome.replaced([(prop, tinycss2.serialize(nodes))])


class UnitsTransform:
    """Add canonical units to bare zeros in all declarations."""

    def __init__(self, ignore: Iterable[str] = ()) -> None:
        self.ignore = normalize_ignore(ignore)

    def apply(self, sheet: Stylesheet) -> Stylesheet:
        rewritten = 0
        for decl in sheet.walk_declarations():
            if is_hack(decl):
                continue
            outcome = add_units_to_value(decl.prop, decl.value, self.ignore)
            if not outcome.changed:
                continue
            logger.debug(
                "add-units: %s: %s -> %s", decl.prop, decl.value, outcome.declarations[0][1]
            )
            apply_outcome(decl, outcome)
            rewritten += 1
        logger.info("add-units: %d declaration(s) rewritten", rewritten)
        return sheet
