"""Base protocol for stylesheet transforms and the checks every pass shares."""

from __future__ import annotations

from typing import Protocol

from longhand.model.outcome import Outcome
from longhand.stylesheet.model import Declaration, Stylesheet
from longhand.values.tokens import is_global_keyword


class Transform(Protocol):
    """A stylesheet-to-stylesheet transformation step."""

    def apply(self, sheet: Stylesheet) -> Stylesheet: ...


def skip_reason(prop: str, value: str, ignore: frozenset[str]) -> str:
    """Return why no pass may touch ``prop: value``, or an empty string."""
    if prop.startswith("--"):
        return "custom property"
    if prop.lower() in ignore:
        return "ignored property"
    if not value.strip():
        return "empty value"
    if is_global_keyword(value):
        return "global keyword"
    return ""


def apply_outcome(decl: Declaration, outcome: Outcome) -> None:
    """Write a CHANGED outcome back into the tree at *decl*'s position.

    A single declaration for the same property is rewritten in place;
    anything else is inserted before *decl*, which is then removed.
    """
    if not outcome.changed:
        return
    if len(outcome.declarations) == 1 and outcome.declarations[0][0] == decl.prop:
        decl.value = outcome.declarations[0][1]
        return
    parent = decl.parent
    for prop, value in outcome.declarations:
        parent.insert_before(decl, decl.clone(prop=prop, value=value))
    decl.remove()
