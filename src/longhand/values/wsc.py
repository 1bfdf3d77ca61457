"""WSC classification: the width/style/color grammar of border shorthands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from longhand.values.tokens import GLOBAL_KEYWORDS, is_length, split_space

WSC = ("width", "style", "color")
WSC_DEFAULTS = ("medium", "none", "currentcolor")

BORDER_STYLES = frozenset({
    "none",
    "hidden",
    "dotted",
    "dashed",
    "solid",
    "double",
    "groove",
    "ridge",
    "inset",
    "outset",
})
BORDER_WIDTHS = frozenset({"thin", "medium", "thick"})


@dataclass(frozen=True)
class Wsc:
    """Result of classifying a width/style/color value.

    ``collisions`` names every slot that received more than one word;
    ``keywords`` holds global keywords found among other words.
    """

    width: str | None = None
    style: str | None = None
    color: str | None = None
    collisions: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()

    def values(self) -> list[str | None]:
        return [self.width, self.style, self.color]

    def filled(self, defaults: Sequence[str] = WSC_DEFAULTS) -> list[str]:
        return [
            value if value is not None else default
            for value, default in zip(self.values(), defaults)
        ]


def classify_wsc_word(word: str) -> str:
    """Return the slot (``width``, ``style`` or ``color``) for *word*."""
    lower = word.lower()
    if lower in BORDER_STYLES:
        return "style"
    if lower in BORDER_WIDTHS or is_length(word):
        return "width"
    return "color"


def parse_wsc(value: str | Sequence[str]) -> Wsc:
    """Classify the words of *value* into width, style and color.

    Order does not matter. A later word of an already filled slot replaces
    the earlier one and is recorded as a collision. Never raises.
    """
    words = split_space(value) if isinstance(value, str) else list(value)
    slots: dict[str, str | None] = dict.fromkeys(WSC)
    collisions: list[str] = []
    keywords: list[str] = []
    for word in words:
        if word.lower() in GLOBAL_KEYWORDS:
            keywords.append(word)
            continue
        slot = classify_wsc_word(word)
        if slots[slot] is not None:
            collisions.append(slot)
        slots[slot] = word
    return Wsc(
        width=slots["width"],
        style=slots["style"],
        color=slots["color"],
        collisions=tuple(collisions),
        keywords=tuple(keywords),
    )


def is_valid_wsc(wsc: Wsc) -> bool:
    """True when no slot collided and at least one word was classified."""
    if wsc.collisions or wsc.keywords:
        return False
    return any(value is not None for value in wsc.values())
