"""TRBL expansion: the top/right/bottom/left rule of box shorthands."""

from __future__ import annotations

from typing import Sequence

from longhand.values.tokens import split_space

TRBL = ("top", "right", "bottom", "left")


def parse_trbl(value: str | Sequence[str]) -> list[str | None]:
    """Expand 1-4 words to exactly four (top, right, bottom, left) values.

    ``1px`` -> all four, ``1px 2px`` -> (1px, 2px, 1px, 2px),
    ``1px 2px 3px`` -> (1px, 2px, 3px, 2px). Any other word count yields
    four ``None`` slots.
    """
    words = split_space(value) if isinstance(value, str) else list(value)
    if not 1 <= len(words) <= 4:
        return [None, None, None, None]
    top = words[0]
    right = words[1] if len(words) > 1 else top
    bottom = words[2] if len(words) > 2 else top
    left = words[3] if len(words) > 3 else right
    return [top, right, bottom, left]
