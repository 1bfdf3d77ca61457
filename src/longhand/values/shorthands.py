"""Shorthand grammars used to fill omitted components with their defaults.

Each family is a :class:`ShorthandSpec` registered in :data:`SHORTHANDS` by
the :func:`shorthand` decorator. A classifier receives the words of one
layer and returns one value per slot, ``None`` for slots the author left
out, or ``None`` altogether when the layer cannot be classified. Defaults
are substituted by the ShorthandSpec, never by the classifier.

Classifiers are small reducers over the word sequence: each word is matched
against the rules in order, the first match wins, and a later word matching
an already filled slot overrides the earlier one unless noted otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from longhand.values.tokens import (
    GLOBAL_KEYWORDS,
    MATH_FUNCTIONS,
    is_dimension,
    is_length_percentage,
    is_number,
    is_numeric,
    is_percentage,
    is_time,
    single_token,
    split_comma,
    split_space,
)
from longhand.values.wsc import parse_wsc

Slots = list[Optional[str]]
Classifier = Callable[[list[str]], Optional[Slots]]


def _join_words(values: Sequence[str]) -> str:
    return " ".join(value for value in values if value)


@dataclass(frozen=True)
class ShorthandSpec:
    """Grammar of one shorthand family.

    Attributes:
        name: The shorthand property name.
        slots: Component names in canonical order.
        defaults: Default token for each slot, same order as ``slots``.
        classifier: Maps the words of one layer onto slot values.
        layered: Whether the value is a comma-separated list of layers.
        joiner: Serializes one fully populated layer.
    """

    name: str
    slots: tuple[str, ...]
    defaults: tuple[str, ...]
    classifier: Classifier
    layered: bool = False
    joiner: Callable[[Sequence[str]], str] = _join_words

    def classify(self, value: str) -> list[Slots] | None:
        """Return the slot values of every layer, or None if unclassifiable."""
        layers = split_comma(value) if self.layered else [value]
        if not layers:
            return None
        result: list[Slots] = []
        for layer in layers:
            words = split_space(layer)
            if not words:
                return None
            slots = self.classifier(words)
            if slots is None or len(slots) != len(self.slots):
                return None
            result.append(slots)
        return result

    def fill(self, slots: Slots) -> list[str]:
        return [
            value if value is not None else default
            for value, default in zip(slots, self.defaults)
        ]

    def expand(self, value: str) -> str | None:
        """Re-serialize *value* with every slot populated."""
        layers = self.classify(value)
        if layers is None:
            return None
        return ", ".join(self.joiner(self.fill(slots)) for slots in layers)


SHORTHANDS: dict[str, ShorthandSpec] = {}


def shorthand(
    name: str,
    slots: Sequence[str],
    defaults: Sequence[str],
    *,
    layered: bool = False,
    joiner: Callable[[Sequence[str]], str] = _join_words,
) -> Callable[[Classifier], Classifier]:
    """Decorator registering a classifier as the grammar of *name*."""
    if len(slots) != len(defaults):
        raise ValueError(f"{name}: {len(slots)} slots but {len(defaults)} defaults")

    def decorator(classifier: Classifier) -> Classifier:
        if name in SHORTHANDS:
            raise ValueError(f"Shorthand already registered: {name}")
        SHORTHANDS[name] = ShorthandSpec(
            name=name,
            slots=tuple(slots),
            defaults=tuple(defaults),
            classifier=classifier,
            layered=layered,
            joiner=joiner,
        )
        return classifier

    return decorator


# ---------------------------------------------------------------------------
# Keyword sets
# ---------------------------------------------------------------------------

TIMING_KEYWORDS = frozenset({
    "ease",
    "linear",
    "ease-in",
    "ease-out",
    "ease-in-out",
    "step-start",
    "step-end",
})
TIMING_FUNCTIONS = ("cubic-bezier(", "steps(", "linear(")

ANIMATION_DIRECTIONS = frozenset({"normal", "reverse", "alternate", "alternate-reverse"})
ANIMATION_FILL_MODES = frozenset({"none", "forwards", "backwards", "both"})
ANIMATION_PLAY_STATES = frozenset({"running", "paused"})

LIST_STYLE_POSITIONS = frozenset({"inside", "outside"})
IMAGE_FUNCTIONS = (
    "url(",
    "image(",
    "image-set(",
    "cross-fade(",
    "element(",
    "linear-gradient(",
    "radial-gradient(",
    "conic-gradient(",
    "repeating-linear-gradient(",
    "repeating-radial-gradient(",
    "repeating-conic-gradient(",
)

FONT_STYLES = frozenset({"italic", "oblique"})
FONT_VARIANTS = frozenset({"small-caps"})
FONT_WEIGHTS = frozenset({"bold", "bolder", "lighter"})
FONT_STRETCHES = frozenset({
    "ultra-condensed",
    "extra-condensed",
    "condensed",
    "semi-condensed",
    "semi-expanded",
    "expanded",
    "extra-expanded",
    "ultra-expanded",
})
FONT_SIZES = frozenset({
    "xx-small",
    "x-small",
    "small",
    "medium",
    "large",
    "x-large",
    "xx-large",
    "xxx-large",
    "smaller",
    "larger",
})


def is_timing_function(word: str) -> bool:
    lower = word.lower()
    return lower in TIMING_KEYWORDS or lower.startswith(TIMING_FUNCTIONS)


# ---------------------------------------------------------------------------
# animation / transition
# ---------------------------------------------------------------------------


def _is_iteration_count(word: str) -> bool:
    token = single_token(word)
    return token is not None and token.type == "number" and token.value >= 0


@shorthand(
    "animation",
    slots=(
        "name",
        "duration",
        "timing-function",
        "delay",
        "iteration-count",
        "direction",
        "fill-mode",
        "play-state",
    ),
    defaults=("none", "0s", "ease", "0s", "1", "normal", "none", "running"),
    layered=True,
)
def classify_animation(words: list[str]) -> Slots:
    slots: dict[str, str | None] = dict.fromkeys((
        "name",
        "duration",
        "timing-function",
        "delay",
        "iteration-count",
        "direction",
        "fill-mode",
        "play-state",
    ))
    times = 0
    for word in words:
        lower = word.lower()
        if is_time(word):
            slots["duration" if times == 0 else "delay"] = word
            times += 1
        elif is_timing_function(word):
            slots["timing-function"] = word
        elif lower == "infinite" or _is_iteration_count(word):
            # Only the first iteration count counts.
            if slots["iteration-count"] is None:
                slots["iteration-count"] = word
        elif lower in ANIMATION_DIRECTIONS:
            slots["direction"] = word
        elif lower in ANIMATION_FILL_MODES:
            slots["fill-mode"] = word
        elif lower in ANIMATION_PLAY_STATES:
            slots["play-state"] = word
        else:
            slots["name"] = word
    return list(slots.values())


@shorthand(
    "transition",
    slots=("property", "duration", "timing-function", "delay"),
    defaults=("all", "0s", "ease", "0s"),
    layered=True,
)
def classify_transition(words: list[str]) -> Slots:
    prop = duration = timing = delay = None
    times = 0
    for word in words:
        if is_time(word):
            if times == 0:
                duration = word
            else:
                delay = word
            times += 1
        elif is_timing_function(word):
            timing = word
        else:
            prop = word
    return [prop, duration, timing, delay]


# ---------------------------------------------------------------------------
# box-shadow
# ---------------------------------------------------------------------------


@shorthand(
    "box-shadow",
    slots=("offset-x", "offset-y", "blur-radius", "spread-radius", "color", "inset"),
    defaults=("0", "0", "0", "0", "currentcolor", ""),
    layered=True,
)
def classify_box_shadow(words: list[str]) -> Slots | None:
    if len(words) == 1 and words[0].lower() == "none":
        return None
    lengths: list[str] = []
    color = inset = None
    for word in words:
        if word.lower() == "inset":
            inset = "inset"
        elif len(lengths) < 4 and is_numeric(word):
            lengths.append(word)
        else:
            color = word
    offsets: Slots = [*lengths, *[None] * (4 - len(lengths))]
    return [*offsets, color, inset]


# ---------------------------------------------------------------------------
# flex / gap
# ---------------------------------------------------------------------------


def _is_flex_basis(word: str) -> bool:
    if word.lower() in ("auto", "content"):
        return True
    return is_dimension(word) or is_percentage(word) or word.lower().startswith(MATH_FUNCTIONS)


@shorthand("flex", slots=("grow", "shrink", "basis"), defaults=("0", "1", "0%"))
def classify_flex(words: list[str]) -> Slots | None:
    if len(words) == 1:
        lower = words[0].lower()
        if lower == "none":
            return ["0", "0", "auto"]
        if lower == "auto":
            return ["1", "1", "auto"]
        if is_number(words[0]):
            return [words[0], None, None]

    numbers: list[str] = []
    basis = None
    for word in words:
        if _is_flex_basis(word):
            basis = word
        elif is_number(word) and len(numbers) < 2:
            numbers.append(word)
        elif is_number(word):
            # A third unitless number can only be a zero basis.
            basis = word
        else:
            return None
    grow = numbers[0] if numbers else None
    shrink = numbers[1] if len(numbers) > 1 else None
    return [grow, shrink, basis]


@shorthand("gap", slots=("row-gap", "column-gap"), defaults=("normal", "normal"))
def classify_gap(words: list[str]) -> Slots | None:
    if len(words) > 2:
        return None
    return [words[0], words[-1]]


# ---------------------------------------------------------------------------
# list-style
# ---------------------------------------------------------------------------


@shorthand(
    "list-style",
    slots=("type", "position", "image"),
    defaults=("disc", "outside", "none"),
)
def classify_list_style(words: list[str]) -> Slots:
    kind = position = image = None
    for word in words:
        lower = word.lower()
        if lower == "none" and kind is not None:
            # A second none can only be the image.
            image = word
        elif lower in LIST_STYLE_POSITIONS:
            position = word
        elif lower.startswith(IMAGE_FUNCTIONS):
            image = word
        else:
            kind = word
    return [kind, position, image]


# ---------------------------------------------------------------------------
# font
# ---------------------------------------------------------------------------


def _join_font(values: Sequence[str]) -> str:
    style, variant, weight, stretch, size, line_height, family = values
    return " ".join([style, variant, weight, stretch, f"{size}/{line_height}", family])


def _merge_slashes(words: list[str]) -> list[str]:
    """Glue ``12px / 1.5`` back into the single word ``12px/1.5``."""
    merged: list[str] = []
    for word in words:
        if merged and (word.startswith("/") or merged[-1].endswith("/")):
            merged[-1] += word
        else:
            merged.append(word)
    return merged


def _is_font_size(word: str) -> bool:
    return (
        word.lower() in FONT_SIZES
        or is_length_percentage(word)
        or word.lower().startswith(MATH_FUNCTIONS)
    )


def _is_font_weight(word: str) -> bool:
    if word.lower() in FONT_WEIGHTS:
        return True
    token = single_token(word)
    return token is not None and token.type == "number" and 1 <= token.value <= 1000


@shorthand(
    "font",
    slots=("style", "variant", "weight", "stretch", "size", "line-height", "family"),
    defaults=("normal", "normal", "normal", "normal", "medium", "normal", "sans-serif"),
    joiner=_join_font,
)
def classify_font(words: list[str]) -> Slots | None:
    words = _merge_slashes(words)
    slots: dict[str, str | None] = dict.fromkeys(
        ("style", "variant", "weight", "stretch", "size", "line-height", "family")
    )

    # Right to left: everything after the size is the family.
    boundary = None
    for index in range(len(words) - 1, -1, -1):
        size, _, line_height = words[index].partition("/")
        if _is_font_size(size):
            boundary = index
            slots["size"] = size
            slots["line-height"] = line_height or None
            break
    if boundary is None:
        # System fonts (caption, menu, ...) have no size.
        return None
    if boundary + 1 < len(words):
        slots["family"] = " ".join(words[boundary + 1:])

    for word in reversed(words[:boundary]):
        lower = word.lower()
        if lower == "normal":
            continue
        if lower in FONT_STYLES:
            slots["style"] = word
        elif lower in FONT_VARIANTS:
            slots["variant"] = word
        elif _is_font_weight(word):
            slots["weight"] = word
        elif lower in FONT_STRETCHES:
            slots["stretch"] = word
        else:
            return None
    return list(slots.values())


# ---------------------------------------------------------------------------
# outline
# ---------------------------------------------------------------------------


@shorthand(
    "outline",
    slots=("width", "style", "color"),
    defaults=("medium", "none", "currentcolor"),
)
def classify_outline(words: list[str]) -> Slots | None:
    for word in words:
        if word.lower() in GLOBAL_KEYWORDS:
            return [word, word, word]
    # outline-style accepts auto, which the border grammar would read as a color.
    autos = [word for word in words if word.lower() == "auto"]
    wsc = parse_wsc([word for word in words if word.lower() != "auto"])
    if wsc.collisions or len(autos) > 1 or (autos and wsc.style is not None):
        return None
    style = autos[0] if autos else wsc.style
    return [wsc.width, style, wsc.color]
