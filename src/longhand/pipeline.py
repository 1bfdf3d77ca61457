"""Text-in, text-out entry points for the three passes."""

from __future__ import annotations

from typing import Iterable

from longhand.config import NormalizeConfig
from longhand.stylesheet import parse_stylesheet, serialize_stylesheet
from longhand.transforms import (
    DefaultsTransform,
    ExplodeTransform,
    Transform,
    UnitsTransform,
    apply_transforms,
    builtin_transforms,
)


def process(css: str, transforms: Iterable[Transform]) -> str:
    """Parse *css*, run *transforms* in order and serialize the result."""
    sheet = apply_transforms(parse_stylesheet(css), transforms)
    return serialize_stylesheet(sheet)


def explode(css: str, ignore: Iterable[str] = ()) -> str:
    return process(css, [ExplodeTransform(ignore=ignore)])


def add_defaults(css: str, ignore: Iterable[str] = ()) -> str:
    return process(css, [DefaultsTransform(ignore=ignore)])


def add_units(css: str, ignore: Iterable[str] = ()) -> str:
    return process(css, [UnitsTransform(ignore=ignore)])


def normalize(css: str, config: NormalizeConfig | None = None) -> str:
    """Run every pass *config* enables (all three by default)."""
    return process(css, builtin_transforms(config))
