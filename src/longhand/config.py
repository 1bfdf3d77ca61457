from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def normalize_ignore(names: str | Iterable[str] | None) -> frozenset[str]:
    """Turn ``"Margin, opacity"`` or ``["Margin"]`` into ``{"margin", ...}``."""
    if not names:
        return frozenset()
    if isinstance(names, str):
        names = names.split(",")
    return frozenset(name.strip().lower() for name in names if name.strip())


@dataclass(frozen=True)
class NormalizeConfig:
    ignore: frozenset[str] = field(default_factory=frozenset)
    explode: bool = True
    add_defaults: bool = True
    add_units: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignore", normalize_ignore(self.ignore))

    @classmethod
    def from_ignore(cls, names: str | Iterable[str] | None, **kwargs: bool) -> NormalizeConfig:
        return cls(ignore=normalize_ignore(names), **kwargs)
