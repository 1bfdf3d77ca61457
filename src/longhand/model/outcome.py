"""Outcome model: what a pass decided for one declaration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Status(Enum):
    """Possible outcomes of running a pass on a declaration."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Outcome:
    """Result of a pass for one ``(prop, value)`` pair.

    A CHANGED outcome carries the declarations that replace the input one,
    in order. An UNCHANGED outcome carries the reason the declaration was
    left alone.
    """

    status: Status
    declarations: tuple[tuple[str, str], ...] = ()
    reason: str = ""

    @property
    def changed(self) -> bool:
        return self.status is Status.CHANGED

    @classmethod
    def unchanged(cls, reason: str = "") -> Outcome:
        return cls(status=Status.UNCHANGED, reason=reason)

    @classmethod
    def replaced(cls, declarations: Iterable[tuple[str, str]]) -> Outcome:
        return cls(status=Status.CHANGED, declarations=tuple(declarations))
