"""Stylesheet model: a small mutable tree of rules and declarations.

Unlike the value layer, the tree is mutable: transforms insert, rewrite and
remove declarations in place, and every child keeps a ``parent`` back-link
so a declaration can be replaced without knowing where it lives.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, Union


@dataclass
class Declaration:
    """A single ``prop: value`` pair inside a rule body.

    ``prop`` is lowercased by the parser except for custom properties,
    which are case-sensitive.
    """

    prop: str
    value: str
    important: bool = False
    parent: Block | None = field(default=None, repr=False, compare=False)

    @property
    def is_custom_property(self) -> bool:
        return self.prop.startswith("--")

    def clone(self, **overrides: object) -> Declaration:
        """Return a detached copy, optionally overriding fields."""
        overrides.setdefault("parent", None)
        return replace(self, **overrides)

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.remove(self)

    def __str__(self) -> str:
        important = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{important};"


@dataclass
class RawDeclaration:
    """A body chunk the parser could not read as a declaration (``*zoom: 1``)."""

    text: str
    parent: Block | None = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return f"{self.text};"


@dataclass
class Comment:
    text: str
    parent: Block | None = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return f"/*{self.text}*/"


BodyNode = Union[Declaration, RawDeclaration, Comment]


class Block:
    """Mixin for nodes that own an ordered list of children in ``nodes``."""

    nodes: list

    def _adopt(self) -> None:
        for node in self.nodes:
            node.parent = self

    def _index(self, ref: object) -> int:
        for index, node in enumerate(self.nodes):
            if node is ref:
                return index
        raise ValueError(f"{ref!r} is not a child of this block")

    def append(self, node) -> None:
        node.parent = self
        self.nodes.append(node)

    def insert_before(self, ref, node) -> None:
        node.parent = self
        self.nodes.insert(self._index(ref), node)

    def insert_after(self, ref, node) -> None:
        node.parent = self
        self.nodes.insert(self._index(ref) + 1, node)

    def remove(self, node) -> None:
        del self.nodes[self._index(node)]
        node.parent = None

    def declarations(self) -> list[Declaration]:
        """Snapshot of the declarations in source order.

        Mutating the block while iterating the snapshot is safe; nodes
        inserted during the iteration are not visited.
        """
        return [node for node in self.nodes if isinstance(node, Declaration)]


@dataclass(eq=False)
class Rule(Block):
    """A qualified rule: ``selector { body }``."""

    selector: str
    nodes: list[BodyNode] = field(default_factory=list)
    parent: Block | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt()


@dataclass(eq=False)
class AtRule(Block):
    """An at-rule such as ``@media``, ``@font-face`` or ``@import``.

    ``nodes`` is ``None`` for statement at-rules (``@import url(a.css);``).
    When ``nested`` is true the block holds rules, otherwise declarations.
    """

    name: str
    prelude: str = ""
    nodes: list | None = None
    nested: bool = False
    parent: Block | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.nodes is not None:
            self._adopt()

    def declarations(self) -> list[Declaration]:
        if self.nodes is None or self.nested:
            return []
        return super().declarations()


@dataclass(eq=False)
class Stylesheet(Block):
    """The root of a parsed stylesheet."""

    nodes: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self._adopt()

    @property
    def rules(self) -> list[Rule]:
        return list(self.walk_rules())

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every qualified rule, including rules nested in at-rules."""
        yield from _walk_rules(self.nodes)

    def walk_declarations(self) -> Iterator[Declaration]:
        """Yield every declaration in document order.

        Declarations of declaration-bodied at-rules (``@font-face``) are
        included. Each block is snapshotted before it is visited.
        """
        yield from _walk_declarations(self.nodes)


def _walk_rules(nodes: list) -> Iterator[Rule]:
    for node in list(nodes):
        if isinstance(node, Rule):
            yield node
        elif isinstance(node, AtRule) and node.nested and node.nodes:
            yield from _walk_rules(node.nodes)


def _walk_declarations(nodes: list) -> Iterator[Declaration]:
    for node in list(nodes):
        if isinstance(node, Rule):
            yield from node.declarations()
        elif isinstance(node, AtRule) and node.nodes:
            if node.nested:
                yield from _walk_declarations(node.nodes)
            else:
                yield from node.declarations()
