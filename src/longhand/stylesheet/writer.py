"""Serialize a Stylesheet tree back to CSS text.

The layout is normalized rather than preserved: one declaration per line,
nested blocks indented, top-level nodes separated by a blank line.
"""

from __future__ import annotations

from longhand.stylesheet.model import AtRule, Comment, Rule, Stylesheet

__all__ = ["serialize_stylesheet"]


def _write_block(header: str, children: list[str], pad: str) -> str:
    if not children:
        return f"{pad}{header} {{}}"
    return "\n".join([f"{pad}{header} {{", *children, f"{pad}}}"])


def _write_node(node, depth: int, indent: str) -> str:
    pad = indent * depth
    if isinstance(node, Rule):
        body = [f"{pad}{indent}{child}" for child in node.nodes]
        return _write_block(node.selector, body, pad)
    if isinstance(node, AtRule):
        header = f"@{node.name} {node.prelude}" if node.prelude else f"@{node.name}"
        if node.nodes is None:
            return f"{pad}{header};"
        if node.nested:
            body = [_write_node(child, depth + 1, indent) for child in node.nodes]
        else:
            body = [f"{pad}{indent}{child}" for child in node.nodes]
        return _write_block(header, body, pad)
    if isinstance(node, Comment):
        return f"{pad}{node}"
    raise TypeError(f"Cannot serialize {type(node).__name__}")


def serialize_stylesheet(sheet: Stylesheet, indent: str = "    ") -> str:
    """Return CSS text for *sheet*, ending with a newline unless empty."""
    chunks = [_write_node(node, 0, indent) for node in sheet.nodes]
    if not chunks:
        return ""
    return "\n\n".join(chunks) + "\n"
