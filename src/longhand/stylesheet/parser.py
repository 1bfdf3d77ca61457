"""Stylesheet parser built on tinycss2.

tinycss2 provides the tokenizer and the rule-level grammar; this module
turns its nodes into the mutable tree of :mod:`longhand.stylesheet.model`.
Declaration bodies are split on top-level semicolons by hand so that chunks
tinycss2 rejects (``*zoom: 1``) survive verbatim as RawDeclaration nodes
instead of being dropped.
"""

from __future__ import annotations

import re

import tinycss2

from longhand.stylesheet.errors import ParseError
from longhand.stylesheet.model import (
    AtRule,
    BodyNode,
    Comment,
    Declaration,
    RawDeclaration,
    Rule,
    Stylesheet,
)

__all__ = ["parse_stylesheet"]

# At-rules whose block holds rules rather than declarations.
_RULE_LIST_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "layer",
    "container",
    "scope",
    "starting-style",
})


def _strip_whitespace(tokens: list) -> list:
    """Drop leading and trailing whitespace tokens."""
    start, end = 0, len(tokens)
    while start < end and tokens[start].type == "whitespace":
        start += 1
    while end > start and tokens[end - 1].type == "whitespace":
        end -= 1
    return tokens[start:end]


def _serialize(tokens: list) -> str:
    return tinycss2.serialize(_strip_whitespace(list(tokens)))


# tinycss2 unescapes the \9 and \0 hacks into a tab and U+FFFD; the
# serializer would then write them back as "\<tab>" and a raw U+FFFD.
_TAB_HACK_RE = re.compile(r"\\\t$")
_ZERO_HACK_RE = re.compile("\ufffd/$")


def _source_text(tokens: list) -> str:
    """Serialize *tokens*, restoring hack escapes as the author wrote them."""
    text = _serialize(tokens)
    text = _TAB_HACK_RE.sub(r"\\9", text)
    return _ZERO_HACK_RE.sub(r"\\0/", text)


def _split_chunks(tokens: list) -> list[list]:
    """Split block content on top-level ``;`` literals."""
    chunks: list[list] = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ";":
            chunks.append([])
        else:
            chunks[-1].append(token)
    return chunks


def _parse_chunk(chunk: list) -> list[BodyNode]:
    nodes: list[BodyNode] = []
    index = 0
    while index < len(chunk) and chunk[index].type in ("whitespace", "comment"):
        if chunk[index].type == "comment":
            nodes.append(Comment(chunk[index].value))
        index += 1
    rest = chunk[index:]
    if not rest:
        return nodes

    parsed = tinycss2.parse_one_declaration(rest)
    if parsed.type == "error":
        nodes.append(RawDeclaration(_source_text(rest)))
        return nodes

    prop = parsed.name if parsed.name.startswith("--") else parsed.lower_name
    nodes.append(
        Declaration(
            prop=prop,
            value=_source_text(parsed.value),
            important=parsed.important,
        )
    )
    return nodes


def _parse_body(content: list) -> list[BodyNode]:
    """Parse the contents of a ``{}`` block into declarations and comments."""
    nodes: list[BodyNode] = []
    for chunk in _split_chunks(content):
        nodes.extend(_parse_chunk(chunk))
    return nodes


def _convert_at_rule(node) -> AtRule:
    name = node.lower_at_keyword
    prelude = _serialize(node.prelude)
    if node.content is None:
        return AtRule(name=name, prelude=prelude)
    if name in _RULE_LIST_AT_RULES or name.endswith("keyframes"):
        children = tinycss2.parse_rule_list(
            node.content, skip_comments=False, skip_whitespace=True
        )
        return AtRule(
            name=name, prelude=prelude, nodes=_convert_nodes(children), nested=True
        )
    return AtRule(name=name, prelude=prelude, nodes=_parse_body(node.content))


def _convert_nodes(nodes: list) -> list:
    converted: list = []
    for node in nodes:
        if node.type == "error":
            raise ParseError(node.message, line=node.source_line, column=node.source_column)
        if node.type == "comment":
            converted.append(Comment(node.value))
        elif node.type == "qualified-rule":
            converted.append(
                Rule(selector=_serialize(node.prelude), nodes=_parse_body(node.content))
            )
        elif node.type == "at-rule":
            converted.append(_convert_at_rule(node))
    return converted


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet tree.

    Raises :class:`ParseError` when tinycss2 reports a rule-level error,
    e.g. a selector that is never followed by a ``{}`` block.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=False, skip_whitespace=True)
    return Stylesheet(nodes=_convert_nodes(nodes))
