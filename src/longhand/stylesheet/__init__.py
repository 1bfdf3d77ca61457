from longhand.stylesheet.errors import ParseError
from longhand.stylesheet.hacks import is_hack
from longhand.stylesheet.model import (
    AtRule,
    Comment,
    Declaration,
    RawDeclaration,
    Rule,
    Stylesheet,
)
from longhand.stylesheet.parser import parse_stylesheet
from longhand.stylesheet.writer import serialize_stylesheet

__all__ = [
    "parse_stylesheet",
    "serialize_stylesheet",
    "is_hack",
    "ParseError",
    "Stylesheet",
    "Rule",
    "AtRule",
    "Declaration",
    "RawDeclaration",
    "Comment",
]
