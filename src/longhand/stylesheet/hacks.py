"""Detection of browser-targeting hack declarations.

Hacks rely on parser bugs of old browsers, so their values are not real CSS
values and must never be rewritten:

    _height: 1px;          underscore hack (IE6)
    *zoom: 1;              star hack (IE7), kept as a RawDeclaration
    color: red\\9;          backslash-nine hack (IE8-10)
    color: red\\0/;         backslash-zero hack (IE8)
    color: red !ie;        important-ie hack
"""

from __future__ import annotations

import re

from longhand.stylesheet.model import Declaration

__all__ = ["is_hack"]

_BANG_IE_RE = re.compile(r"!\s*ie\b", re.IGNORECASE)


def _is_property_hack(prop: str) -> bool:
    return prop[:1] in ("_", "*")


def _is_value_hack(value: str) -> bool:
    if value.endswith(("\\9", "\\0/")):
        return True
    return bool(_BANG_IE_RE.search(value))


def is_hack(decl: Declaration) -> bool:
    """Return True if *decl* is a hack declaration no pass may touch."""
    if decl.is_custom_property:
        return False
    return _is_property_hack(decl.prop) or _is_value_hack(decl.value)
