"""longhand - explode CSS shorthands, fill their defaults and add units to zeros."""

__version__ = "0.1.0"

from longhand.config import NormalizeConfig  # noqa: E402
from longhand.pipeline import (  # noqa: E402
    add_defaults,
    add_units,
    explode,
    normalize,
    process,
)

__all__ = [
    "__version__",
    "NormalizeConfig",
    "explode",
    "add_defaults",
    "add_units",
    "normalize",
    "process",
]
