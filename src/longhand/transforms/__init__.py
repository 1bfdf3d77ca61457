from longhand.config import NormalizeConfig
from longhand.transforms.base import Transform
from longhand.transforms.defaults import DefaultsTransform, add_defaults_to_value
from longhand.transforms.explode import ExplodeTransform, explode_declaration
from longhand.transforms.units import UnitsTransform, add_units_to_value

__all__ = [
    "Transform",
    "ExplodeTransform",
    "DefaultsTransform",
    "UnitsTransform",
    "explode_declaration",
    "add_defaults_to_value",
    "add_units_to_value",
    "apply_transforms",
    "builtin_transforms",
]


def builtin_transforms(config=None):
    """Return the passes enabled by *config*, in Explode, Defaults, Units order."""
    config = config or NormalizeConfig()
    transforms = []
    if config.explode:
        transforms.append(ExplodeTransform(ignore=config.ignore))
    if config.add_defaults:
        transforms.append(DefaultsTransform(ignore=config.ignore))
    if config.add_units:
        transforms.append(UnitsTransform(ignore=config.ignore))
    return transforms


def apply_transforms(sheet, transforms=None, custom_transforms=None):
    """Apply *transforms* (default: all built-in passes) and any custom ones to *sheet*."""
    transforms = list(transforms) if transforms is not None else builtin_transforms()
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        sheet = t.apply(sheet)
    return sheet
