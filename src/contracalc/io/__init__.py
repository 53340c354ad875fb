"""
ContraCalc IO - JSON schema, loaders, and savers.

Example:
    >>> from contracalc.io import load_design_json, save_design_json
    >>> from contracalc.calculator import design_from_spacing
    >>>
    >>> design = design_from_spacing(20, 40, desired_spacing=5.0)
    >>> save_design_json(design, "design.json")
    >>> loaded = load_design_json("design.json")
"""

from .loaders import (
    load_design_json,
    save_design_json,
    PulleyParams,
    BeltSolution,
    BeltDriveDesign,
)

from .schema import SCHEMA_VERSION

__all__ = [
    "load_design_json",
    "save_design_json",
    "PulleyParams",
    "BeltSolution",
    "BeltDriveDesign",
    "SCHEMA_VERSION",
]
