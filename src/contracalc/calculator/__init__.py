"""
Belt Drive Calculator - center-to-center distances for timing belts.

This module provides calculator functions for normal (untwisted) and
contra (twisted) belt drives. Design functions return BeltDriveDesign
models for type safety.

Example:
    >>> from contracalc.calculator import design_from_spacing, to_summary
    >>>
    >>> design = design_from_spacing(20, 40, desired_spacing=5.0)
    >>> print(to_summary(design))
"""

from .core import (
    # Constants
    PITCH_5MM,
    PITCH_3MM,
    STANDARD_PITCHES,
    ALL_POLICIES,

    # Units
    mm_to_inches,
    inches_to_mm,
    pitch_from_name,

    # Pulley geometry
    diameter_from_teeth,
    radius_from_teeth,

    # Solvers
    normal_center_to_center,
    contra_center_to_center,
    center_to_center,

    # Desired-length conversion
    normal_belt_length,
    contra_belt_length,
    desired_belt_length,

    # Tooth-count reconciliation
    round_to_increment,
    reconcile_teeth,
    belt_length_actual,

    # High-level design function (returns BeltDriveDesign)
    design_from_spacing,
)

from .errors import (
    BeltCalcError,
    InvalidInputError,
    NoPhysicalSolutionError,
)

from .validation import (
    validate_inputs,
    validate_design,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from ..enums import (
    BeltRouting,
    RoundingPolicy,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

# Convenience imports
from ..io import PulleyParams, BeltSolution, BeltDriveDesign


__all__ = [
    # Constants
    "PITCH_5MM",
    "PITCH_3MM",
    "STANDARD_PITCHES",
    "ALL_POLICIES",

    # Enums
    "BeltRouting",
    "RoundingPolicy",

    # Models
    "PulleyParams",
    "BeltSolution",
    "BeltDriveDesign",

    # Units
    "mm_to_inches",
    "inches_to_mm",
    "pitch_from_name",

    # Pulley geometry
    "diameter_from_teeth",
    "radius_from_teeth",

    # Solvers
    "normal_center_to_center",
    "contra_center_to_center",
    "center_to_center",

    # Desired-length conversion
    "normal_belt_length",
    "contra_belt_length",
    "desired_belt_length",

    # Tooth-count reconciliation
    "round_to_increment",
    "reconcile_teeth",
    "belt_length_actual",
    "design_from_spacing",

    # Errors
    "BeltCalcError",
    "InvalidInputError",
    "NoPhysicalSolutionError",

    # Validation
    "validate_inputs",
    "validate_design",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
