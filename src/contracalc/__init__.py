"""
ContraCalc - timing belt center-to-center calculator.

Works out pulley spacing for normal (untwisted) and contra (twisted)
timing belts from pulley tooth counts and a desired spacing, snapping
the belt to stock tooth counts or bracketing it with exact ones.

Example:
    >>> from contracalc import design_from_spacing, BeltRouting
    >>>
    >>> design = design_from_spacing(20, 30, 4.0, routing=BeltRouting.CONTRA)
    >>> design.solution("rounded").center_to_center_in

Note: All imports are lazy-loaded for fast startup. The enums can be
imported without triggering IO (Pydantic) imports.
"""

__version__ = "0.2.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"BeltRouting", "RoundingPolicy"}

_CALCULATOR = {
    "PITCH_5MM",
    "PITCH_3MM",
    "mm_to_inches",
    "inches_to_mm",
    "diameter_from_teeth",
    "radius_from_teeth",
    "normal_center_to_center",
    "contra_center_to_center",
    "center_to_center",
    "reconcile_teeth",
    "belt_length_actual",
    "design_from_spacing",
    "validate_inputs",
    "validate_design",
    "Severity",
    "ValidationResult",
    "BeltCalcError",
    "InvalidInputError",
    "NoPhysicalSolutionError",
}

_IO = {
    "load_design_json",
    "save_design_json",
    "PulleyParams",
    "BeltSolution",
    "BeltDriveDesign",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'contracalc' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "BeltRouting",
    "RoundingPolicy",

    # Calculator (lazy loaded from calculator)
    "PITCH_5MM",
    "PITCH_3MM",
    "mm_to_inches",
    "inches_to_mm",
    "diameter_from_teeth",
    "radius_from_teeth",
    "normal_center_to_center",
    "contra_center_to_center",
    "center_to_center",
    "reconcile_teeth",
    "belt_length_actual",
    "design_from_spacing",
    "validate_inputs",
    "validate_design",
    "Severity",
    "ValidationResult",
    "BeltCalcError",
    "InvalidInputError",
    "NoPhysicalSolutionError",

    # IO (lazy loaded from io)
    "load_design_json",
    "save_design_json",
    "PulleyParams",
    "BeltSolution",
    "BeltDriveDesign",
]
