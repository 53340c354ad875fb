"""
Belt Drive Calculator - Validation Rules

Checks request inputs before they reach the engine, and reviews a
finished design against common practice:
- Input domain (tooth counts, spacing, pitch)
- Small pulley tooth engagement
- Center distance range in belt pitches
- Stock belt lengths

The engine itself raises on out-of-domain input; this module turns the
same conditions into messages a UI can show next to its fields.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite, pi
from typing import List, Optional, Union

from ..enums import BeltRouting, RoundingPolicy
from ..io import BeltDriveDesign
from .constants import (
    BELT_TOOTH_INCREMENT,
    LENGTH_TOLERANCE_IN,
    MIN_PULLEY_TEETH,
    RECOMMENDED_CENTER_PITCHES,
    SPACING_DEVIATION_PITCHES,
)
from .core import STANDARD_PITCHES, _as_routing


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def _result(messages: List[ValidationMessage]) -> ValidationResult:
    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def validate_inputs(
    pulley1_teeth: int,
    pulley2_teeth: int,
    desired_spacing: float,
    routing: Union[BeltRouting, str] = BeltRouting.NORMAL,
    pitch: Optional[float] = None
) -> ValidationResult:
    """
    Validate request inputs before calling design_from_spacing().

    Args:
        pulley1_teeth: Tooth count of pulley 1
        pulley2_teeth: Tooth count of pulley 2
        desired_spacing: Desired center-to-center distance (inches)
        routing: Belt routing
        pitch: Belt pitch (inches), None for the default 5mm belt

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []
    routing = _as_routing(routing)

    messages.extend(_validate_teeth(pulley1_teeth, "Pulley #1"))
    messages.extend(_validate_teeth(pulley2_teeth, "Pulley #2"))
    messages.extend(_validate_spacing(desired_spacing, routing))
    if pitch is not None:
        messages.extend(_validate_pitch(pitch))

    return _result(messages)


def _validate_teeth(teeth: int, label: str) -> List[ValidationMessage]:
    """Pulley tooth counts must be positive; small pulleys get a warning."""
    if teeth < 0:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="PULLEY_TEETH_NEGATIVE",
            message=f"{label} has a negative tooth count ({teeth})",
            suggestion="Enter the number of teeth on the pulley"
        )]
    if teeth == 0:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="PULLEY_TEETH_ZERO",
            message=f"{label} has no teeth",
            suggestion="Enter the number of teeth on the pulley"
        )]
    if teeth < MIN_PULLEY_TEETH:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="PULLEY_TEETH_LOW",
            message=f"{label} has only {teeth} teeth (recommended minimum {MIN_PULLEY_TEETH})",
            suggestion="Few teeth in mesh - belt may skip under load"
        )]
    return []


def _validate_spacing(spacing: float, routing: BeltRouting) -> List[ValidationMessage]:
    if not isfinite(spacing) or spacing < 0:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="SPACING_NEGATIVE",
            message=f"Desired spacing must be a positive distance, got {spacing}",
            suggestion="Enter the desired center-to-center distance in inches"
        )]
    if spacing == 0 and routing == BeltRouting.CONTRA:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="SPACING_ZERO_CONTRA",
            message="A contra belt needs a desired spacing greater than zero",
            suggestion="Enter the desired center-to-center distance in inches"
        )]
    return []


def _validate_pitch(pitch: float) -> List[ValidationMessage]:
    if not isfinite(pitch) or pitch <= 0:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_NOT_POSITIVE",
            message=f"Belt pitch must be positive, got {pitch}"
        )]
    if not any(abs(pitch - p) < LENGTH_TOLERANCE_IN for p in STANDARD_PITCHES.values()):
        return [ValidationMessage(
            severity=Severity.INFO,
            code="PITCH_NON_STANDARD",
            message=f"Belt pitch {pitch:.5f}in is not a known belt ({', '.join(STANDARD_PITCHES)})"
        )]
    return []


def validate_design(design: BeltDriveDesign) -> ValidationResult:
    """
    Review a computed design against common belt drive practice.

    Args:
        design: Design from design_from_spacing()

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_teeth(design.pulley1.teeth, "Pulley #1"))
    messages.extend(_validate_teeth(design.pulley2.teeth, "Pulley #2"))
    messages.extend(_validate_pitch(design.pitch_in))
    messages.extend(_validate_wrap(design))
    messages.extend(_validate_center_range(design))
    messages.extend(_validate_stock_length(design))
    messages.extend(_validate_deviation(design))

    return _result(messages)


def _validate_wrap(design: BeltDriveDesign) -> List[ValidationMessage]:
    """An open belt shorter than the pulley arcs alone gives a spurious spacing."""
    if design.routing != BeltRouting.NORMAL:
        return []

    messages = []
    wrap = pi * (design.pulley1.pitch_radius_in + design.pulley2.pitch_radius_in)
    for sol in design.solutions:
        if sol.belt_length_in < wrap - LENGTH_TOLERANCE_IN:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="BELT_SHORTER_THAN_WRAP",
                message=(
                    f"{sol.policy.value.title()} belt ({sol.belt_teeth} teeth, "
                    f"{sol.belt_length_in:.3f}in) is shorter than the wrap around "
                    f"both pulleys ({wrap:.3f}in)"
                ),
                suggestion="Increase the desired spacing"
            ))
    return messages


def _validate_center_range(design: BeltDriveDesign) -> List[ValidationMessage]:
    low, high = RECOMMENDED_CENTER_PITCHES
    sol = design.solutions[0] if design.solutions else None
    if sol is None:
        return []

    in_pitches = sol.center_to_center_in / design.pitch_in
    if low <= in_pitches <= high:
        return []
    return [ValidationMessage(
        severity=Severity.WARNING,
        code="CENTER_DISTANCE_OUT_OF_RANGE",
        message=(
            f"Center distance is {in_pitches:.1f} pitches. "
            f"Recommended range is {low:.0f}-{high:.0f} pitches"
        ),
        suggestion="Short drives wear belts faster; long drives may need an idler"
    )]


def _validate_stock_length(design: BeltDriveDesign) -> List[ValidationMessage]:
    messages = []
    for sol in design.solutions:
        if sol.policy == RoundingPolicy.ROUNDED:
            continue
        if sol.belt_teeth % BELT_TOOTH_INCREMENT != 0:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="BELT_NOT_STOCK_LENGTH",
                message=(
                    f"{sol.policy.value.title()} belt has {sol.belt_teeth} teeth, "
                    f"not a multiple of {BELT_TOOTH_INCREMENT}"
                ),
                suggestion="Needs a custom belt"
            ))
    return messages


def _validate_deviation(design: BeltDriveDesign) -> List[ValidationMessage]:
    sol = design.solution(RoundingPolicy.ROUNDED)
    if sol is None:
        return []

    deviation = sol.center_to_center_in - design.desired_spacing_in
    if abs(deviation) <= SPACING_DEVIATION_PITCHES * design.pitch_in:
        return []
    return [ValidationMessage(
        severity=Severity.INFO,
        code="SPACING_DEVIATION",
        message=(
            f"Stock belt spacing {sol.center_to_center_in:.3f}in differs from "
            f"desired {design.desired_spacing_in:.3f}in by {deviation:+.3f}in"
        ),
        suggestion="Consider an exact (floor/ceiling) belt or an adjustable mount"
    )]
