"""
Belt Drive Calculator - Core Calculations

Pure mathematical functions for timing belt drives.
Returns typed BeltDriveDesign models for type safety.

All lengths are in inches. The pitch of a belt is the arc length between
neighbouring teeth measured on the pulley's pitch circle, so

    teeth × pitch = π × pitch_diameter
"""

import logging
from math import ceil, floor, isfinite, pi, sqrt
from typing import Iterable, Union

from ..enums import BeltRouting, RoundingPolicy
from ..io import BeltDriveDesign, BeltSolution, PulleyParams
from .constants import (
    BELT_TOOTH_INCREMENT,
    MM_PER_INCH,
)
from .errors import InvalidInputError, NoPhysicalSolutionError

logger = logging.getLogger(__name__)


def mm_to_inches(mm: float) -> float:
    """Convert millimeters to inches"""
    return mm / MM_PER_INCH


def inches_to_mm(inches: float) -> float:
    """Convert inches to millimeters"""
    return inches * MM_PER_INCH


PITCH_5MM = mm_to_inches(5)
PITCH_3MM = mm_to_inches(3)

# Pitches known by name (inches)
STANDARD_PITCHES = {
    "5mm": PITCH_5MM,
    "3mm": PITCH_3MM,
}

ALL_POLICIES = (RoundingPolicy.ROUNDED, RoundingPolicy.FLOOR, RoundingPolicy.CEILING)


def pitch_from_name(name: str) -> float:
    """Look up a standard belt pitch (inches) by name, e.g. "5mm"."""
    key = name.strip().lower().replace(" ", "")
    if key not in STANDARD_PITCHES:
        valid = ", ".join(STANDARD_PITCHES)
        raise InvalidInputError(f"Unknown belt pitch '{name}'. Valid pitches: {valid}")
    return STANDARD_PITCHES[key]


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not isfinite(value):
            raise InvalidInputError(f"{name} must be finite, got {value}")


def _check_pitch(pitch: float) -> None:
    _check_finite(pitch=pitch)
    if pitch <= 0:
        raise InvalidInputError(f"Belt pitch must be positive, got {pitch}")


def _check_non_negative(**values: float) -> None:
    _check_finite(**values)
    for name, value in values.items():
        if value < 0:
            raise InvalidInputError(f"{name} must not be negative, got {value}")


def diameter_from_teeth(teeth: int, pitch: float = PITCH_5MM) -> float:
    """
    Calculate the pitch diameter of a pulley.

    Formula: d = pitch / π × teeth

    Args:
        teeth: Pulley tooth count (0 gives a degenerate zero diameter)
        pitch: Belt pitch (inches)

    Returns:
        Pitch diameter (inches)

    Raises:
        InvalidInputError: If teeth is negative or pitch is not positive
    """
    _check_pitch(pitch)
    _check_non_negative(teeth=teeth)
    return pitch / pi * teeth


def radius_from_teeth(teeth: int, pitch: float = PITCH_5MM) -> float:
    """Calculate the pitch radius of a pulley (inches)"""
    return diameter_from_teeth(teeth, pitch) / 2


def normal_center_to_center(r1: float, r2: float, teeth: float, pitch: float) -> float:
    """
    Center-to-center distance for an untwisted (normal) belt.

    Inverts the open-belt length relation

        L = π(r1 + r2) + 2·sqrt(C² + (r2 − r1)²)

    with L = teeth × pitch:

        C = sqrt(((n·p − π(r1 + r2)) / 2)² − (r2 − r1)²)

    Args:
        r1: Pitch radius of pulley 1 (inches)
        r2: Pitch radius of pulley 2 (inches)
        teeth: Belt tooth count
        pitch: Belt pitch (inches)

    Returns:
        Center-to-center distance (inches)

    Raises:
        InvalidInputError: On negative radii/teeth or non-positive pitch
        NoPhysicalSolutionError: If the belt cannot span the two pulleys
    """
    _check_pitch(pitch)
    _check_non_negative(r1=r1, r2=r2, teeth=teeth)

    radicand = ((teeth * pitch - pi * (r1 + r2)) / 2) ** 2 - (r2 - r1) ** 2
    logger.debug(f"normal: r1={r1:.4f} r2={r2:.4f} n={teeth} radicand={radicand:.6f}")
    if radicand < 0:
        raise NoPhysicalSolutionError(
            f"A {teeth:g}-tooth belt cannot span pulleys of radius "
            f"{r1:.4f}in and {r2:.4f}in"
        )
    return sqrt(radicand)


def contra_center_to_center(d1: float, d2: float, teeth: float, pitch: float) -> float:
    """
    Center-to-center distance for a twisted (contra) belt.

    The crossed-belt length L = 2C + (π/2)Σd + (Σd)²/(4C), with L = n·p,
    is a quadratic in C:

        8C² + gC + (Σd)² = 0,   g = 2πΣd − 4·n·p

    The larger root is the physical one:

        C = (−g + sqrt(g² − 32·(Σd)²)) / 16

    Args:
        d1: Pitch diameter of pulley 1 (inches)
        d2: Pitch diameter of pulley 2 (inches)
        teeth: Belt tooth count
        pitch: Belt pitch (inches)

    Returns:
        Center-to-center distance (inches)

    Raises:
        InvalidInputError: On negative diameters/teeth or non-positive pitch
        NoPhysicalSolutionError: If the quadratic has no non-negative real root
    """
    _check_pitch(pitch)
    _check_non_negative(d1=d1, d2=d2, teeth=teeth)

    total = d1 + d2
    generic = 2 * pi * total - 4 * teeth * pitch
    discriminant = generic ** 2 - 32 * total ** 2
    logger.debug(f"contra: d1={d1:.4f} d2={d2:.4f} n={teeth} g={generic:.6f} disc={discriminant:.6f}")
    if discriminant < 0:
        raise NoPhysicalSolutionError(
            f"A {teeth:g}-tooth crossed belt cannot wrap pulleys of diameter "
            f"{d1:.4f}in and {d2:.4f}in"
        )

    ctc = (-generic + sqrt(discriminant)) / 16
    if ctc < 0:
        # Both roots negative: belt shorter than the crossed wrap itself
        raise NoPhysicalSolutionError(
            f"A {teeth:g}-tooth crossed belt is shorter than the wrap around "
            f"pulleys of diameter {d1:.4f}in and {d2:.4f}in"
        )
    return ctc


def _as_routing(value: Union[BeltRouting, str]) -> BeltRouting:
    try:
        return BeltRouting(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidInputError(f"Unknown belt routing: {value!r}") from None


def _as_policy(value: Union[RoundingPolicy, str]) -> RoundingPolicy:
    try:
        return RoundingPolicy(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidInputError(f"Unknown rounding policy: {value!r}") from None


def _pulley_sizes(routing: BeltRouting, teeth1: int, teeth2: int, pitch: float):
    """Radii for normal belts, diameters for contra belts."""
    if routing == BeltRouting.NORMAL:
        return radius_from_teeth(teeth1, pitch), radius_from_teeth(teeth2, pitch)
    return diameter_from_teeth(teeth1, pitch), diameter_from_teeth(teeth2, pitch)


def _solver(routing: BeltRouting):
    if routing == BeltRouting.NORMAL:
        return normal_center_to_center
    return contra_center_to_center


def center_to_center(
    routing: Union[BeltRouting, str],
    pulley1_teeth: int,
    pulley2_teeth: int,
    belt_teeth: float,
    pitch: float = PITCH_5MM
) -> float:
    """
    Center-to-center distance for two pulleys given by tooth count.

    Picks the normal or contra formula by ``routing`` and derives the
    radii (normal) or diameters (contra) it expects.
    """
    routing = _as_routing(routing)
    size1, size2 = _pulley_sizes(routing, pulley1_teeth, pulley2_teeth, pitch)
    return _solver(routing)(size1, size2, belt_teeth, pitch)


def normal_belt_length(r1: float, r2: float, desired_spacing: float) -> float:
    """Total untwisted belt length for a desired spacing (inches)"""
    _check_non_negative(r1=r1, r2=r2, desired_spacing=desired_spacing)
    return pi * (r1 + r2) + 2 * sqrt(desired_spacing ** 2 + (r2 - r1) ** 2)


def contra_belt_length(d1: float, d2: float, desired_spacing: float) -> float:
    """
    Total crossed belt length for a desired spacing (inches).

    Undefined at zero spacing (the formula divides by it).
    """
    _check_non_negative(d1=d1, d2=d2, desired_spacing=desired_spacing)
    if desired_spacing == 0:
        raise InvalidInputError("Desired spacing must be greater than zero for a contra belt")
    total = d1 + d2
    return 2 * desired_spacing + pi / 2 * total + total ** 2 / (4 * desired_spacing)


def desired_belt_length(
    routing: Union[BeltRouting, str],
    size1: float,
    size2: float,
    desired_spacing: float
) -> float:
    """
    Convert a desired center-to-center spacing into a desired belt length.

    Args:
        routing: Belt routing
        size1: Radius (normal) or diameter (contra) of pulley 1 (inches)
        size2: Radius (normal) or diameter (contra) of pulley 2 (inches)
        desired_spacing: Desired center-to-center distance (inches)

    Returns:
        Belt length (inches)
    """
    routing = _as_routing(routing)
    if routing == BeltRouting.NORMAL:
        return normal_belt_length(size1, size2, desired_spacing)
    return contra_belt_length(size1, size2, desired_spacing)


def round_to_increment(teeth: float, increment: int = BELT_TOOTH_INCREMENT) -> int:
    """
    Round a tooth count to the nearest multiple of ``increment``.

    Ties round up: with increment 5, 47 → 45 and 48 → 50.
    """
    remainder = teeth % increment
    if remainder >= increment / 2:
        return int(teeth + (increment - remainder))
    return int(teeth - remainder)


def reconcile_teeth(
    belt_length: float,
    pitch: float,
    policy: Union[RoundingPolicy, str] = RoundingPolicy.ROUNDED
) -> int:
    """
    Pick a whole belt tooth count for a continuous belt length.

    Args:
        belt_length: Desired belt length (inches)
        pitch: Belt pitch (inches)
        policy: ROUNDED snaps floor(L/p) to the nearest stock increment,
                FLOOR and CEILING bracket L/p with custom tooth counts

    Returns:
        Belt tooth count
    """
    _check_pitch(pitch)
    _check_non_negative(belt_length=belt_length)
    policy = _as_policy(policy)

    exact = belt_length / pitch
    if policy == RoundingPolicy.ROUNDED:
        teeth = round_to_increment(floor(exact))
    elif policy == RoundingPolicy.FLOOR:
        teeth = floor(exact)
    else:
        teeth = ceil(exact)

    logger.debug(f"reconcile: L/p={exact:.4f} policy={policy.value} -> {teeth}")
    return teeth


def belt_length_actual(
    routing: Union[BeltRouting, str],
    size1: float,
    size2: float,
    belt_length: float,
    pitch: float,
    policy: Union[RoundingPolicy, str] = RoundingPolicy.ROUNDED
) -> BeltSolution:
    """
    Find the buildable belt closest to a desired length, and its spacing.

    Args:
        routing: Belt routing
        size1: Radius (normal) or diameter (contra) of pulley 1 (inches)
        size2: Radius (normal) or diameter (contra) of pulley 2 (inches)
        belt_length: Desired belt length (inches)
        pitch: Belt pitch (inches)
        policy: Tooth-count rounding policy

    Returns:
        BeltSolution with the reconciled tooth count and center distance
    """
    routing = _as_routing(routing)
    policy = _as_policy(policy)
    teeth = reconcile_teeth(belt_length, pitch, policy)
    ctc = _solver(routing)(size1, size2, teeth, pitch)
    return BeltSolution(
        policy=policy,
        belt_teeth=teeth,
        belt_length_in=teeth * pitch,
        center_to_center_in=ctc
    )


def design_from_spacing(
    pulley1_teeth: int,
    pulley2_teeth: int,
    desired_spacing: float,
    routing: Union[BeltRouting, str] = BeltRouting.NORMAL,
    pitch: float = PITCH_5MM,
    policies: Iterable[Union[RoundingPolicy, str]] = ALL_POLICIES
) -> BeltDriveDesign:
    """
    Design a belt drive from pulley tooth counts and a desired spacing.

    The desired spacing is turned into a desired belt length, which is
    then reconciled to a whole tooth count once per policy. The default
    report holds the rounded, floor and ceiling solutions in that order.

    Args:
        pulley1_teeth: Tooth count of pulley 1
        pulley2_teeth: Tooth count of pulley 2
        desired_spacing: Desired center-to-center distance (inches)
        routing: Belt routing ("normal" or "contra")
        pitch: Belt pitch (inches)
        policies: Rounding policies to report

    Returns:
        BeltDriveDesign

    Raises:
        InvalidInputError: On out-of-domain input
        NoPhysicalSolutionError: If any requested tooth count cannot span
            the pulleys
    """
    routing = _as_routing(routing)
    policies = [_as_policy(p) for p in policies]
    if not policies:
        raise InvalidInputError("At least one rounding policy is required")

    d1 = diameter_from_teeth(pulley1_teeth, pitch)
    d2 = diameter_from_teeth(pulley2_teeth, pitch)
    size1, size2 = _pulley_sizes(routing, pulley1_teeth, pulley2_teeth, pitch)

    length = desired_belt_length(routing, size1, size2, desired_spacing)
    logger.debug(
        f"{routing.value} belt: {pulley1_teeth}T/{pulley2_teeth}T at "
        f"{desired_spacing}in -> length {length:.4f}in"
    )

    solutions = [
        belt_length_actual(routing, size1, size2, length, pitch, policy)
        for policy in policies
    ]

    return BeltDriveDesign(
        routing=routing,
        pitch_in=pitch,
        desired_spacing_in=desired_spacing,
        desired_belt_length_in=length,
        pulley1=PulleyParams(teeth=pulley1_teeth, pitch_diameter_in=d1, pitch_radius_in=d1 / 2),
        pulley2=PulleyParams(teeth=pulley2_teeth, pitch_diameter_in=d2, pitch_radius_in=d2 / 2),
        solutions=solutions
    )
