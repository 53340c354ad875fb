"""
Engineering constants for belt drive calculations.

This module centralizes the numerical constants used in the calculator and
validation modules.

MODIFICATION GUIDELINES:
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _IN)

Constants are grouped by category:
- Units: inch/millimeter conversion
- Belt pitches: the belt tooth spacings the tool knows by name
- Belt manufacturing: tooth-count increments of stock belts
- Engineering practice: recommended ranges (not standardized)
"""

from typing import Tuple

# =============================================================================
# Units
# =============================================================================

MM_PER_INCH: float = 25.4

# =============================================================================
# Belt Pitches
# =============================================================================

DEFAULT_PITCH_NAME: str = "5mm"

# =============================================================================
# Belt Manufacturing
# =============================================================================

# Stock belts for the target product line come in 5-tooth steps
BELT_TOOTH_INCREMENT: int = 5

# =============================================================================
# Engineering Practice (Not Standardized)
# =============================================================================

# Below this, belt tooth engagement on the small pulley gets poor
MIN_PULLEY_TEETH: int = 9

# Common practice range for center distance, in belt pitches
RECOMMENDED_CENTER_PITCHES: Tuple[float, float] = (30.0, 50.0)

# Rounded solutions further than this from the request get flagged
SPACING_DEVIATION_PITCHES: float = 1.0

# Float slack when comparing lengths and pitches
LENGTH_TOLERANCE_IN: float = 1e-9
