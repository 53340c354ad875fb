"""
JSON input/output for belt drive designs.

Saves a computed BeltDriveDesign and loads it back. Uses Pydantic for
validation and enum coercion.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import BeltRouting, RoundingPolicy
from .schema import SCHEMA_VERSION

logger = logging.getLogger(__name__)


class PulleyParams(BaseModel):
    """Pitch geometry of one pulley (inches)."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    teeth: int = Field(ge=0)
    pitch_diameter_in: float = Field(ge=0)
    pitch_radius_in: float = Field(ge=0)


class BeltSolution(BaseModel):
    """One reconciled belt: effective tooth count and resulting spacing."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    policy: RoundingPolicy
    belt_teeth: int
    belt_length_in: float
    center_to_center_in: float

    @field_validator('policy', mode='before')
    @classmethod
    def coerce_policy(cls, v):
        if isinstance(v, str):
            return RoundingPolicy(v.lower())
        return v

    @property
    def center_to_center_mm(self) -> float:
        from ..calculator.core import inches_to_mm
        return inches_to_mm(self.center_to_center_in)


class BeltDriveDesign(BaseModel):
    """Complete result of one calculation request."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    routing: BeltRouting
    pitch_in: float = Field(gt=0)
    desired_spacing_in: float
    desired_belt_length_in: float
    pulley1: PulleyParams
    pulley2: PulleyParams
    solutions: List[BeltSolution] = Field(default_factory=list)

    @field_validator('routing', mode='before')
    @classmethod
    def coerce_routing(cls, v):
        if isinstance(v, str):
            return BeltRouting(v.lower())
        return v

    def solution(self, policy: Union[RoundingPolicy, str]) -> Optional[BeltSolution]:
        """Return the solution computed for ``policy``, or None if not requested."""
        if isinstance(policy, str):
            policy = RoundingPolicy(policy.lower())
        for sol in self.solutions:
            if sol.policy == policy:
                return sol
        return None


def load_design_json(filepath: Union[str, Path]) -> BeltDriveDesign:
    """
    Load a belt drive design saved by save_design_json.

    Args:
        filepath: Path to JSON file

    Returns:
        BeltDriveDesign with all parameters

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is missing required sections
        pydantic.ValidationError: If fields have the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Design file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Check for 'design' wrapper (bridge output nests it)
    if 'design' in data:
        data = data['design']

    if 'pulley1' not in data or 'pulley2' not in data or 'solutions' not in data:
        raise ValueError(
            "Invalid design JSON - must contain 'pulley1', 'pulley2', and 'solutions' sections"
        )

    version = data.pop('schema_version', None)
    if version is not None and version != SCHEMA_VERSION:
        logger.warning(f"Design file {filepath} has schema {version}, expected {SCHEMA_VERSION}")

    return BeltDriveDesign.model_validate(data)


def save_design_json(design: BeltDriveDesign, filepath: Union[str, Path]) -> None:
    """
    Save a belt drive design to a JSON file.

    Args:
        design: Design from design_from_spacing()
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    # mode='json' turns enums into their string values
    data = design.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved design to {filepath}")
