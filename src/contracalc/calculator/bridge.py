"""
Request/response bridge for UI front-ends.

A UI collects its current field values into one JSON object each time it
redraws and hands it to calculate(); nothing is kept between calls.
All inputs are validated via Pydantic models before processing.

Usage:
    from contracalc.calculator.bridge import calculate
    result = json.loads(calculate(json.dumps({
        "routing": "contra",
        "pulley1_teeth": 20,
        "pulley2_teeth": 30,
        "desired_spacing": 4.0,
    })))
"""

import json
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing_extensions import TypedDict

from ..enums import BeltRouting, RoundingPolicy
from .constants import DEFAULT_PITCH_NAME
from .core import design_from_spacing, mm_to_inches, pitch_from_name
from .errors import NoPhysicalSolutionError
from .output import to_json, to_markdown, to_summary
from .validation import validate_design, validate_inputs

logger = logging.getLogger(__name__)


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to the UI."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "PULLEY_TEETH_LOW"
    message: str
    suggestion: Optional[str]


# ============================================================================
# Input Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs from the calculator UI.

    This is the single source of truth for what a front-end sends.
    """
    model_config = ConfigDict(extra='ignore')

    routing: str = "normal"  # "normal" | "contra"
    pulley1_teeth: int = 0
    pulley2_teeth: int = 0
    desired_spacing: float = 0.0
    units: str = "in"  # "in" | "mm" - units of desired_spacing
    pitch: str = DEFAULT_PITCH_NAME  # "5mm" | "3mm"
    policies: List[str] = Field(
        default_factory=lambda: [p.value for p in RoundingPolicy]
    )

    @field_validator('routing', 'units', 'pitch', mode='before')
    @classmethod
    def normalize_lower(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('policies', mode='before')
    @classmethod
    def normalize_policies(cls, v):
        if isinstance(v, str):
            v = [v]
        return [p.strip().lower() if isinstance(p, str) else p for p in v]


# ============================================================================
# Output Models
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate()."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    # Design data (JSON string for the UI to parse)
    design_json: Optional[str] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


def _messages(validation) -> List[ValidationMessageDict]:
    return [
        {
            'severity': m.severity.value,
            'code': m.code,
            'message': m.message,
            'suggestion': m.suggestion
        }
        for m in validation.messages
    ]


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from a UI.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        routing = BeltRouting(inputs.routing)
        pitch = pitch_from_name(inputs.pitch)
        spacing = _spacing_in_inches(inputs.desired_spacing, inputs.units)

        # Reject bad fields with messages the UI can show per field
        checked = validate_inputs(
            inputs.pulley1_teeth, inputs.pulley2_teeth, spacing, routing, pitch
        )
        if not checked.valid:
            return CalculatorOutput(
                success=False,
                error=checked.errors[0].message,
                valid=False,
                messages=_messages(checked)
            ).model_dump_json()

        design = design_from_spacing(
            inputs.pulley1_teeth,
            inputs.pulley2_teeth,
            spacing,
            routing=routing,
            pitch=pitch,
            policies=inputs.policies
        )
        validation = validate_design(design)
        if not validation.valid:
            logger.warning(f"No physical solution: {validation.errors[0].message}")
            return CalculatorOutput(
                success=False,
                error=f"No physical solution: {validation.errors[0].message}",
                valid=False,
                messages=_messages(validation)
            ).model_dump_json()

        output = CalculatorOutput(
            success=True,
            design_json=to_json(design),
            summary=to_summary(design),
            markdown=to_markdown(design, validation),
            valid=validation.valid,
            messages=_messages(validation)
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except ValidationError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid input: {e.errors()[0]['msg']}"
        ).model_dump_json()

    except NoPhysicalSolutionError as e:
        logger.warning(f"No physical solution: {e}")
        return CalculatorOutput(
            success=False,
            error=f"No physical solution: {e}",
            valid=False
        ).model_dump_json()

    except ValueError as e:
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()


def _spacing_in_inches(value: float, units: str) -> float:
    if units in ("in", "inch", "inches"):
        return value
    elif units in ("mm", "millimeter", "millimeters"):
        return mm_to_inches(value)
    raise ValueError(f"Unknown units: {units}")
