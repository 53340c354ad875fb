"""Output formatters for belt drive designs.

Converts typed BeltDriveDesign models to JSON, Markdown and text output.

Uses Pydantic's model_dump(mode='json') for serialization including
automatic enum-to-string conversion.
"""

import json
from typing import Optional, TYPE_CHECKING

from ..io import BeltDriveDesign
from ..io.schema import SCHEMA_VERSION
from .core import inches_to_mm

if TYPE_CHECKING:
    from .validation import ValidationResult


_POLICY_LABELS = {
    "rounded": "Stock belt (multiple of 5)",
    "floor": "Exact belt (shorter)",
    "ceiling": "Exact belt (longer)",
}


def _validation_to_dict(validation: "ValidationResult") -> dict:
    def messages(items):
        return [
            {
                'severity': msg.severity.value,
                'code': msg.code,
                'message': msg.message,
                'suggestion': msg.suggestion
            }
            for msg in items
        ]

    return {
        'valid': validation.valid,
        'errors': messages(validation.errors),
        'warnings': messages(validation.warnings),
        'infos': messages(validation.infos),
    }


def to_json(
    design: BeltDriveDesign,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert BeltDriveDesign to JSON string.

    Args:
        design: BeltDriveDesign from design_from_spacing()
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, design and optional validation
    """
    design_dict = design.model_dump(mode='json')
    design_dict['schema_version'] = SCHEMA_VERSION

    if validation:
        design_dict['validation'] = _validation_to_dict(validation)

    return json.dumps(design_dict, indent=indent)


def to_markdown(
    design: BeltDriveDesign,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert BeltDriveDesign to a markdown report.

    The three solutions are shown side by side so a buildable stock belt
    can be compared with the two nearest exact-length belts.
    """
    d = design.model_dump(mode='json')
    p1 = d["pulley1"]
    p2 = d["pulley2"]

    md = "# Belt Drive Design\n\n"

    md += "## Overview\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Routing | {d['routing'].title()} |\n"
    md += f"| Belt Pitch | {design.pitch_in:.5f} in ({inches_to_mm(design.pitch_in):.1f} mm) |\n"
    md += f"| Desired Spacing | {design.desired_spacing_in:.4f} in |\n"
    md += f"| Desired Belt Length | {design.desired_belt_length_in:.4f} in |\n\n"

    md += "## Pulleys\n\n"
    md += "| Pulley | Teeth | Pitch Diameter | Pitch Radius |\n"
    md += "|--------|-------|----------------|--------------|\n"
    md += f"| #1 | {p1['teeth']} | {p1['pitch_diameter_in']:.4f} in | {p1['pitch_radius_in']:.4f} in |\n"
    md += f"| #2 | {p2['teeth']} | {p2['pitch_diameter_in']:.4f} in | {p2['pitch_radius_in']:.4f} in |\n\n"

    md += "## Belt Options\n\n"
    md += "| Option | Belt Teeth | Belt Length | Center-to-Center |\n"
    md += "|--------|------------|-------------|------------------|\n"
    for sol in design.solutions:
        label = _POLICY_LABELS[sol.policy.value]
        md += (
            f"| {label} | {sol.belt_teeth} | {sol.belt_length_in:.4f} in | "
            f"{sol.center_to_center_in:.4f} in ({sol.center_to_center_mm:.2f} mm) |\n"
        )
    md += "\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Design is valid\n\n"
        else:
            md += "**Status:** ❌ Design has errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- All dimensions in inches unless otherwise noted\n"
    md += "- Diameters are pitch diameters, not outside diameters\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by ContraCalc*\n"

    return md


def to_summary(design: BeltDriveDesign) -> str:
    """Convert BeltDriveDesign to formatted text summary.

    Args:
        design: BeltDriveDesign from design_from_spacing()

    Returns:
        Multi-line formatted summary string
    """
    lines = [
        f"═══ {design.routing.value.title()} Belt ═══",
        f"Pitch: {inches_to_mm(design.pitch_in):.1f} mm ({design.pitch_in:.5f} in)",
        f"Pulleys: {design.pulley1.teeth}T / {design.pulley2.teeth}T",
        f"Desired spacing: {design.desired_spacing_in:.4f} in",
        "",
    ]

    for sol in design.solutions:
        lines.extend([
            f"{_POLICY_LABELS[sol.policy.value]}:",
            f"  Number of teeth closest to desired:  {sol.belt_teeth}",
            f"  Center-to-Center closest to desired: {sol.center_to_center_in:.4f} in",
        ])

    return "\n".join(lines)
