"""
Tests for input and design validation.
"""

import pytest

from contracalc.calculator import (
    PITCH_5MM,
    BeltRouting,
    BeltSolution,
    Severity,
    ValidationResult,
    design_from_spacing,
    validate_design,
    validate_inputs,
    InvalidInputError,
)


def _codes(result: ValidationResult):
    return {m.code for m in result.messages}


class TestValidateInputs:
    """Tests for validate_inputs."""

    def test_valid_inputs(self):
        result = validate_inputs(20, 40, 5.0, BeltRouting.NORMAL, PITCH_5MM)
        assert result.valid is True
        assert result.errors == []

    def test_routing_name_is_case_insensitive(self):
        result = validate_inputs(20, 20, 0.0, "Contra")
        assert "SPACING_ZERO_CONTRA" in _codes(result)

    def test_unknown_routing(self):
        with pytest.raises(InvalidInputError, match="sideways"):
            validate_inputs(20, 20, 4.0, "sideways")

    def test_negative_teeth(self):
        result = validate_inputs(-3, 40, 5.0)
        assert result.valid is False
        assert "PULLEY_TEETH_NEGATIVE" in _codes(result)

    def test_zero_teeth(self):
        result = validate_inputs(20, 0, 5.0)
        assert result.valid is False
        assert "PULLEY_TEETH_ZERO" in _codes(result)
        assert "Pulley #2" in result.errors[0].message

    def test_low_teeth_is_warning(self):
        result = validate_inputs(8, 40, 5.0)
        assert result.valid is True
        assert [m.code for m in result.warnings] == ["PULLEY_TEETH_LOW"]

    def test_negative_spacing(self):
        result = validate_inputs(20, 40, -1.0)
        assert "SPACING_NEGATIVE" in _codes(result)
        assert result.valid is False

    def test_zero_spacing_contra(self):
        result = validate_inputs(20, 20, 0.0, BeltRouting.CONTRA)
        assert result.valid is False
        assert "SPACING_ZERO_CONTRA" in _codes(result)

    def test_zero_spacing_normal_allowed(self):
        result = validate_inputs(20, 20, 0.0, BeltRouting.NORMAL)
        assert result.valid is True

    def test_bad_pitch(self):
        result = validate_inputs(20, 40, 5.0, pitch=0.0)
        assert "PITCH_NOT_POSITIVE" in _codes(result)

    def test_non_standard_pitch_is_info(self):
        result = validate_inputs(20, 40, 5.0, pitch=0.2)
        assert result.valid is True
        assert [m.code for m in result.infos] == ["PITCH_NON_STANDARD"]

    def test_all_problems_reported(self):
        result = validate_inputs(-1, 0, -1.0, "contra")
        assert len(result.errors) == 3


class TestValidateDesign:
    """Tests for validate_design."""

    def test_normal_design(self, normal_design):
        result = validate_design(normal_design)
        assert result.valid is True
        codes = _codes(result)
        # ~24.8 pitches apart, below the 30-50 range
        assert "CENTER_DISTANCE_OUT_OF_RANGE" in codes
        # 81 and 82 are custom belts
        stock = [m for m in result.infos if m.code == "BELT_NOT_STOCK_LENGTH"]
        assert len(stock) == 2
        assert "SPACING_DEVIATION" not in codes

    def test_center_distance_in_range(self):
        design = design_from_spacing(20, 40, 40 * PITCH_5MM)
        assert "CENTER_DISTANCE_OUT_OF_RANGE" not in _codes(validate_design(design))

    def test_stock_exact_belt_not_flagged(self):
        """Floor/ceiling counts that happen to be multiples of 5 are stock belts."""
        design = design_from_spacing(30, 30, 3.0, policies=["floor"])
        assert design.solution("floor").belt_teeth == 60
        assert "BELT_NOT_STOCK_LENGTH" not in _codes(validate_design(design))

    def test_spacing_deviation(self, contra_design):
        # L/p = 62.6 floors to 62, snaps to 60: spacing drops by ~0.27in
        result = validate_design(contra_design)
        assert "SPACING_DEVIATION" in _codes(result)

    def test_belt_shorter_than_wrap(self, normal_design):
        """Open belt shorter than both half wraps yields a spurious spacing."""
        short = BeltSolution(
            policy="floor",
            belt_teeth=25,
            belt_length_in=25 * PITCH_5MM,
            center_to_center_in=1.0
        )
        design = normal_design.model_copy(update={"solutions": [short]})
        result = validate_design(design)

        assert "BELT_SHORTER_THAN_WRAP" in _codes(result)
        assert result.valid is False

    def test_stock_belt_rounded_below_wrap(self):
        # L/p = 22.1 floors to 22, snaps down to 20, under the 22-tooth wrap
        design = design_from_spacing(22, 22, 0.01)
        assert design.solution("rounded").belt_teeth == 20

        result = validate_design(design)
        assert result.valid is False
        wrap_errors = [m for m in result.errors if m.code == "BELT_SHORTER_THAN_WRAP"]
        assert len(wrap_errors) == 1
        assert "Rounded belt (20 teeth" in wrap_errors[0].message

    def test_messages_have_severity(self, contra_design):
        for msg in validate_design(contra_design).messages:
            assert isinstance(msg.severity, Severity)
            assert msg.code
            assert msg.message
