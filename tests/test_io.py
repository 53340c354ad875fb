"""
Tests for JSON save/load of designs.
"""

import json

import pytest
from pydantic import ValidationError

from contracalc.enums import BeltRouting, RoundingPolicy
from contracalc.io import (
    SCHEMA_VERSION,
    BeltDriveDesign,
    BeltSolution,
    load_design_json,
    save_design_json,
)


class TestSaveLoad:
    """Tests for save_design_json / load_design_json."""

    def test_save_writes_schema_version(self, normal_design, tmp_path):
        path = tmp_path / "design.json"
        save_design_json(normal_design, path)

        data = json.loads(path.read_text())
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["routing"] == "normal"

    def test_load_saved_design(self, contra_design, tmp_path):
        path = tmp_path / "design.json"
        save_design_json(contra_design, str(path))

        loaded = load_design_json(path)
        assert loaded == contra_design
        assert loaded.routing == BeltRouting.CONTRA
        assert loaded.solution(RoundingPolicy.CEILING).belt_teeth == 63

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_design_json(tmp_path / "nonexistent.json")

    def test_missing_sections(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"routing": "normal"}))
        with pytest.raises(ValueError, match="pulley1"):
            load_design_json(path)

    def test_design_wrapper(self, normal_design, tmp_path):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"design": normal_design.model_dump(mode="json")}))
        assert load_design_json(path) == normal_design

    def test_bad_routing(self, normal_design, tmp_path):
        data = normal_design.model_dump(mode="json")
        data["routing"] = "sideways"
        path = tmp_path / "bad_routing.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValidationError):
            load_design_json(path)


class TestModels:
    """Tests for the pydantic models."""

    def test_policy_coerced_from_string(self):
        sol = BeltSolution(policy="CEILING", belt_teeth=82, belt_length_in=16.14, center_to_center_in=5.08)
        assert sol.policy == RoundingPolicy.CEILING

    def test_center_to_center_mm(self):
        sol = BeltSolution(policy="floor", belt_teeth=81, belt_length_in=15.9, center_to_center_in=2.0)
        assert sol.center_to_center_mm == pytest.approx(50.8)

    def test_design_is_frozen(self, normal_design):
        with pytest.raises(ValidationError):
            normal_design.desired_spacing_in = 6.0

    def test_solution_lookup_by_string(self, normal_design):
        assert normal_design.solution("Floor").belt_teeth == 81

    def test_negative_pulley_teeth_rejected(self, normal_design):
        data = normal_design.model_dump()
        data["pulley1"]["teeth"] = -1
        with pytest.raises(ValidationError):
            BeltDriveDesign.model_validate(data)
