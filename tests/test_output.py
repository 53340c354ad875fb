"""
Tests for output formatters.
"""

import json

from contracalc.calculator import to_json, to_markdown, to_summary, validate_design
from contracalc.io import SCHEMA_VERSION


class TestToJson:
    """Tests for to_json."""

    def test_schema_version(self, normal_design):
        data = json.loads(to_json(normal_design))
        assert data["schema_version"] == SCHEMA_VERSION

    def test_enums_serialized_as_strings(self, contra_design):
        data = json.loads(to_json(contra_design))
        assert data["routing"] == "contra"
        assert [s["policy"] for s in data["solutions"]] == ["rounded", "floor", "ceiling"]

    def test_solutions(self, normal_design):
        data = json.loads(to_json(normal_design))
        assert [s["belt_teeth"] for s in data["solutions"]] == [80, 81, 82]
        assert data["pulley1"]["teeth"] == 20

    def test_validation_included(self, normal_design):
        validation = validate_design(normal_design)
        data = json.loads(to_json(normal_design, validation))
        assert data["validation"]["valid"] is True
        assert data["validation"]["warnings"][0]["code"] == "CENTER_DISTANCE_OUT_OF_RANGE"
        assert len(data["validation"]["infos"]) == 2

    def test_no_validation_by_default(self, normal_design):
        assert "validation" not in json.loads(to_json(normal_design))

    def test_indent(self, normal_design):
        assert "\n" not in to_json(normal_design, indent=None)


class TestToMarkdown:
    """Tests for to_markdown."""

    def test_sections(self, normal_design):
        md = to_markdown(normal_design)
        assert md.startswith("# Belt Drive Design")
        assert "## Pulleys" in md
        assert "## Belt Options" in md
        assert "## Validation" not in md

    def test_all_options_listed(self, normal_design):
        md = to_markdown(normal_design)
        assert "Stock belt (multiple of 5) | 80 |" in md
        assert "Exact belt (shorter) | 81 |" in md
        assert "Exact belt (longer) | 82 |" in md

    def test_validation_section(self, contra_design):
        md = to_markdown(contra_design, validate_design(contra_design))
        assert "## Validation" in md
        assert "Design is valid" in md
        assert "### Information" in md


class TestToSummary:
    """Tests for to_summary."""

    def test_header(self, contra_design):
        summary = to_summary(contra_design)
        assert summary.splitlines()[0] == "═══ Contra Belt ═══"
        assert "Pulleys: 20T / 20T" in summary

    def test_tooth_counts_and_spacing(self, normal_design):
        summary = to_summary(normal_design)
        rounded = normal_design.solution("rounded")
        assert "Number of teeth closest to desired:  80" in summary
        assert f"{rounded.center_to_center_in:.4f} in" in summary

    def test_only_requested_options(self):
        from contracalc.calculator import design_from_spacing
        summary = to_summary(design_from_spacing(20, 40, 5.0, policies=["floor"]))
        assert "Exact belt (shorter)" in summary
        assert "Stock belt" not in summary
