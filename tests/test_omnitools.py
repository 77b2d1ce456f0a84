#!/usr/bin/env python3
"""
Tests for the omnitools registered with the MCP server.
"""

import json
import pytest
from fluids.friction import _roughness

from omnitools.friction_factor import friction_factor
from omnitools.help_resources import get_available_materials, help_resources


class TestFrictionFactorOmnitool:
    """Test mode dispatch of the friction_factor omnitool."""

    def test_calculate_mode(self):
        result_dict = json.loads(friction_factor(
            mode="calculate",
            correlation="swameeJain",
            relative_roughness=0.0002,
            reynolds_number=50000
        ))
        assert result_dict["value"] == pytest.approx(0.0215, rel=0.01)
        assert result_dict["info"] == "Turbulent flow (Re > 4000)"

    def test_calculate_mode_default_correlation(self):
        """Parameters left as None are not forwarded, so tool defaults apply."""
        result_dict = json.loads(friction_factor(relative_roughness=0.0002, reynolds_number=50000))
        assert result_dict["correlation"] == "colebrook"

    def test_list_mode(self):
        result_dict = json.loads(friction_factor(mode="list"))
        assert result_dict["count"] == 8
        assert result_dict["correlations"][0] == "swameeJain"

    def test_list_mode_with_details(self):
        result_dict = json.loads(friction_factor(mode="list", include_details=True))
        assert len(result_dict["details"]) == 8

    def test_compare_mode(self):
        result_dict = json.loads(friction_factor(
            mode="compare",
            relative_roughness=0.0002,
            reynolds_number=50000,
            correlations=["colebrook", "serghides"]
        ))
        assert result_dict["summary"]["total"] == 2

    def test_sweep_mode(self):
        result_dict = json.loads(friction_factor(
            mode="sweep",
            correlation="haaland",
            relative_roughness=0.001,
            re_start=4000,
            re_stop=1e7,
            n=10
        ))
        assert result_dict["summary"]["total_points"] == 10
        assert result_dict["summary"]["successful_points"] == 10

    def test_invalid_mode(self):
        result_dict = json.loads(friction_factor(mode="bogus"))
        assert "Invalid mode" in result_dict["error"]


class TestHelpResources:
    """Test the help_resources omnitool."""

    def test_all(self):
        result_dict = json.loads(help_resources())
        assert len(result_dict["correlations"]) == 8
        assert result_dict["regimes"]["laminar_override_re"] == 4000
        assert "CalculationFailed" in result_dict["errors"]
        assert "colebrook" in result_dict["notes"]
        assert result_dict["materials"]["count"] > 0

    def test_single_correlation(self):
        result_dict = json.loads(help_resources(resource_type="correlations", correlation="haaland"))
        assert result_dict["correlations"][0]["display_name"] == "Haaland"
        assert "materials" not in result_dict

    def test_unknown_correlation(self):
        result_dict = json.loads(help_resources(resource_type="correlations", correlation="bogus"))
        assert "error" in result_dict["correlations"]

    def test_materials(self):
        result_dict = json.loads(help_resources(resource_type="materials"))
        assert all("roughness_m" in m for m in result_dict["materials"])

    def test_materials_match_fluids_table(self):
        materials = get_available_materials()
        assert [m["name"] for m in materials] == sorted(_roughness)
        for m in materials:
            assert m["roughness_m"] == _roughness[m["name"]]
            assert m["roughness_mm"] == pytest.approx(m["roughness_m"] * 1000)

    def test_regimes(self):
        result_dict = json.loads(help_resources(resource_type="regimes"))
        names = [r["name"] for r in result_dict["regimes"]["classification"]]
        assert names == ["laminar", "transitional", "turbulent"]
