"""Tests for the radiometric calculation engine."""

from __future__ import annotations

import math

import pytest

from uvplan.calculation.radiometric import (
    ERR_INVALID_FIXTURE,
    ERR_NEGATIVE_DISTANCE,
    ERR_ZERO_THROW,
    calculate,
    calculate_radiometric_data,
)
from uvplan.calculation.types import CalculationError, CalculationInput, RadiometricResult
from uvplan.catalog.fixtures import list_models, lookup
from uvplan.compliance.safety import SafetyLevel, classify_result
from uvplan.core.units import M2_TO_FT2, M_TO_FT


def test_vsp_120f_end_to_end() -> None:
    res = calculate(CalculationInput("VSP-120F", 5.0, 0.0, beam_width=6.0, beam_height=3.0))
    assert isinstance(res, RadiometricResult)
    assert res.ok
    irr = res.irradiance_report
    assert irr.throw_distance_m == 5.0
    assert irr.irradiance_mWm2 == pytest.approx(530.0)
    assert irr.irradiance_degradation_percent == pytest.approx(96.0)
    assert irr.beam_diameter_h_m == pytest.approx(10.0 * math.tan(math.radians(16.9)))
    assert abs(irr.beam_diameter_h_m - 3.04) < 0.01
    assert irr.beam_diameter_v_m == pytest.approx(10.0 * math.tan(math.radians(17.1)))
    assert irr.irradiance_uWcm2 == pytest.approx(53.0)
    assert irr.irradiance_Wm2 == pytest.approx(0.53)
    assert irr.irradiance_mWcm2 == pytest.approx(0.053)
    assert classify_result(res) == SafetyLevel.SAFE

    beam = res.beam_calculators
    assert beam.throw_distance_required_m == 5.0
    assert beam.beam_angle_h_deg == pytest.approx(2 * math.degrees(math.atan(0.6)))
    assert beam.beam_angle_v_deg == pytest.approx(2 * math.degrees(math.atan(0.3)))
    assert beam.multiplying_factor == pytest.approx(math.tan(math.radians(16.9)))
    assert beam.beam_spread_m == irr.beam_diameter_h_m
    assert beam.beam_area_m2 == irr.beam_area_m2
    assert beam.rectangular_volume_m3 == pytest.approx(27.0)


def test_vsp_120f_field_geometry() -> None:
    res = calculate_radiometric_data("VSP-120F", 5.0, 0.0)
    field = res.irradiance_report.field
    assert field is not None
    assert field.diameter_h_m == pytest.approx(10.0 * math.tan(math.radians(62.3 / 2)))
    assert field.diameter_v_m == pytest.approx(10.0 * math.tan(math.radians(62.4 / 2)))
    assert field.area_m2 == pytest.approx(math.pi * (field.diameter_h_m / 2) ** 2)
    assert field.diameter_h_ft == pytest.approx(field.diameter_h_m * M_TO_FT)
    assert field.area_ft2 == pytest.approx(field.area_m2 * M2_TO_FT2)


def test_fixture_without_field_omits_field_keys() -> None:
    res = calculate_radiometric_data("EM-44L", 3.0, 0.0)
    assert res.ok
    assert res.irradiance_report.field is None
    d = res.to_dict()["irradiance_report"]
    assert not any(k.startswith("field_") for k in d)


def test_fixture_with_field_emits_all_field_keys() -> None:
    d = calculate_radiometric_data("VSP-60F", 2.0, 1.0).to_dict()["irradiance_report"]
    for key in (
        "field_diameter_h_m",
        "field_diameter_v_m",
        "field_diameter_h_ft",
        "field_diameter_v_ft",
        "field_area_m2",
        "field_area_ft2",
    ):
        assert key in d


def test_beam_area_uses_horizontal_diameter_only() -> None:
    res = calculate_radiometric_data("VSP-120F", 4.0, 0.0)
    irr = res.irradiance_report
    assert irr.beam_diameter_h_m != irr.beam_diameter_v_m
    assert irr.beam_area_m2 == pytest.approx(math.pi * (irr.beam_diameter_h_m / 2) ** 2)


@pytest.mark.parametrize(
    "model, v, h, message",
    [
        ("NOT_A_FIXTURE", 5.0, 0.0, ERR_INVALID_FIXTURE),
        ("NOT_A_FIXTURE", -1.0, 0.0, ERR_INVALID_FIXTURE),
        ("NOT_A_FIXTURE", 0.0, 0.0, ERR_INVALID_FIXTURE),
        ("vsp-120f", 5.0, 0.0, ERR_INVALID_FIXTURE),
        ("VSP-120F", -1.0, 0.0, ERR_NEGATIVE_DISTANCE),
        ("VSP-120F", 2.0, -0.5, ERR_NEGATIVE_DISTANCE),
        ("VSP-120F", 0.0, 0.0, ERR_ZERO_THROW),
    ],
)
def test_error_ordering(model: str, v: float, h: float, message: str) -> None:
    res = calculate_radiometric_data(model, v, h)
    assert isinstance(res, CalculationError)
    assert not res.ok
    assert res.error == message
    assert res.to_dict() == {"error": message}


def test_error_messages_are_stable() -> None:
    assert ERR_INVALID_FIXTURE == "Invalid fixture model."
    assert ERR_NEGATIVE_DISTANCE == "Height and horizontal distance must be non-negative."
    assert ERR_ZERO_THROW == "Throw distance cannot be zero."


@pytest.mark.parametrize("v, h", [(3.0, 4.0), (0.0, 2.5), (7.0, 0.0), (1e-3, 1e3), (12.3, 4.56)])
def test_throw_distance_is_pythagorean(v: float, h: float) -> None:
    res = calculate_radiometric_data("UB-44", v, h)
    expected = math.sqrt(v * v + h * h)
    assert abs(res.irradiance_report.throw_distance_m - expected) <= 1e-9 * expected


def test_inverse_square_law_for_every_fixture() -> None:
    for model in list_models():
        spec = lookup(model)
        for d in (0.5, 1.0, 2.0, 7.5, 20.0):
            irr = calculate_radiometric_data(model, d, 0.0).irradiance_report
            assert irr.irradiance_mWm2 * d ** 2 == pytest.approx(spec.peak_irradiance_mWm2)


def test_reference_distance_has_no_degradation() -> None:
    irr = calculate_radiometric_data("VSP-120S", 1.0, 0.0).irradiance_report
    assert irr.irradiance_mWm2 == pytest.approx(24000.0)
    assert irr.irradiance_degradation_percent == pytest.approx(0.0)


def test_monotonic_in_throw_distance() -> None:
    prev = None
    for d in (0.5, 1.0, 1.5, 3.0, 6.0, 12.0):
        irr = calculate_radiometric_data("VSP-60WS", d, 0.0).irradiance_report
        if prev is not None:
            assert irr.irradiance_mWm2 < prev.irradiance_mWm2
            assert irr.beam_diameter_h_m > prev.beam_diameter_h_m
            assert irr.beam_area_m2 > prev.beam_area_m2
        prev = irr


def test_imperial_pairs_match_metric_values() -> None:
    d = calculate_radiometric_data("VSP-120F", 6.0, 2.0).to_dict()["irradiance_report"]
    for key, value in d.items():
        if key.endswith("_ft"):
            assert value == pytest.approx(d[key[:-3] + "_m"] * M_TO_FT)
        if key.endswith("_ft2"):
            assert value == pytest.approx(d[key[:-4] + "_m2"] * M2_TO_FT2)


def test_defaults_for_advisory_inputs() -> None:
    res = calculate_radiometric_data("UR-12", 6.0, 0.0)
    beam = res.beam_calculators
    assert beam.beam_angle_h_deg == pytest.approx(90.0)
    assert beam.beam_angle_v_deg == pytest.approx(90.0)
    assert beam.rectangular_volume_m3 == pytest.approx(27.0)


def test_report_echoes_inputs() -> None:
    irr = calculate_radiometric_data("L9T8/BLB", 2.5, 1.5).irradiance_report
    assert irr.fixture_model == "L9T8/BLB"
    assert irr.vertical_height_m == 2.5
    assert irr.horizontal_distance_m == 1.5
    assert irr.vertical_height_ft == pytest.approx(2.5 * M_TO_FT)


def test_calculate_is_deterministic() -> None:
    inp = CalculationInput("EM-44V", 3.3, 1.1, 5.0, 4.0, 2.0, 3.0, 4.0)
    assert calculate(inp) == calculate(inp)
