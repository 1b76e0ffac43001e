"""
Radiometric calculation engine.

Converts a fixture's photometric constants and its placement into throw
distance, beam/field footprint and irradiance at the target.

Irradiance follows the inverse square law from the 1 m reference value:

    E(d) = E_1m / d²

Footprint diameter for a full cone angle θ at throw d:

    D = 2 · d · tan(θ / 2)

The function is pure: no I/O, no logging, no shared mutable state.
"""

from __future__ import annotations

import math

from uvplan.catalog.fixtures import FixtureSpec, lookup
from uvplan.calculation.types import (
    DEFAULT_BEAM_HEIGHT_M,
    DEFAULT_BEAM_WIDTH_M,
    DEFAULT_RECT_DIM_M,
    BeamCalculators,
    CalculationError,
    CalculationInput,
    CalculationResult,
    FieldGeometry,
    IrradianceReport,
    RadiometricResult,
)
from uvplan.core.units import meters_to_feet, sq_meters_to_sq_feet


ERR_INVALID_FIXTURE = "Invalid fixture model."
ERR_NEGATIVE_DISTANCE = "Height and horizontal distance must be non-negative."
ERR_ZERO_THROW = "Throw distance cannot be zero."


def throw_distance(vertical_height: float, horizontal_distance: float) -> float:
    return math.sqrt(vertical_height ** 2 + horizontal_distance ** 2)


def cone_diameter(throw_m: float, full_angle_deg: float) -> float:
    return 2.0 * throw_m * math.tan(math.radians(full_angle_deg / 2.0))


def circle_area(diameter: float) -> float:
    return math.pi * (diameter / 2.0) ** 2


def required_beam_angle_deg(target_dimension_m: float, throw_m: float) -> float:
    """Full beam angle that exactly spans target_dimension_m at throw_m."""
    return 2.0 * math.degrees(math.atan(target_dimension_m / (2.0 * throw_m)))


def irradiance_at(fixture: FixtureSpec, throw_m: float) -> float:
    return fixture.peak_irradiance_mWm2 / throw_m ** 2


def _field_geometry(fixture: FixtureSpec, throw_m: float) -> FieldGeometry | None:
    if fixture.field is None:
        return None
    dia_h = cone_diameter(throw_m, fixture.field.h_deg)
    dia_v = cone_diameter(throw_m, fixture.field.v_deg)
    # Footprint treated as a circle of the horizontal diameter.
    area = circle_area(dia_h)
    return FieldGeometry(
        diameter_h_m=dia_h,
        diameter_v_m=dia_v,
        diameter_h_ft=meters_to_feet(dia_h),
        diameter_v_ft=meters_to_feet(dia_v),
        area_m2=area,
        area_ft2=sq_meters_to_sq_feet(area),
    )


def calculate(inp: CalculationInput) -> CalculationResult:
    """
    Run the full radiometric calculation for one placement.

    Validation order is fixed: unknown fixture, then negative distances, then
    zero throw. Failures come back as CalculationError, never as exceptions.
    """
    fixture = lookup(inp.fixture_model)
    if fixture is None:
        return CalculationError(ERR_INVALID_FIXTURE)
    v = inp.vertical_height
    h = inp.horizontal_distance
    if v < 0 or h < 0:
        return CalculationError(ERR_NEGATIVE_DISTANCE)
    throw = throw_distance(v, h)
    if throw == 0:
        return CalculationError(ERR_ZERO_THROW)

    beam_dia_h = cone_diameter(throw, fixture.beam_h_deg)
    beam_dia_v = cone_diameter(throw, fixture.beam_v_deg)
    # Horizontal diameter only, even when the vertical angle differs.
    beam_area = circle_area(beam_dia_h)

    irr = irradiance_at(fixture, throw)

    report = IrradianceReport(
        fixture_model=inp.fixture_model,
        vertical_height_m=v,
        horizontal_distance_m=h,
        throw_distance_m=throw,
        vertical_height_ft=meters_to_feet(v),
        horizontal_distance_ft=meters_to_feet(h),
        throw_distance_ft=meters_to_feet(throw),
        beam_diameter_h_m=beam_dia_h,
        beam_diameter_v_m=beam_dia_v,
        beam_diameter_h_ft=meters_to_feet(beam_dia_h),
        beam_diameter_v_ft=meters_to_feet(beam_dia_v),
        beam_area_m2=beam_area,
        beam_area_ft2=sq_meters_to_sq_feet(beam_area),
        irradiance_mWm2=irr,
        irradiance_uWcm2=irr / 10.0,
        irradiance_Wm2=irr / 1000.0,
        irradiance_mWcm2=irr / 10000.0,
        irradiance_degradation_percent=(1.0 - irr / fixture.peak_irradiance_mWm2) * 100.0,
        field=_field_geometry(fixture, throw),
    )

    calculators = BeamCalculators(
        throw_distance_required_m=throw,
        beam_angle_h_deg=required_beam_angle_deg(inp.beam_width, throw),
        beam_angle_v_deg=required_beam_angle_deg(inp.beam_height, throw),
        multiplying_factor=math.tan(math.radians(fixture.beam_h_deg / 2.0)),
        beam_spread_m=beam_dia_h,
        beam_area_m2=beam_area,
        rectangular_volume_m3=inp.rect_height * inp.rect_width * inp.rect_depth,
    )

    return RadiometricResult(irradiance_report=report, beam_calculators=calculators)


def calculate_radiometric_data(
    fixture_model: str,
    vertical_height: float,
    horizontal_distance: float,
    beam_width: float = DEFAULT_BEAM_WIDTH_M,
    beam_height: float = DEFAULT_BEAM_HEIGHT_M,
    rect_height: float = DEFAULT_RECT_DIM_M,
    rect_width: float = DEFAULT_RECT_DIM_M,
    rect_depth: float = DEFAULT_RECT_DIM_M,
) -> CalculationResult:
    return calculate(
        CalculationInput(
            fixture_model=fixture_model,
            vertical_height=vertical_height,
            horizontal_distance=horizontal_distance,
            beam_width=beam_width,
            beam_height=beam_height,
            rect_height=rect_height,
            rect_width=rect_width,
            rect_depth=rect_depth,
        )
    )

