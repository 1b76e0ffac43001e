from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from uvplan.calculation.types import CalculationInput, CalculationResult
from uvplan.compliance.safety import SafetyLevel
from uvplan.core.units import cu_meters_to_cu_feet
from uvplan.export.errors import ExportError, safe_stem


logger = logging.getLogger(__name__)

DIVIDER = "═" * 50
BRAND = "WILDFIRE LIGHTING"


def _fmt(value: Optional[float], digits: int) -> str:
    if value is None:
        return "—"
    return f"{value:.{digits}f}"


def _input_lines(inp: Optional[CalculationInput]) -> List[str]:
    def g(attr: str) -> str:
        return "—" if inp is None else f"{getattr(inp, attr):g}"

    return [
        "─── INPUT PARAMETERS ───",
        f"Vertical Height:      {g('vertical_height')} m",
        f"Horizontal Distance:  {g('horizontal_distance')} m",
        f"Beam Width:           {g('beam_width')} m",
        f"Beam Height:          {g('beam_height')} m",
        f"Rect Height:          {g('rect_height')} m",
        f"Rect Width:           {g('rect_width')} m",
        f"Rect Depth:           {g('rect_depth')} m",
        "",
    ]


def build_calculation_report(
    name: str,
    fixture: str,
    inputs: Optional[CalculationInput],
    result: CalculationResult,
    safety_level: Union[SafetyLevel, str],
    generated: Optional[datetime] = None,
) -> str:
    """Plain-text calculation report, one value per line."""
    generated = generated or datetime.now()
    level = SafetyLevel(safety_level)
    lines: List[str] = [
        DIVIDER,
        f"  {BRAND} — UV CALCULATION REPORT",
        DIVIDER,
        "",
        f"Report Name:      {name}",
        f"Fixture Model:    {fixture}",
        f"Safety Level:     {level.value.upper()}",
        f"Generated:        {generated.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
    ]
    lines.extend(_input_lines(inputs))

    if result.ok:
        irr = result.irradiance_report
        lines.extend(
            [
                "─── IRRADIANCE REPORT ───",
                f"Throw Distance:       {_fmt(irr.throw_distance_m, 3)} m  ({_fmt(irr.throw_distance_ft, 2)} ft)",
                f"Beam Diameter (H):    {_fmt(irr.beam_diameter_h_m, 3)} m",
                f"Beam Diameter (V):    {_fmt(irr.beam_diameter_v_m, 3)} m",
                f"Beam Area:            {_fmt(irr.beam_area_m2, 3)} m²",
            ]
        )
        if irr.field is not None:
            lines.extend(
                [
                    f"Field Diameter (H):   {_fmt(irr.field.diameter_h_m, 3)} m",
                    f"Field Diameter (V):   {_fmt(irr.field.diameter_v_m, 3)} m",
                    f"Field Area:           {_fmt(irr.field.area_m2, 3)} m²",
                ]
            )
        lines.extend(
            [
                f"Irradiance:           {_fmt(irr.irradiance_mWm2, 3)} mW/m²",
                f"                      {_fmt(irr.irradiance_uWcm2, 3)} µW/cm²",
                f"                      {_fmt(irr.irradiance_Wm2, 6)} W/m²",
                f"Degradation:          {_fmt(irr.irradiance_degradation_percent, 2)}%",
                "",
            ]
        )
        beam = result.beam_calculators
        lines.extend(
            [
                "─── BEAM CALCULATORS ───",
                f"Throw Required:       {_fmt(beam.throw_distance_required_m, 3)} m",
                f"Beam Angle (H):       {_fmt(beam.beam_angle_h_deg, 2)}°",
                f"Beam Angle (V):       {_fmt(beam.beam_angle_v_deg, 2)}°",
                f"Multiplying Factor:   {_fmt(beam.multiplying_factor, 4)}",
                f"Beam Spread:          {_fmt(beam.beam_spread_m, 3)} m",
                f"Rectangular Volume:   {_fmt(beam.rectangular_volume_m3, 3)} m³"
                f"  ({_fmt(cu_meters_to_cu_feet(beam.rectangular_volume_m3), 2)} ft³)",
                "",
            ]
        )
    else:
        lines.extend(["─── ERROR ───", result.error, ""])

    lines.extend([DIVIDER, f"  Powered by {BRAND.title()}", DIVIDER])
    return "\n".join(lines)


def write_calculation_report(
    out_dir: Path,
    name: str,
    fixture: str,
    inputs: Optional[CalculationInput],
    result: CalculationResult,
    safety_level: Union[SafetyLevel, str],
    generated: Optional[datetime] = None,
) -> Path:
    out_dir = Path(out_dir).expanduser().resolve()
    content = build_calculation_report(name, fixture, inputs, result, safety_level, generated=generated)
    out_path = out_dir / f"{safe_stem(name)}_report.txt"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to export calculation: {out_path}") from e
    logger.info("Saved calculation report to %s", out_path)
    return out_path
