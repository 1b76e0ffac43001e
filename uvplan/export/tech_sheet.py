from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from uvplan.catalog.fixtures import lookup
from uvplan.catalog.info import fixture_dmx_channels, fixture_power_watts, fixture_radiant_power
from uvplan.compliance.safety import SAFETY_THRESHOLDS, SafetyLevel
from uvplan.export.errors import ExportError, safe_stem
from uvplan.export.text_report import DIVIDER


logger = logging.getLogger(__name__)


def _series_block(model: str) -> List[str]:
    if model.startswith("VSP"):
        lines = [
            "Series: VioStorm UV LED (High Power)",
            "Control: DMX 512 / RDM",
            "Wavelength: 365nm (UV-A)",
            "Dimming: 16-bit (Coarse + Fine)",
            "Input Voltage: 100-240VAC 50/60Hz",
            "IP Rating: IP20 (Indoor)",
            "Optics: Interchangeable Silicone Lenses",
            "",
            "DMX Channels:",
        ]
        for ch in fixture_dmx_channels(model) or []:
            lines.append(f"  Ch {ch.channel}: {ch.function} ({ch.range})")
        return lines + [""]
    if model.startswith("EM"):
        return [
            "Series: Effects Master",
            "Control: On/Off (Mains)",
            "Wavelength: 365-370nm (UV-A)",
            "Input Voltage: 120-250VAC Universal",
            "",
        ]
    if model.startswith("UB"):
        return [
            "Series: UltraBlack Fluorescent",
            "Control: On/Off (Mains)",
            "Wavelength: 365nm (UV-A)",
            "Beam Angle: 120°",
            "",
        ]
    if model.startswith("UR"):
        return [
            "Series: UltraRay Compact Fluorescent",
            "Control: On/Off (Mains)",
            "Wavelength: 365nm (UV-A)",
            "",
        ]
    return []


def _photometry_block(model: str) -> List[str]:
    spec = lookup(model)
    if spec is None:
        return []
    lines = [
        "─── PHOTOMETRY ───",
        f"Beam Angle (H x V):   {spec.beam_h_deg:g}° x {spec.beam_v_deg:g}°",
    ]
    if spec.field is not None:
        lines.append(f"Field Angle (H x V):  {spec.field.h_deg:g}° x {spec.field.v_deg:g}°")
    lines.append(f"Peak Irradiance @1m:  {spec.peak_irradiance_mWm2:g} mW/m²")
    watts = fixture_power_watts(model)
    if watts is not None:
        lines.append(f"Power Consumption:    {watts:g} W")
    radiant = fixture_radiant_power(model)
    if radiant is not None:
        lines.append(f"Radiant Output:       {radiant.value:,.0f} {radiant.unit}")
    return lines + [""]


def _safety_block() -> List[str]:
    caution = SAFETY_THRESHOLDS[SafetyLevel.CAUTION]
    warning = SAFETY_THRESHOLDS[SafetyLevel.WARNING]
    danger = SAFETY_THRESHOLDS[SafetyLevel.DANGER]
    return [
        "─── SAFETY INFORMATION ───",
        "UV-A (365nm) Safety Guidelines:",
        f"  0 - {caution:,.0f} mW/m²:     SAFE — Normal operation",
        f"  {caution + 1:,.0f} - {warning:,.0f} mW/m²: CAUTION — Limit exposure to 5 min",
        f"  {warning + 1:,.0f} - {danger:,.0f} mW/m²: WARNING — Max 1 min, full PPE",
        f"  > {danger:,.0f} mW/m²:       DANGER — Immediate evacuation",
        "",
    ]


def tech_sheet_text(model: str) -> str:
    lines: List[str] = [
        DIVIDER,
        "  WILDFIRE LIGHTING — TECHNICAL SHEET",
        f"  Model: {model}",
        DIVIDER,
        "",
    ]
    lines.extend(_series_block(model))
    lines.extend(_photometry_block(model))
    lines.extend(_safety_block())
    lines.extend([DIVIDER, "  For full documentation visit wildfirelighting.com", DIVIDER])
    return "\n".join(lines)


def write_tech_sheet(out_dir: Path, model: str) -> Path:
    out_path = Path(out_dir).expanduser().resolve() / f"{safe_stem(model)}_tech_sheet.txt"
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(tech_sheet_text(model), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to export tech sheet: {out_path}") from e
    logger.info("Saved tech sheet to %s", out_path)
    return out_path
