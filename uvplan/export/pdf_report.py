from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    Image,
)

from uvplan.calculation.types import CalculationInput, CalculationResult
from uvplan.compliance.safety import SafetyLevel, safety_label
from uvplan.export.errors import ExportError


logger = logging.getLogger(__name__)


def _kv_table(rows):
    t = Table(rows, colWidths=[5.2 * cm, 12.5 * cm])
    t.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("ROWBACKGROUNDS", (0, 0), (-1, -1), [colors.whitesmoke, colors.white]),
                ("BOX", (0, 0), (-1, -1), 0.5, colors.lightgrey),
                ("INNERGRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                ("LEFTPADDING", (0, 0), (-1, -1), 6),
                ("RIGHTPADDING", (0, 0), (-1, -1), 6),
                ("TOPPADDING", (0, 0), (-1, -1), 4),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ]
        )
    )
    return t


def _input_rows(inp: CalculationInput) -> List[List[str]]:
    return [
        ["Vertical height", f"{inp.vertical_height:g} m"],
        ["Horizontal distance", f"{inp.horizontal_distance:g} m"],
        ["Target beam width", f"{inp.beam_width:g} m"],
        ["Target beam height", f"{inp.beam_height:g} m"],
        ["Volume (H x W x D)", f"{inp.rect_height:g} x {inp.rect_width:g} x {inp.rect_depth:g} m"],
    ]


def build_pdf_report(
    name: str,
    inputs: CalculationInput,
    result: CalculationResult,
    safety_level: Union[SafetyLevel, str],
    out_pdf_path: Path,
    falloff_png: Optional[Path] = None,
    generated: Optional[datetime] = None,
) -> Path:
    """
    Shareable calculation PDF:
      - Header with fixture and safety tier
      - Inputs
      - Irradiance report and beam calculators
      - Optional falloff plot
    """
    out_pdf_path = Path(out_pdf_path).expanduser().resolve()
    generated = generated or datetime.now()
    level = SafetyLevel(safety_level)

    styles = getSampleStyleSheet()
    title_style = styles["Title"]
    h2 = styles["Heading2"]
    body = styles["BodyText"]

    story = []
    story.append(Paragraph("UV Calculation Report", title_style))
    story.append(Spacer(1, 0.25 * cm))
    story.append(Paragraph(f"<b>Report</b>: {escape(name)}", body))
    story.append(Paragraph(f"<b>Fixture</b>: {escape(inputs.fixture_model)}", body))
    story.append(Paragraph(f"<b>Safety</b>: {escape(safety_label(level))}", body))
    story.append(Paragraph(f"<b>Generated</b>: {generated.strftime('%Y-%m-%d %H:%M:%S')}", body))
    story.append(Spacer(1, 0.35 * cm))

    story.append(Paragraph("Inputs", h2))
    story.append(_kv_table(_input_rows(inputs)))
    story.append(Spacer(1, 0.35 * cm))

    if result.ok:
        irr = result.irradiance_report
        story.append(Paragraph("Irradiance Report", h2))
        rows = [
            ["Throw distance", f"{irr.throw_distance_m:.3f} m ({irr.throw_distance_ft:.2f} ft)"],
            ["Beam diameter (H x V)", f"{irr.beam_diameter_h_m:.3f} x {irr.beam_diameter_v_m:.3f} m"],
            ["Beam area", f"{irr.beam_area_m2:.3f} m² ({irr.beam_area_ft2:.2f} ft²)"],
        ]
        if irr.field is not None:
            rows.extend(
                [
                    ["Field diameter (H x V)", f"{irr.field.diameter_h_m:.3f} x {irr.field.diameter_v_m:.3f} m"],
                    ["Field area", f"{irr.field.area_m2:.3f} m² ({irr.field.area_ft2:.2f} ft²)"],
                ]
            )
        rows.extend(
            [
                ["Irradiance", f"{irr.irradiance_mWm2:.3f} mW/m²"],
                ["", f"{irr.irradiance_uWcm2:.3f} µW/cm²  /  {irr.irradiance_Wm2:.6f} W/m²"],
                ["Degradation from 1 m", f"{irr.irradiance_degradation_percent:.2f} %"],
            ]
        )
        story.append(_kv_table(rows))
        story.append(Spacer(1, 0.35 * cm))

        beam = result.beam_calculators
        story.append(Paragraph("Beam Calculators", h2))
        story.append(
            _kv_table(
                [
                    ["Required beam angle (H)", f"{beam.beam_angle_h_deg:.2f}°"],
                    ["Required beam angle (V)", f"{beam.beam_angle_v_deg:.2f}°"],
                    ["Multiplying factor", f"{beam.multiplying_factor:.4f}"],
                    ["Beam spread", f"{beam.beam_spread_m:.3f} m"],
                    ["Rectangular volume", f"{beam.rectangular_volume_m3:.3f} m³"],
                ]
            )
        )
    else:
        story.append(Paragraph(f"<b>Calculation error</b>: {escape(result.error)}", body))

    if falloff_png is not None:
        story.append(Spacer(1, 0.45 * cm))
        story.append(Paragraph("Irradiance Falloff", h2))
        img = Image(str(falloff_png))
        img._restrictSize(17.0 * cm, 12.5 * cm)
        story.append(img)

    try:
        out_pdf_path.parent.mkdir(parents=True, exist_ok=True)
        pdf = SimpleDocTemplate(
            str(out_pdf_path),
            pagesize=A4,
            leftMargin=1.6 * cm,
            rightMargin=1.6 * cm,
            topMargin=1.6 * cm,
            bottomMargin=1.6 * cm,
            title="UV Calculation Report",
            author="uvplan",
        )
        pdf.build(story)
    except OSError as e:
        raise ExportError(f"Failed to write PDF report: {out_pdf_path}") from e
    logger.info("Saved PDF report to %s", out_pdf_path)
    return out_pdf_path
