from __future__ import annotations

import csv
import io
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from uvplan.results.store import SavedCalculation
from uvplan.export.errors import ExportError


logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Name",
    "Fixture",
    "Date",
    "Safety Level",
    "Vertical Height (m)",
    "Horizontal Distance (m)",
    "Beam Width (m)",
    "Beam Height (m)",
    "Throw Distance (m)",
    "Irradiance (mW/m²)",
    "Beam Area (m²)",
]


def _two(value: Optional[float]) -> str:
    return "" if value is None else f"{value:.2f}"


def _row(calc: SavedCalculation) -> List[str]:
    date = datetime.fromtimestamp(calc.timestamp / 1000.0, tz=timezone.utc).date().isoformat()
    irr = calc.result.irradiance_report if calc.result.ok else None
    return [
        calc.name,
        calc.fixture,
        date,
        calc.safety_level.value,
        f"{calc.inputs.vertical_height:g}",
        f"{calc.inputs.horizontal_distance:g}",
        f"{calc.inputs.beam_width:g}",
        f"{calc.inputs.beam_height:g}",
        _two(irr.throw_distance_m if irr else None),
        _two(irr.irradiance_mWm2 if irr else None),
        _two(irr.beam_area_m2 if irr else None),
    ]


def calculations_csv(calculations: Iterable[SavedCalculation]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(CSV_HEADERS)
    for calc in calculations:
        w.writerow(_row(calc))
    return buf.getvalue()


def write_calculations_csv(out_dir: Path, calculations: Iterable[SavedCalculation]) -> Path:
    out_path = Path(out_dir).expanduser().resolve() / "calculations_export.csv"
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(calculations_csv(calculations), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to export CSV: {out_path}") from e
    logger.info("Saved calculations CSV to %s", out_path)
    return out_path
