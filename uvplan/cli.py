from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from uvplan.calculation.radiometric import calculate
from uvplan.calculation.sweep import linear_throws, sweep_throw
from uvplan.calculation.types import (
    DEFAULT_BEAM_HEIGHT_M,
    DEFAULT_BEAM_WIDTH_M,
    DEFAULT_RECT_DIM_M,
    CalculationInput,
)
from uvplan.catalog.fixtures import list_models, lookup
from uvplan.catalog.info import describe_fixture
from uvplan.compliance.safety import SAFETY_MESSAGES, classify_result, safety_label
from uvplan.core.units import area_unit, convert_area, convert_distance, convert_to_metric, distance_unit
from uvplan.export.csv_export import write_calculations_csv
from uvplan.export.errors import ExportError
from uvplan.export.tech_sheet import write_tech_sheet
from uvplan.export.text_report import write_calculation_report
from uvplan.results.store import CalculationStore, StoreError


def _input_from_args(args: argparse.Namespace) -> CalculationInput:
    units = args.units

    def m(value: float) -> float:
        return convert_to_metric(value, units)

    return CalculationInput(
        fixture_model=args.model,
        vertical_height=m(args.height),
        horizontal_distance=m(args.distance),
        beam_width=m(args.beam_width),
        beam_height=m(args.beam_height),
        rect_height=m(args.rect_height),
        rect_width=m(args.rect_width),
        rect_depth=m(args.rect_depth),
    )


def _cmd_fixtures(args: argparse.Namespace) -> int:
    for model in list_models():
        spec = lookup(model)
        field = f"  field {spec.field.h_deg:g}x{spec.field.v_deg:g}°" if spec.field is not None else ""
        print(f"{model:<11} beam {spec.beam_h_deg:g}x{spec.beam_v_deg:g}°{field}  {spec.peak_irradiance_mWm2:g} mW/m² @1m")
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    info = describe_fixture(args.model)
    if info is None:
        print(f"[ERROR] Unknown fixture model: {args.model}")
        return 2
    print(f"{info.model}")
    print(f"  Category: {info.category}")
    print(f"  Series:   {info.series}")
    print(f"  Control:  {info.control_type}")
    if info.power_watts is not None:
        print(f"  Power:    {info.power_watts:g} W")
    if info.radiant_power is not None:
        print(f"  Radiant:  {info.radiant_power.value:g} {info.radiant_power.unit}")
    for ch in info.dmx_channels:
        print(f"  DMX {ch.channel}:    {ch.function} ({ch.range})")
    if info.notes:
        print(f"  Notes:    {info.notes}")
    if info.manual_url:
        print(f"  Manual:   {info.manual_url}")
    return 0


def _cmd_calc(args: argparse.Namespace) -> int:
    res = calculate(_input_from_args(args))
    if not res.ok:
        print(f"[ERROR] {res.error}")
        return 2
    level = classify_result(res)
    if args.json:
        payload = res.to_dict()
        payload["safety_level"] = level.value
        print(json.dumps(payload, indent=2))
        return 0

    u = args.units
    irr = res.irradiance_report
    beam = res.beam_calculators
    du = distance_unit(u)
    print(f"{irr.fixture_model}")
    print(f"  Throw distance: {convert_distance(irr.throw_distance_m, u):.3f} {du}")
    print(
        f"  Beam Ø (H x V): {convert_distance(irr.beam_diameter_h_m, u):.3f} x "
        f"{convert_distance(irr.beam_diameter_v_m, u):.3f} {du}"
    )
    print(f"  Beam area:      {convert_area(irr.beam_area_m2, u):.3f} {area_unit(u)}")
    if irr.field is not None:
        print(
            f"  Field Ø (H x V): {convert_distance(irr.field.diameter_h_m, u):.3f} x "
            f"{convert_distance(irr.field.diameter_v_m, u):.3f} {du}"
        )
    print(f"  Irradiance:     {irr.irradiance_mWm2:.3f} mW/m² ({irr.irradiance_uWcm2:.3f} µW/cm²)")
    print(f"  Degradation:    {irr.irradiance_degradation_percent:.2f}%")
    print(f"  Required angle: {beam.beam_angle_h_deg:.2f}° x {beam.beam_angle_v_deg:.2f}°")
    print(f"  Safety:         {safety_label(level)}")
    print(f"                  {SAFETY_MESSAGES[level]}")
    return 0


def _cmd_sweep(args: argparse.Namespace) -> int:
    try:
        sweep = sweep_throw(args.model, linear_throws(args.max_throw, args.steps))
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 2
    for t, e, d, s in zip(sweep.throw_m, sweep.irradiance_mWm2, sweep.beam_diameter_h_m, sweep.safety_levels):
        print(f"{t:8.3f} m  {e:12.3f} mW/m²  Ø {d:8.3f} m  {s.value}")
    if args.plot:
        from uvplan.plotting.plots import plot_irradiance_falloff

        out = plot_irradiance_falloff(sweep, Path(args.plot).expanduser().resolve())
        print(f"Saved: {out}")
    return 0


def _cmd_report(args: argparse.Namespace) -> int:
    inp = _input_from_args(args)
    res = calculate(inp)
    level = classify_result(res)
    outdir = Path(args.out).expanduser().resolve()
    try:
        path = write_calculation_report(outdir, args.name, inp.fixture_model, inp, res, level)
        print(f"Saved: {path}")
        if args.pdf:
            from uvplan.export.pdf_report import build_pdf_report

            pdf_path = build_pdf_report(args.name, inp, res, level, path.with_suffix(".pdf"))
            print(f"Saved: {pdf_path}")
    except ExportError as e:
        print(f"[ERROR] {e}")
        return 3
    return 0 if res.ok else 2


def _cmd_techsheet(args: argparse.Namespace) -> int:
    if lookup(args.model) is None:
        print(f"[ERROR] Unknown fixture model: {args.model}")
        return 2
    try:
        path = write_tech_sheet(Path(args.out), args.model)
    except ExportError as e:
        print(f"[ERROR] {e}")
        return 3
    print(f"Saved: {path}")
    return 0


def _open_store(args: argparse.Namespace) -> CalculationStore:
    return CalculationStore(Path(args.store))


def _cmd_history_save(args: argparse.Namespace) -> int:
    inp = _input_from_args(args)
    res = calculate(inp)
    if not res.ok:
        print(f"[ERROR] {res.error}")
        return 2
    calc = _open_store(args).save(args.name, inp, res, description=args.description, project_id=args.project)
    print(f"Saved: {calc.id} ({calc.name}, {calc.safety_level.value})")
    return 0


def _cmd_history_list(args: argparse.Namespace) -> int:
    for calc in _open_store(args).list(fixture=args.fixture):
        irr = calc.result.irradiance_report
        print(
            f"{calc.id}  {calc.name}  {calc.fixture}  "
            f"{irr.throw_distance_m:.3f} m  {irr.irradiance_mWm2:.3f} mW/m²  {calc.safety_level.value}"
        )
    return 0


def _cmd_history_delete(args: argparse.Namespace) -> int:
    if not _open_store(args).delete(args.id):
        print(f"[ERROR] No saved calculation with id: {args.id}")
        return 2
    print(f"Deleted: {args.id}")
    return 0


def _cmd_history_export_csv(args: argparse.Namespace) -> int:
    path = write_calculations_csv(Path(args.out), _open_store(args).list())
    print(f"Saved: {path}")
    return 0


def _cmd_history(args: argparse.Namespace) -> int:
    try:
        return int(args.history_func(args))
    except (StoreError, ExportError) as e:
        print(f"[ERROR] {e}")
        return 3


def _add_geometry_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("model", help="Fixture model id, e.g. VSP-120F")
    p.add_argument("--height", type=float, required=True, help="Vertical mounting height")
    p.add_argument("--distance", type=float, default=0.0, help="Horizontal offset from overhead")
    p.add_argument("--beam-width", type=float, default=DEFAULT_BEAM_WIDTH_M, help="Target width to cover")
    p.add_argument("--beam-height", type=float, default=DEFAULT_BEAM_HEIGHT_M, help="Target height to cover")
    p.add_argument("--rect-height", type=float, default=DEFAULT_RECT_DIM_M)
    p.add_argument("--rect-width", type=float, default=DEFAULT_RECT_DIM_M)
    p.add_argument("--rect-depth", type=float, default=DEFAULT_RECT_DIM_M)
    p.add_argument("--units", choices=["metric", "imperial"], default="metric", help="Input/display units")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="uvplan")
    p.add_argument("-v", "--verbose", action="store_true", help="Log export activity to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    f = sub.add_parser("fixtures", help="List catalog fixtures.")
    f.set_defaults(func=_cmd_fixtures)

    i = sub.add_parser("info", help="Show datasheet information for a fixture.")
    i.add_argument("model")
    i.set_defaults(func=_cmd_info)

    c = sub.add_parser("calc", help="Compute throw, coverage, irradiance and safety tier.")
    _add_geometry_args(c)
    c.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    c.set_defaults(func=_cmd_calc)

    s = sub.add_parser("sweep", help="Tabulate irradiance over a range of throw distances.")
    s.add_argument("model")
    s.add_argument("--max-throw", type=float, default=15.0, help="Largest throw distance (m)")
    s.add_argument("--steps", type=int, default=15)
    s.add_argument("--plot", default=None, help="Also save a falloff PNG to this path")
    s.set_defaults(func=_cmd_sweep)

    r = sub.add_parser("report", help="Write a calculation report (text, optionally PDF).")
    _add_geometry_args(r)
    r.add_argument("--name", default="UV Calculation", help="Report name")
    r.add_argument("--out", default="out", help="Output directory (default: out)")
    r.add_argument("--pdf", action="store_true", help="Also generate a PDF report")
    r.set_defaults(func=_cmd_report)

    t = sub.add_parser("techsheet", help="Write a fixture technical sheet.")
    t.add_argument("model")
    t.add_argument("--out", default="out", help="Output directory (default: out)")
    t.set_defaults(func=_cmd_techsheet)

    h = sub.add_parser("history", help="Save, list, delete and export saved calculations.")
    h.add_argument("--store", default="uvplan_history.json", help="History file (default: uvplan_history.json)")
    h.set_defaults(func=_cmd_history)
    hsub = h.add_subparsers(dest="history_cmd", required=True)

    hs = hsub.add_parser("save", help="Calculate and save a placement.")
    _add_geometry_args(hs)
    hs.add_argument("--name", default="UV Calculation", help="Calculation name")
    hs.add_argument("--description", default=None)
    hs.add_argument("--project", default=None, help="Project id")
    hs.set_defaults(history_func=_cmd_history_save)

    hl = hsub.add_parser("list", help="List saved calculations, newest first.")
    hl.add_argument("--fixture", default=None, help="Only this fixture model")
    hl.set_defaults(history_func=_cmd_history_list)

    hd = hsub.add_parser("delete", help="Delete a saved calculation.")
    hd.add_argument("id")
    hd.set_defaults(history_func=_cmd_history_delete)

    he = hsub.add_parser("export-csv", help="Write all saved calculations to calculations_export.csv.")
    he.add_argument("--out", default="out", help="Output directory (default: out)")
    he.set_defaults(history_func=_cmd_history_export_csv)

    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
