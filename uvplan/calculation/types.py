from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


DEFAULT_BEAM_WIDTH_M = 12.0
DEFAULT_BEAM_HEIGHT_M = 12.0
DEFAULT_RECT_DIM_M = 3.0


@dataclass(frozen=True)
class CalculationInput:
    """
    One calculation request.

    Attributes:
        fixture_model: Catalog model id (exact, case-sensitive)
        vertical_height: Mounting height above the target plane (m)
        horizontal_distance: Horizontal offset from directly overhead (m)
        beam_width, beam_height: Target rectangle for the required-angle advisory (m)
        rect_height, rect_width, rect_depth: Free-standing volume figure (m)
    """
    fixture_model: str
    vertical_height: float
    horizontal_distance: float
    beam_width: float = DEFAULT_BEAM_WIDTH_M
    beam_height: float = DEFAULT_BEAM_HEIGHT_M
    rect_height: float = DEFAULT_RECT_DIM_M
    rect_width: float = DEFAULT_RECT_DIM_M
    rect_depth: float = DEFAULT_RECT_DIM_M

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fixture_model": self.fixture_model,
            "vertical_height": self.vertical_height,
            "horizontal_distance": self.horizontal_distance,
            "beam_width": self.beam_width,
            "beam_height": self.beam_height,
            "rect_height": self.rect_height,
            "rect_width": self.rect_width,
            "rect_depth": self.rect_depth,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CalculationInput":
        return cls(
            fixture_model=str(d["fixture_model"]),
            vertical_height=float(d["vertical_height"]),
            horizontal_distance=float(d["horizontal_distance"]),
            beam_width=float(d.get("beam_width", DEFAULT_BEAM_WIDTH_M)),
            beam_height=float(d.get("beam_height", DEFAULT_BEAM_HEIGHT_M)),
            rect_height=float(d.get("rect_height", DEFAULT_RECT_DIM_M)),
            rect_width=float(d.get("rect_width", DEFAULT_RECT_DIM_M)),
            rect_depth=float(d.get("rect_depth", DEFAULT_RECT_DIM_M)),
        )


@dataclass(frozen=True)
class FieldGeometry:
    """Field (spill) footprint. Only produced for fixtures with field angles."""
    diameter_h_m: float
    diameter_v_m: float
    diameter_h_ft: float
    diameter_v_ft: float
    area_m2: float
    area_ft2: float


@dataclass(frozen=True)
class IrradianceReport:
    fixture_model: str
    vertical_height_m: float
    horizontal_distance_m: float
    throw_distance_m: float
    vertical_height_ft: float
    horizontal_distance_ft: float
    throw_distance_ft: float
    beam_diameter_h_m: float
    beam_diameter_v_m: float
    beam_diameter_h_ft: float
    beam_diameter_v_ft: float
    beam_area_m2: float
    beam_area_ft2: float
    irradiance_mWm2: float
    irradiance_uWcm2: float
    irradiance_Wm2: float
    irradiance_mWcm2: float
    irradiance_degradation_percent: float
    field: Optional[FieldGeometry] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "fixture_model": self.fixture_model,
            "vertical_height_m": self.vertical_height_m,
            "horizontal_distance_m": self.horizontal_distance_m,
            "throw_distance_m": self.throw_distance_m,
            "vertical_height_ft": self.vertical_height_ft,
            "horizontal_distance_ft": self.horizontal_distance_ft,
            "throw_distance_ft": self.throw_distance_ft,
            "beam_diameter_h_m": self.beam_diameter_h_m,
            "beam_diameter_v_m": self.beam_diameter_v_m,
            "beam_diameter_h_ft": self.beam_diameter_h_ft,
            "beam_diameter_v_ft": self.beam_diameter_v_ft,
            "beam_area_m2": self.beam_area_m2,
            "beam_area_ft2": self.beam_area_ft2,
        }
        if self.field is not None:
            out.update(
                {
                    "field_diameter_h_m": self.field.diameter_h_m,
                    "field_diameter_v_m": self.field.diameter_v_m,
                    "field_diameter_h_ft": self.field.diameter_h_ft,
                    "field_diameter_v_ft": self.field.diameter_v_ft,
                    "field_area_m2": self.field.area_m2,
                    "field_area_ft2": self.field.area_ft2,
                }
            )
        out.update(
            {
                "irradiance_mWm2": self.irradiance_mWm2,
                "irradiance_uWcm2": self.irradiance_uWcm2,
                "irradiance_Wm2": self.irradiance_Wm2,
                "irradiance_mWcm2": self.irradiance_mWcm2,
                "irradiance_degradation_percent": self.irradiance_degradation_percent,
            }
        )
        return out

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "IrradianceReport":
        field = None
        if "field_diameter_h_m" in d:
            field = FieldGeometry(
                diameter_h_m=float(d["field_diameter_h_m"]),
                diameter_v_m=float(d["field_diameter_v_m"]),
                diameter_h_ft=float(d["field_diameter_h_ft"]),
                diameter_v_ft=float(d["field_diameter_v_ft"]),
                area_m2=float(d["field_area_m2"]),
                area_ft2=float(d["field_area_ft2"]),
            )
        scalars = {k: d[k] for k in cls.__dataclass_fields__ if k not in ("field", "fixture_model")}
        return cls(fixture_model=str(d["fixture_model"]), field=field, **{k: float(v) for k, v in scalars.items()})


@dataclass(frozen=True)
class BeamCalculators:
    throw_distance_required_m: float
    beam_angle_h_deg: float  # angle needed to cover beam_width
    beam_angle_v_deg: float  # angle needed to cover beam_height
    multiplying_factor: float
    beam_spread_m: float
    beam_area_m2: float
    rectangular_volume_m3: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "throw_distance_required_m": self.throw_distance_required_m,
            "beam_angle_h_deg": self.beam_angle_h_deg,
            "beam_angle_v_deg": self.beam_angle_v_deg,
            "multiplying_factor": self.multiplying_factor,
            "beam_spread_m": self.beam_spread_m,
            "beam_area_m2": self.beam_area_m2,
            "rectangular_volume_m3": self.rectangular_volume_m3,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BeamCalculators":
        return cls(**{k: float(d[k]) for k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class RadiometricResult:
    irradiance_report: IrradianceReport
    beam_calculators: BeamCalculators

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "irradiance_report": self.irradiance_report.to_dict(),
            "beam_calculators": self.beam_calculators.to_dict(),
        }


@dataclass(frozen=True)
class CalculationError:
    error: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


CalculationResult = Union[RadiometricResult, CalculationError]


def result_from_dict(d: Dict[str, Any]) -> CalculationResult:
    if "error" in d:
        return CalculationError(error=str(d["error"]))
    return RadiometricResult(
        irradiance_report=IrradianceReport.from_dict(d["irradiance_report"]),
        beam_calculators=BeamCalculators.from_dict(d["beam_calculators"]),
    )
