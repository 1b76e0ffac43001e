"""
Wildfire UV fixture catalog.

Photometric constants from the manufacturer technical data sheets. Values are
kept exactly as published so calculations stay comparable across tools:

    beam_h_deg / beam_v_deg   full beam angle (deg)
    field                     optional wider field angle pair (deg)
    peak_irradiance_mWm2      on-axis irradiance at 1 m (mW/m²)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FieldAngles:
    """Field (spill) angle pair. Horizontal and vertical always travel together."""
    h_deg: float
    v_deg: float

    def __post_init__(self) -> None:
        if not (self.h_deg > 0 and self.v_deg > 0):
            raise ValueError(f"Field angles must be positive, got ({self.h_deg}, {self.v_deg})")


@dataclass(frozen=True)
class FixtureSpec:
    beam_h_deg: float
    beam_v_deg: float
    peak_irradiance_mWm2: float
    field: Optional[FieldAngles] = None

    def __post_init__(self) -> None:
        if not (self.beam_h_deg > 0 and self.beam_v_deg > 0):
            raise ValueError(f"Beam angles must be positive, got ({self.beam_h_deg}, {self.beam_v_deg})")
        if not self.peak_irradiance_mWm2 > 0:
            raise ValueError(f"Peak irradiance must be positive, got {self.peak_irradiance_mWm2}")

    @property
    def has_field(self) -> bool:
        return self.field is not None

    @property
    def field_h_deg(self) -> Optional[float]:
        return self.field.h_deg if self.field is not None else None

    @property
    def field_v_deg(self) -> Optional[float]:
        return self.field.v_deg if self.field is not None else None

    def to_dict(self) -> Dict[str, float]:
        out: Dict[str, float] = {"beam_h_deg": self.beam_h_deg, "beam_v_deg": self.beam_v_deg}
        if self.field is not None:
            out["field_h_deg"] = self.field.h_deg
            out["field_v_deg"] = self.field.v_deg
        out["peak_irradiance_mWm2"] = self.peak_irradiance_mWm2
        return out


_VSP_FLOOD_FIELD = FieldAngles(62.3, 62.4)

# Definition order is the public listing order.
FIXTURE_DATA: Dict[str, FixtureSpec] = {
    "VSP-120F": FixtureSpec(33.8, 34.2, 13250.0, field=_VSP_FLOOD_FIELD),
    "VSP-120S": FixtureSpec(10.0, 10.0, 24000.0),
    "VSP-120WS": FixtureSpec(24.0, 24.0, 15250.0),
    "VSP-60S": FixtureSpec(10.0, 10.0, 12480.0),
    "VSP-60WS": FixtureSpec(24.0, 24.0, 8040.0),
    "VSP-60F": FixtureSpec(33.8, 34.2, 6500.0, field=_VSP_FLOOD_FIELD),
    "EM-44L": FixtureSpec(160.0, 160.0, 1160.0),
    "EM-42L": FixtureSpec(160.0, 160.0, 580.0),
    "EM-22L": FixtureSpec(160.0, 160.0, 400.0),
    "EM-44V": FixtureSpec(165.0, 165.0, 1980.0),
    "EM-43E": FixtureSpec(165.0, 165.0, 1271.0),
    "EM-42E": FixtureSpec(165.0, 165.0, 912.0),
    "UB-44": FixtureSpec(120.0, 120.0, 1160.0),
    "UB-42": FixtureSpec(120.0, 120.0, 1060.0),
    "UB-41": FixtureSpec(160.0, 160.0, 290.0),
    "UB-21": FixtureSpec(160.0, 160.0, 200.0),
    "UR-46": FixtureSpec(165.0, 165.0, 114.0),
    "UR-22": FixtureSpec(165.0, 165.0, 126.3),
    "UR-12": FixtureSpec(165.0, 165.0, 83.2),
    "L15T8/BLB": FixtureSpec(120.0, 120.0, 530.0),
    "L9T8/BLB": FixtureSpec(120.0, 120.0, 378.0),
    "L30T9/BLB": FixtureSpec(120.0, 120.0, 680.0),
    "L15T9/BLB": FixtureSpec(120.0, 120.0, 320.0),
}


def list_models() -> List[str]:
    return list(FIXTURE_DATA.keys())


def lookup(model: str) -> Optional[FixtureSpec]:
    if not isinstance(model, str):
        return None
    return FIXTURE_DATA.get(model)


def is_known_model(model: str) -> bool:
    return lookup(model) is not None
