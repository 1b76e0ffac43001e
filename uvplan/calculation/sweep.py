"""
Throw-distance sweeps and multi-fixture room layouts.

Both are built on the single-placement engine; the sweep vectorizes the same
closed-form expressions with numpy so a falloff curve can be drawn without
calling the engine once per sample.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from uvplan.catalog.fixtures import lookup
from uvplan.calculation.radiometric import calculate_radiometric_data
from uvplan.compliance.safety import SafetyLevel, classify_irradiance


@dataclass(frozen=True)
class ThrowSweep:
    """Irradiance and footprint sampled over a range of throw distances."""
    fixture_model: str
    throw_m: np.ndarray
    irradiance_mWm2: np.ndarray
    beam_diameter_h_m: np.ndarray
    beam_diameter_v_m: np.ndarray
    beam_area_m2: np.ndarray
    safety_levels: List[SafetyLevel]

    def min_throw_for(self, level: SafetyLevel) -> Optional[float]:
        """First sampled throw whose safety tier is no worse than ``level``."""
        order = list(SafetyLevel)
        limit = order.index(SafetyLevel(level))
        for t, s in zip(self.throw_m, self.safety_levels):
            if order.index(s) <= limit:
                return float(t)
        return None


def sweep_throw(fixture_model: str, throws_m: Sequence[float]) -> ThrowSweep:
    spec = lookup(fixture_model)
    if spec is None:
        raise ValueError(f"Unknown fixture model: {fixture_model!r}")
    d = np.asarray(throws_m, dtype=float)
    if d.ndim != 1 or d.size == 0:
        raise ValueError("Need a non-empty 1-D sequence of throw distances")
    if np.any(~np.isfinite(d)) or np.any(d <= 0.0):
        raise ValueError("Throw distances must be finite and positive")

    irr = spec.peak_irradiance_mWm2 / d ** 2
    dia_h = 2.0 * d * np.tan(np.radians(spec.beam_h_deg / 2.0))
    dia_v = 2.0 * d * np.tan(np.radians(spec.beam_v_deg / 2.0))
    area = np.pi * (dia_h / 2.0) ** 2
    return ThrowSweep(
        fixture_model=fixture_model,
        throw_m=d,
        irradiance_mWm2=irr,
        beam_diameter_h_m=dia_h,
        beam_diameter_v_m=dia_v,
        beam_area_m2=area,
        safety_levels=[classify_irradiance(float(x)) for x in irr],
    )


def linear_throws(max_throw_m: float, steps: int, min_throw_m: Optional[float] = None) -> np.ndarray:
    if steps < 2:
        raise ValueError("steps must be >= 2")
    if max_throw_m <= 0:
        raise ValueError("max_throw_m must be positive")
    start = min_throw_m if min_throw_m is not None else max_throw_m / steps
    return np.linspace(start, max_throw_m, steps)


@dataclass(frozen=True)
class FixturePlacement:
    """
    One fixture in a room. Missing height falls back to the room height,
    missing horizontal distance to 0.
    """
    id: str
    fixture_model: str
    vertical_height: Optional[float] = None
    horizontal_distance: Optional[float] = None


@dataclass(frozen=True)
class FixtureFootprint:
    id: str
    fixture_model: str
    throw_distance_m: float
    beam_diameter_h_m: float
    beam_diameter_v_m: float
    irradiance_mWm2: float
    safety_level: SafetyLevel
    vertical_height_m: float
    horizontal_distance_m: float
    x_m: float
    z_m: float


def layout_room(
    room_width: float,
    room_depth: float,
    room_height: float,
    placements: Sequence[FixturePlacement],
) -> List[FixtureFootprint]:
    """
    Spread fixtures evenly across the room width and compute each footprint.

    Footprints are clipped to the room and centers clamped so the footprint
    stays inside. Placements that fail to calculate are dropped.
    """
    if room_width <= 0 or room_depth <= 0:
        return []
    out: List[FixtureFootprint] = []
    spacing = room_width / (len(placements) + 1)
    for i, p in enumerate(placements):
        if not p.fixture_model:
            continue
        v = p.vertical_height if p.vertical_height else room_height
        h = p.horizontal_distance if p.horizontal_distance else 0.0
        res = calculate_radiometric_data(p.fixture_model, v, h)
        if not res.ok:
            continue
        r = res.irradiance_report
        x = spacing * (i + 1)
        z = room_depth / 2.0 + h
        dia_h = min(r.beam_diameter_h_m, room_width)
        dia_v = min(r.beam_diameter_v_m, room_depth)
        out.append(
            FixtureFootprint(
                id=p.id,
                fixture_model=p.fixture_model,
                throw_distance_m=r.throw_distance_m,
                beam_diameter_h_m=dia_h,
                beam_diameter_v_m=dia_v,
                irradiance_mWm2=r.irradiance_mWm2,
                safety_level=classify_irradiance(r.irradiance_mWm2),
                vertical_height_m=v,
                horizontal_distance_m=h,
                x_m=min(max(x, dia_h / 2.0), room_width - dia_h / 2.0),
                z_m=min(max(z, dia_v / 2.0), room_depth - dia_v / 2.0),
            )
        )
    return out
