from __future__ import annotations

from typing import Literal


UnitSystem = Literal["metric", "imperial"]

M_TO_FT = 3.28084
FT_TO_M = 1.0 / M_TO_FT
M2_TO_FT2 = 10.7639
M3_TO_FT3 = 35.3147


def meters_to_feet(value_m: float) -> float:
    return value_m * M_TO_FT


def feet_to_meters(value_ft: float) -> float:
    return value_ft * FT_TO_M


def sq_meters_to_sq_feet(value_m2: float) -> float:
    return value_m2 * M2_TO_FT2


def cu_meters_to_cu_feet(value_m3: float) -> float:
    return value_m3 * M3_TO_FT3


def _check_system(system: str) -> str:
    s = str(system).lower()
    if s not in ("metric", "imperial"):
        raise ValueError(f"Unknown unit system: {system!r}")
    return s


def convert_to_metric(value: float, from_system: UnitSystem) -> float:
    """Bring a user-entered distance into meters."""
    return feet_to_meters(value) if _check_system(from_system) == "imperial" else value


def convert_distance(value_m: float, to_system: UnitSystem) -> float:
    return meters_to_feet(value_m) if _check_system(to_system) == "imperial" else value_m


def convert_area(value_m2: float, to_system: UnitSystem) -> float:
    return sq_meters_to_sq_feet(value_m2) if _check_system(to_system) == "imperial" else value_m2


def convert_volume(value_m3: float, to_system: UnitSystem) -> float:
    return cu_meters_to_cu_feet(value_m3) if _check_system(to_system) == "imperial" else value_m3


def distance_unit(system: UnitSystem) -> str:
    return "ft" if _check_system(system) == "imperial" else "m"


def area_unit(system: UnitSystem) -> str:
    return "ft²" if _check_system(system) == "imperial" else "m²"


def volume_unit(system: UnitSystem) -> str:
    return "ft³" if _check_system(system) == "imperial" else "m³"
