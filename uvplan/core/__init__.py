from uvplan.core.units import (
    M_TO_FT,
    FT_TO_M,
    M2_TO_FT2,
    M3_TO_FT3,
    UnitSystem,
    meters_to_feet,
    feet_to_meters,
    sq_meters_to_sq_feet,
    cu_meters_to_cu_feet,
)

__all__ = [
    "M_TO_FT",
    "FT_TO_M",
    "M2_TO_FT2",
    "M3_TO_FT3",
    "UnitSystem",
    "meters_to_feet",
    "feet_to_meters",
    "sq_meters_to_sq_feet",
    "cu_meters_to_cu_feet",
]
