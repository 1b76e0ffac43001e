from uvplan.calculation.types import (
    BeamCalculators,
    CalculationError,
    CalculationInput,
    CalculationResult,
    FieldGeometry,
    IrradianceReport,
    RadiometricResult,
)
from uvplan.calculation.radiometric import (
    ERR_INVALID_FIXTURE,
    ERR_NEGATIVE_DISTANCE,
    ERR_ZERO_THROW,
    calculate,
    calculate_radiometric_data,
)

__all__ = [
    "BeamCalculators",
    "CalculationError",
    "CalculationInput",
    "CalculationResult",
    "FieldGeometry",
    "IrradianceReport",
    "RadiometricResult",
    "ERR_INVALID_FIXTURE",
    "ERR_NEGATIVE_DISTANCE",
    "ERR_ZERO_THROW",
    "calculate",
    "calculate_radiometric_data",
]
