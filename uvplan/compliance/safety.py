from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Union

from uvplan.calculation.types import CalculationResult


class SafetyLevel(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    WARNING = "warning"
    DANGER = "danger"


# mW/m², strict greater-than, checked from the top down
SAFETY_THRESHOLDS: Dict[SafetyLevel, float] = {
    SafetyLevel.DANGER: 25000.0,
    SafetyLevel.WARNING: 10000.0,
    SafetyLevel.CAUTION: 2500.0,
}

SAFETY_LABELS: Dict[SafetyLevel, str] = {
    SafetyLevel.SAFE: "SAFE — Normal operation (0-2500 mW/m2)",
    SafetyLevel.CAUTION: "CAUTION — Limit exposure to 5 min (2501-10000 mW/m2)",
    SafetyLevel.WARNING: "WARNING — Max 1 min, full PPE required (10001-25000 mW/m2)",
    SafetyLevel.DANGER: "DANGER — Immediate evacuation required (>25000 mW/m2)",
}

SAFETY_MESSAGES: Dict[SafetyLevel, str] = {
    SafetyLevel.SAFE: "Safe UV levels",
    SafetyLevel.CAUTION: "Moderate UV - Use caution",
    SafetyLevel.WARNING: "Warning: Use PPE",
    SafetyLevel.DANGER: "High UV - Safety required",
}


def classify_irradiance(irradiance_mWm2: float) -> SafetyLevel:
    for level, threshold in SAFETY_THRESHOLDS.items():
        if irradiance_mWm2 > threshold:
            return level
    return SafetyLevel.SAFE


def classify_result(result: Union[CalculationResult, Mapping]) -> SafetyLevel:
    """
    Safety tier of a calculation result.

    Accepts a result object or its serialized dict. Error results classify as
    SAFE since there is no irradiance to judge.
    """
    if isinstance(result, Mapping):
        if "error" in result:
            return SafetyLevel.SAFE
        return classify_irradiance(float(result["irradiance_report"]["irradiance_mWm2"]))
    if not result.ok:
        return SafetyLevel.SAFE
    return classify_irradiance(result.irradiance_report.irradiance_mWm2)


def safety_label(level: Union[SafetyLevel, str]) -> str:
    return SAFETY_LABELS[SafetyLevel(level)]
