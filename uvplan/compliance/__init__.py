from uvplan.compliance.safety import (
    SAFETY_LABELS,
    SAFETY_THRESHOLDS,
    SafetyLevel,
    classify_irradiance,
    classify_result,
    safety_label,
)

__all__ = [
    "SAFETY_LABELS",
    "SAFETY_THRESHOLDS",
    "SafetyLevel",
    "classify_irradiance",
    "classify_result",
    "safety_label",
]
