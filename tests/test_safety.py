from __future__ import annotations

import pytest

from uvplan.calculation.radiometric import calculate_radiometric_data
from uvplan.compliance.safety import (
    SAFETY_LABELS,
    SafetyLevel,
    classify_irradiance,
    classify_result,
    safety_label,
)


@pytest.mark.parametrize(
    "irradiance, level",
    [
        (0.0, SafetyLevel.SAFE),
        (2500.0, SafetyLevel.SAFE),
        (2500.0001, SafetyLevel.CAUTION),
        (10000.0, SafetyLevel.CAUTION),
        (10000.0001, SafetyLevel.WARNING),
        (25000.0, SafetyLevel.WARNING),
        (25000.0001, SafetyLevel.DANGER),
        (1e9, SafetyLevel.DANGER),
    ],
)
def test_threshold_boundaries(irradiance: float, level: SafetyLevel) -> None:
    assert classify_irradiance(irradiance) == level


def test_levels_are_plain_strings() -> None:
    assert SafetyLevel.DANGER == "danger"
    assert [lvl.value for lvl in SafetyLevel] == ["safe", "caution", "warning", "danger"]


def test_classify_result_objects_and_dicts() -> None:
    res = calculate_radiometric_data("VSP-120S", 1.0, 0.0)  # 24000 mW/m²
    assert classify_result(res) == SafetyLevel.WARNING
    assert classify_result(res.to_dict()) == SafetyLevel.WARNING
    close = calculate_radiometric_data("VSP-120S", 0.9, 0.0)
    assert classify_result(close) == SafetyLevel.DANGER


def test_error_result_classifies_safe() -> None:
    err = calculate_radiometric_data("NOT_A_FIXTURE", 1.0, 0.0)
    assert classify_result(err) == SafetyLevel.SAFE
    assert classify_result({"error": "x"}) == SafetyLevel.SAFE


def test_labels() -> None:
    assert set(SAFETY_LABELS) == set(SafetyLevel)
    assert safety_label("danger").startswith("DANGER")
    assert safety_label(SafetyLevel.CAUTION).startswith("CAUTION")
