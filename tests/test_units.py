from __future__ import annotations

import pytest

from uvplan.core.units import (
    area_unit,
    convert_area,
    convert_distance,
    convert_to_metric,
    convert_volume,
    cu_meters_to_cu_feet,
    distance_unit,
    feet_to_meters,
    meters_to_feet,
    sq_meters_to_sq_feet,
    volume_unit,
)


@pytest.mark.parametrize("x", [0.0, 0.3048, 1.0, 5.5, 123.456])
def test_feet_meters_round_trip(x: float) -> None:
    assert meters_to_feet(feet_to_meters(x)) == pytest.approx(x)
    assert feet_to_meters(meters_to_feet(x)) == pytest.approx(x)


def test_fixed_constants() -> None:
    assert meters_to_feet(1.0) == 3.28084
    assert sq_meters_to_sq_feet(1.0) == 10.7639
    assert cu_meters_to_cu_feet(1.0) == 35.3147


def test_unit_system_conversion() -> None:
    assert convert_distance(2.0, "metric") == 2.0
    assert convert_distance(2.0, "imperial") == pytest.approx(6.56168)
    assert convert_area(1.0, "imperial") == pytest.approx(10.7639)
    assert convert_volume(27.0, "metric") == 27.0
    assert convert_to_metric(3.28084, "imperial") == pytest.approx(1.0)
    assert convert_to_metric(3.0, "metric") == 3.0


def test_unit_labels() -> None:
    assert distance_unit("metric") == "m"
    assert distance_unit("imperial") == "ft"
    assert area_unit("imperial") == "ft²"
    assert volume_unit("metric") == "m³"


def test_unknown_unit_system() -> None:
    with pytest.raises(ValueError):
        convert_distance(1.0, "cubits")  # type: ignore[arg-type]
