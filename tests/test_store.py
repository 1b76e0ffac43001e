from __future__ import annotations

from pathlib import Path

import pytest

from uvplan.calculation.radiometric import calculate
from uvplan.calculation.types import CalculationInput
from uvplan.compliance.safety import SafetyLevel
from uvplan.results.store import CalculationStore, StoreError


def test_save_and_reload(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    store = CalculationStore(path)
    a_in = CalculationInput("VSP-120F", 5.0, 0.0)
    b_in = CalculationInput("VSP-120S", 1.0, 0.0)
    a = store.save("A", a_in, calculate(a_in), timestamp=1000)
    b = store.save("B", b_in, calculate(b_in), description="close spot", timestamp=2000)
    assert a is not None and b is not None
    assert a.id.startswith("1000-")
    assert b.safety_level == SafetyLevel.WARNING
    assert [c.name for c in store.list()] == ["B", "A"]

    again = CalculationStore(path)
    assert len(again) == 2
    loaded = again.get(b.id)
    assert loaded is not None
    assert loaded.description == "close spot"
    assert loaded.result == b.result
    assert again.load_input(a.id) == a_in


def test_field_geometry_survives_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    inp = CalculationInput("VSP-60F", 3.0, 1.0)
    saved = CalculationStore(path).save("F", inp, calculate(inp))
    loaded = CalculationStore(path).get(saved.id)
    assert loaded.result.irradiance_report.field == saved.result.irradiance_report.field
    assert loaded.result.irradiance_report.field is not None


def test_error_results_are_not_saved(tmp_path: Path) -> None:
    store = CalculationStore(tmp_path / "history.json")
    inp = CalculationInput("NOPE", 5.0, 0.0)
    assert store.save("bad", inp, calculate(inp)) is None
    assert len(store) == 0
    assert not (tmp_path / "history.json").exists()


def test_delete_and_filter(tmp_path: Path) -> None:
    store = CalculationStore(tmp_path / "history.json")
    x_in = CalculationInput("UB-44", 2.0, 0.0)
    y_in = CalculationInput("UR-12", 2.0, 0.0)
    x = store.save("x", x_in, calculate(x_in), timestamp=1)
    store.save("y", y_in, calculate(y_in), timestamp=2)
    assert [c.name for c in store.list(fixture="UB-44")] == ["x"]
    assert store.delete(x.id)
    assert not store.delete(x.id)
    assert store.get(x.id) is None
    assert [c.name for c in CalculationStore(tmp_path / "history.json").list()] == ["y"]


def test_corrupt_history_raises(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        CalculationStore(path)


def test_ids_unique_within_same_millisecond(tmp_path: Path) -> None:
    store = CalculationStore(tmp_path / "history.json")
    inp = CalculationInput("UB-42", 2.0, 0.0)
    res = calculate(inp)
    ids = [store.save(f"c{i}", inp, res, timestamp=5000).id for i in range(50)]
    assert len(set(ids)) == 50
    assert store.delete(ids[10])
    assert store.get(ids[10]) is None
    assert len(store) == 49
