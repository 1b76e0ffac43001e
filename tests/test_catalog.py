from __future__ import annotations

import pytest

from uvplan.catalog.fixtures import FIXTURE_DATA, FieldAngles, FixtureSpec, is_known_model, list_models, lookup


def test_list_models_in_definition_order() -> None:
    models = list_models()
    assert len(models) == 23
    assert models[:6] == ["VSP-120F", "VSP-120S", "VSP-120WS", "VSP-60S", "VSP-60WS", "VSP-60F"]
    assert models[-4:] == ["L15T8/BLB", "L9T8/BLB", "L30T9/BLB", "L15T9/BLB"]
    assert models != sorted(models)


def test_lookup_exact_values() -> None:
    spec = lookup("VSP-120F")
    assert spec is not None
    assert spec.beam_h_deg == 33.8
    assert spec.beam_v_deg == 34.2
    assert spec.field_h_deg == 62.3
    assert spec.field_v_deg == 62.4
    assert spec.peak_irradiance_mWm2 == 13250.0

    ur = lookup("UR-22")
    assert ur.peak_irradiance_mWm2 == 126.3
    assert ur.field is None


def test_lookup_unknown_and_case_sensitive() -> None:
    assert lookup("NOT_A_FIXTURE") is None
    assert lookup("vsp-120f") is None
    assert lookup("") is None
    assert lookup(None) is None  # type: ignore[arg-type]
    assert not is_known_model("em-44l")
    assert is_known_model("EM-44L")


def test_only_flood_fixtures_have_field_angles() -> None:
    with_field = [m for m, s in FIXTURE_DATA.items() if s.has_field]
    assert with_field == ["VSP-120F", "VSP-60F"]


def test_spec_to_dict_omits_missing_field() -> None:
    assert lookup("EM-44L").to_dict() == {"beam_h_deg": 160.0, "beam_v_deg": 160.0, "peak_irradiance_mWm2": 1160.0}
    assert "field_h_deg" in lookup("VSP-60F").to_dict()


def test_spec_rejects_non_positive_values() -> None:
    with pytest.raises(ValueError):
        FixtureSpec(0.0, 10.0, 100.0)
    with pytest.raises(ValueError):
        FixtureSpec(10.0, 10.0, 0.0)
    with pytest.raises(ValueError):
        FieldAngles(60.0, -1.0)
