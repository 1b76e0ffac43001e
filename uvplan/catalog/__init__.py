from uvplan.catalog.fixtures import FIXTURE_DATA, FieldAngles, FixtureSpec, is_known_model, list_models, lookup

__all__ = ["FIXTURE_DATA", "FieldAngles", "FixtureSpec", "is_known_model", "list_models", "lookup"]
