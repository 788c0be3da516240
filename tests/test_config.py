import json

import pytest

from spatialgraph.config import LayoutSettings, load_settings


def test_defaults():
    settings = LayoutSettings()
    assert settings.cool_down == 0.99
    assert settings.error_threshold is None
    assert settings.error_metric == "magnitude"
    assert settings.max_iterations == 100
    assert settings.ideal_length == 1.0


def test_round_trip():
    settings = LayoutSettings(repulsion=2.0, seed=5)
    assert LayoutSettings.from_dict(settings.to_dict()) == settings


def test_unknown_keys_rejected():
    with pytest.raises(ValueError):
        LayoutSettings.from_dict({"springiness": 3.0})


def test_updated_ignores_none():
    settings = LayoutSettings().updated(repulsion=1.5, attraction=None)
    assert settings.repulsion == 1.5
    assert settings.attraction == 0.25


def test_load_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"max_iterations": 150, "error_metric": "signed"}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.max_iterations == 150
    assert settings.error_metric == "signed"


def test_load_settings_requires_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(path))


@pytest.mark.parametrize("data", [
    {"max_iterations": "5"},
    {"max_iterations": 5.0},
    {"repulsion": "0.25"},
    {"cool_down": True},
    {"error_metric": 1},
    {"seed": 1.5},
])
def test_wrongly_typed_values_rejected(data):
    with pytest.raises(ValueError):
        LayoutSettings.from_dict(data)


def test_numeric_and_null_values_accepted():
    settings = LayoutSettings.from_dict({"repulsion": 1, "error_threshold": None, "seed": None})
    assert settings.repulsion == 1
    assert settings.error_threshold is None
