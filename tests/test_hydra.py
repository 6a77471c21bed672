import pytest
from hydra.errors import InstantiationException

from counter_app.hydra import instantiate_dict_from_config, load_config, load_counters
from counter_app.models import BoundedCounter


def test_packaged_config():
    cfg = load_config()

    counters = load_counters(cfg.counters)

    assert set(counters) == {"default", "milestones"}
    assert all(isinstance(counter, BoundedCounter) for counter in counters.values())
    assert counters["default"].max_value == 10
    assert cfg.celebration.effect == "counter_app.celebration.ConfettiEffect"


def test_overrides():
    cfg = load_config(overrides=["counters.default.max_value=3", "locale=es"])

    counters = load_counters(cfg.counters)

    assert cfg.locale == "es"
    assert counters["default"].max_value == 3


def test_custom_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "counters:\n"
        "  laps:\n"
        "    _target_: counter_app.models.BoundedCounter\n"
        "    min_value: 1\n"
        "    max_value: 2\n"
        "    count: 1\n"
    )

    counters = load_counters(load_config(path).counters)

    assert counters["laps"].to_state() == {
        "title": "",
        "min_value": 1,
        "max_value": 2,
        "count": 1,
    }


def test_invalid_counter_config():
    cfg = load_config(overrides=["counters.default.min_value=20"])

    with pytest.raises((ValueError, InstantiationException)):
        load_counters(cfg.counters)


def test_instantiate_func():
    cfg = {"a": 1, "b": True}

    out = instantiate_dict_from_config(cfg, instantiate_func=lambda key, value: key)

    assert out == {"a": "a", "b": True}
