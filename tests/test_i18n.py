import logging

import pytest

from counter_app.i18n import Localizer

KEYS = {"increase", "decrease", "controls"}


@pytest.mark.parametrize("locale", ["en", "ar", "es", "hi", "zh"])
def test_supported_locales_have_all_strings(locale):
    strings = Localizer().strings(locale)

    assert set(strings) == KEYS


def test_default_strings():
    strings = Localizer().strings()

    assert strings["increase"] == "Increase"
    assert strings["decrease"] == "Decrease"


@pytest.mark.parametrize("locale", ["es-MX", "es_ES", "ES"])
def test_region_resolves_to_language(locale):
    assert Localizer().resolve(locale) == "es"


def test_unsupported_locale_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="counter_app"):
        strings = Localizer().strings("fr")

    assert strings["increase"] == "Increase"
    assert "Unsupported locale" in caplog.text


def test_missing_keys_fall_back(tmp_path):
    (tmp_path / "en.yaml").write_text("increase: Increase\ndecrease: Decrease\n")
    (tmp_path / "es.yaml").write_text("increase: Aumentar\n")

    strings = Localizer(locales=("es",), locales_path=tmp_path).strings("es")

    assert strings == {"increase": "Aumentar", "decrease": "Decrease"}


def test_unreadable_locale_falls_back(tmp_path, caplog):
    (tmp_path / "en.yaml").write_text("increase: Increase\n")

    localizer = Localizer(locales=("hi",), locales_path=tmp_path)
    with caplog.at_level(logging.WARNING, logger="counter_app"):
        strings = localizer.strings("hi")

    assert strings == {"increase": "Increase"}
    assert "Cannot load locale" in caplog.text
