"""Localized widget strings."""

from pathlib import Path

import yaml

from counter_app.logging import logger

LOCALES_DIR = Path(__file__).parent / "locales"


class Localizer:
    """Translated strings lookup.

    Parameters
    ----------
    locales : tuple[str]
        Supported locales, besides the default one.
    default : str
        Fallback locale. Its file must exist.
    locales_path : pathlib.Path
        Directory with one ``<locale>.yaml`` file per locale.
    """

    def __init__(self, locales=("ar", "es", "hi", "zh"), default="en", locales_path=None):
        self.locales = tuple(locales)
        self.default = default
        self.locales_path = Path(locales_path or LOCALES_DIR)
        self._cache = {}

    @property
    def supported(self):
        return (self.default,) + self.locales

    def _load(self, locale):
        if locale not in self._cache:
            with open(self.locales_path / f"{locale}.yaml", "r", encoding="utf-8") as f:
                self._cache[locale] = yaml.safe_load(f) or {}

        return self._cache[locale]

    def resolve(self, locale):
        """Map a locale identifier to a supported one, or the default."""
        if not locale:
            return self.default

        locale = locale.replace("_", "-")
        for candidate in (locale, locale.split("-")[0].lower()):
            if candidate in self.supported:
                return candidate

        logger.warning(f"Unsupported locale `{locale}`, using `{self.default}`.")
        return self.default

    def strings(self, locale=None):
        default_strings = self._load(self.default)

        locale = self.resolve(locale)
        if locale == self.default:
            return dict(default_strings)

        try:
            strings = self._load(locale)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Cannot load locale `{locale}` ({e}), using `{self.default}`.")
            return dict(default_strings)

        # NB: missing keys fall back to the default locale
        return {**default_strings, **strings}
