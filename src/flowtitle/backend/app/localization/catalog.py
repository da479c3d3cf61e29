"""Resource bundle lookup with default-locale fallback."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from flowtitle.backend.config.settings import ConfigurationError, I18NSettings

_TRANSLATIONS_PACKAGE = "flowtitle.translations"

logger = logging.getLogger(__name__)


@runtime_checkable
class I18NProvider(Protocol):
    """Lookup surface consumed by page title formatters."""

    def get_provided_locales(self) -> Sequence[str]: ...

    def get_translation(self, key: str, locale: str | None = None, *params: Any) -> str: ...


def bundle_filename(bundle_name: str, locale: str) -> str:
    """Return the resource name for a bundle, e.g. ``webapp_de.json``."""

    return f"{bundle_name}_{locale}.json"


def load_translation_table(
    bundle_name: str,
    locale: str,
    directory: Path | None = None,
) -> Mapping[str, str]:
    """Load a flat translation table for one locale.

    Bundles are read from the packaged ``flowtitle.translations`` resources
    unless an explicit ``directory`` is supplied. Every value must be a string.
    """

    filename = bundle_filename(bundle_name, locale)
    if directory is not None:
        resource: Any = directory / filename
    else:
        resource = resources.files(_TRANSLATIONS_PACKAGE).joinpath(filename)

    if not resource.is_file():
        raise ConfigurationError(f"Translation bundle missing for locale '{locale}': {filename}")

    with resource.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Translation bundle {filename} must define a mapping")

    non_strings = sorted(key for key, value in payload.items() if not isinstance(value, str))
    if non_strings:
        raise ConfigurationError(
            f"Translation bundle {filename} has non-string values for keys {non_strings}"
        )

    return MappingProxyType(dict(payload))


class BundleI18NProvider:
    """Translation provider backed by one resource bundle per locale."""

    def __init__(
        self,
        provided_locales: Sequence[str],
        tables: Mapping[str, Mapping[str, str]],
    ) -> None:
        locales = tuple(provided_locales)
        if not locales:
            raise ConfigurationError("At least one provided locale must be configured")
        if len(set(locales)) != len(locales):
            raise ConfigurationError(f"Duplicate locales configured: {list(locales)}")
        missing = [locale for locale in locales if locale not in tables]
        if missing:
            raise ConfigurationError(f"No translation table for locales: {missing}")

        self._provided_locales = locales
        self._tables = MappingProxyType(
            {locale: MappingProxyType(dict(tables[locale])) for locale in locales}
        )
        logger.info("%s was found, locales %s", type(self).__name__, ", ".join(locales))

    @classmethod
    def from_settings(cls, settings: I18NSettings) -> BundleI18NProvider:
        """Build a provider by loading every bundle declared in the settings."""

        tables = {
            locale: load_translation_table(
                settings.bundle_name, locale, settings.translations_dir
            )
            for locale in settings.provided_locales
        }
        return cls(settings.provided_locales, tables)

    @property
    def default_locale(self) -> str:
        return self._provided_locales[0]

    def get_provided_locales(self) -> tuple[str, ...]:
        return self._provided_locales

    def table_for(self, locale: str | None) -> Mapping[str, str]:
        """Return the table for ``locale`` or the default table when unsupported."""

        if locale is not None and locale in self._tables:
            return self._tables[locale]
        return self._tables[self.default_locale]

    def get_translation(self, key: str, locale: str | None = None, *params: Any) -> str:
        """Translate ``key``; missing keys are logged and returned unchanged."""

        table = self.table_for(locale)
        if key not in table:
            logger.info("missing resource key (i18n) %s", key)
            return key

        message = table[key]
        if params:
            try:
                message = message.format(*params)
            except (IndexError, KeyError, ValueError):
                logger.info("could not apply parameters to resource key (i18n) %s", key)
        return message


def catalogue_payload(provider: BundleI18NProvider, locale: str | None) -> dict[str, Any]:
    """Expose the resolved and fallback tables for API consumers."""

    locales = provider.get_provided_locales()
    resolved = locale if locale in locales else provider.default_locale
    return {
        "locale": resolved,
        "available_locales": list(locales),
        "messages": dict(provider.table_for(resolved)),
        "fallback": {
            "locale": provider.default_locale,
            "messages": dict(provider.table_for(provider.default_locale)),
        },
    }


__all__ = [
    "BundleI18NProvider",
    "I18NProvider",
    "bundle_filename",
    "catalogue_payload",
    "load_translation_table",
]
