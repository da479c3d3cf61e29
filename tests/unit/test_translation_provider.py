"""Tests for resource bundle lookup and locale fallback."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path

import pytest

from flowtitle.backend.app.localization import (
    BundleI18NProvider,
    I18NProvider,
    catalogue_payload,
    load_translation_table,
)
from flowtitle.backend.config.settings import ConfigurationError, I18NSettings

CATALOG_LOGGER = "flowtitle.backend.app.localization.catalog"


def _missing_key_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [
        record
        for record in caplog.records
        if record.name == CATALOG_LOGGER and "missing resource key" in record.getMessage()
    ]


def test_present_keys_return_table_values(provider: BundleI18NProvider) -> None:
    assert provider.get_translation("greeting", "en") == "Hello"
    assert provider.get_translation("greeting", "de") == "Hallo"


def test_missing_key_returns_key_and_logs_once(
    provider: BundleI18NProvider, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=CATALOG_LOGGER)

    assert provider.get_translation("does.not.exist", "de") == "does.not.exist"

    records = _missing_key_records(caplog)
    assert len(records) == 1
    assert "does.not.exist" in records[0].getMessage()


def test_none_locale_behaves_like_default_locale(provider: BundleI18NProvider) -> None:
    default = provider.get_provided_locales()[0]

    assert provider.get_translation("greeting", None) == provider.get_translation(
        "greeting", default
    )
    assert provider.get_translation("greeting") == "Hello"


def test_unrecognised_locale_uses_default_table(provider: BundleI18NProvider) -> None:
    assert provider.get_translation("greeting", "fr") == "Hello"
    assert provider.get_translation("greeting", "de-AT") == "Hello"


def test_provided_locales_are_ordered_and_immutable(provider: BundleI18NProvider) -> None:
    locales = provider.get_provided_locales()

    assert locales == ("en", "de")
    assert locales[0] == provider.default_locale
    assert isinstance(provider, I18NProvider)
    with pytest.raises(TypeError):
        locales[0] = "fr"  # type: ignore[index]


def test_positional_parameters_are_substituted(provider: BundleI18NProvider) -> None:
    assert provider.get_translation("farewell", "de", "Anna") == "Tschüss Anna"
    assert provider.get_translation("farewell", "en") == "Bye {0}"


def test_tables_are_read_only(provider: BundleI18NProvider) -> None:
    with pytest.raises(TypeError):
        provider.table_for("en")["greeting"] = "Hi"  # type: ignore[index]


@pytest.mark.parametrize(
    ("locales", "tables"),
    [
        ((), {}),
        (("en", "en"), {"en": {}}),
        (("en", "de"), {"en": {}}),
    ],
)
def test_invalid_catalogs_are_configuration_errors(locales, tables) -> None:
    with pytest.raises(ConfigurationError):
        BundleI18NProvider(locales, tables)


def test_packaged_bundles_follow_naming_convention() -> None:
    table = load_translation_table("webapp", "de")

    assert table["greeting"] == "Hallo"


def test_bundles_load_from_configured_directory(tmp_path: Path) -> None:
    (tmp_path / "shop_en.json").write_text(json.dumps({"cart": "Cart"}), encoding="utf-8")
    (tmp_path / "shop_de.json").write_text(json.dumps({"cart": "Warenkorb"}), encoding="utf-8")
    settings = I18NSettings(
        bundle_name="shop", provided_locales=["en", "de"], translations_dir=tmp_path
    )

    provider = BundleI18NProvider.from_settings(settings)

    assert provider.get_translation("cart", "de") == "Warenkorb"


def test_packaged_bundles_are_read_as_package_resources() -> None:
    resource = resources.files("flowtitle.translations").joinpath("webapp_en.json")

    assert resource.is_file()
    assert load_translation_table("webapp", "en")["greeting"] == "Hello"


def test_non_string_values_are_rejected(tmp_path: Path) -> None:
    (tmp_path / "shop_en.json").write_text(
        json.dumps({"cart": ["Cart", "Carts"], "count": 3, "ok": "Fine"}), encoding="utf-8"
    )

    with pytest.raises(ConfigurationError, match=r"non-string values for keys \['cart', 'count'\]"):
        load_translation_table("shop", "en", tmp_path)


def test_missing_bundle_file_is_reported(tmp_path: Path) -> None:
    (tmp_path / "shop_en.json").write_text("{}", encoding="utf-8")
    settings = I18NSettings(
        bundle_name="shop", provided_locales=["en", "de"], translations_dir=tmp_path
    )

    with pytest.raises(ConfigurationError, match="shop_de.json"):
        BundleI18NProvider.from_settings(settings)


def test_catalogue_payload_falls_back_to_default(provider: BundleI18NProvider) -> None:
    payload = catalogue_payload(provider, "fr")

    assert payload["locale"] == "en"
    assert payload["available_locales"] == ["en", "de"]
    assert payload["messages"]["greeting"] == "Hello"
    assert payload["fallback"]["locale"] == "en"
