"""Tests for the title formatter registry."""

from __future__ import annotations

import pytest

from flowtitle.backend.app.localization import BundleI18NProvider
from flowtitle.backend.app.pagetitle import (
    DEFAULT_FORMATTER,
    DefaultTitleFormatter,
    FormatterRegistry,
    PrefixedTitleFormatter,
    default_formatter_registry,
)


def test_default_formatter_delegates_to_provider(provider: BundleI18NProvider) -> None:
    formatter = DefaultTitleFormatter()

    assert formatter(provider, "de", "greeting") == provider.get_translation("greeting", "de")


def test_prefixed_formatter_composes_two_keys(provider: BundleI18NProvider) -> None:
    formatter = PrefixedTitleFormatter(separator=" - ")

    assert formatter(provider, "en", "greeting") == "Demo - Hello"


def test_registry_creates_fresh_instances() -> None:
    registry = default_formatter_registry()

    first = registry.create(DEFAULT_FORMATTER)
    second = registry.create(DEFAULT_FORMATTER)

    assert isinstance(first, DefaultTitleFormatter)
    assert first is not second
    assert registry.names() == ("default", "prefixed")


def test_registry_rejects_duplicates_and_unknown_names() -> None:
    registry = FormatterRegistry({"default": DefaultTitleFormatter})

    with pytest.raises(ValueError):
        registry.register("default", DefaultTitleFormatter)
    with pytest.raises(ValueError):
        registry.register("", DefaultTitleFormatter)
    with pytest.raises(KeyError):
        registry.create("unknown")
    assert "default" in registry
