"""Pluggable title formatters and the registry that builds them."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol

from flowtitle.backend.app.localization import I18NProvider

DEFAULT_FORMATTER = "default"
PREFIXED_FORMATTER = "prefixed"


class TitleFormatter(Protocol):
    """Turn a resolved key and locale into the final page title.

    Implementations may raise; the caller treats any exception as a failed
    formatting attempt and leaves the page title untouched.
    """

    def __call__(self, provider: I18NProvider, locale: str, key: str) -> str: ...


class DefaultTitleFormatter:
    """Translate the key with the active provider."""

    def __call__(self, provider: I18NProvider, locale: str, key: str) -> str:
        return provider.get_translation(key, locale)


class PrefixedTitleFormatter:
    """Prefix the translated title with the translated application name."""

    def __init__(self, prefix_key: str = "app.name", separator: str = " | ") -> None:
        self.prefix_key = prefix_key
        self.separator = separator

    def __call__(self, provider: I18NProvider, locale: str, key: str) -> str:
        prefix = provider.get_translation(self.prefix_key, locale)
        return f"{prefix}{self.separator}{provider.get_translation(key, locale)}"


FormatterFactory = Callable[[], TitleFormatter]


class FormatterRegistry:
    """Map formatter identifiers to factories producing fresh formatters."""

    def __init__(self, factories: Mapping[str, FormatterFactory] | None = None) -> None:
        self._factories: dict[str, FormatterFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: FormatterFactory) -> None:
        if not name:
            raise ValueError("Formatter identifiers must not be empty")
        if name in self._factories:
            raise ValueError(f"Formatter '{name}' is already registered")
        self._factories[name] = factory

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def names(self) -> tuple[str, ...]:
        return tuple(self._factories)

    def create(self, name: str) -> TitleFormatter:
        """Build a new formatter; ``KeyError`` for unknown identifiers."""

        try:
            factory = self._factories[name]
        except KeyError as exc:
            raise KeyError(f"Unknown title formatter '{name}'") from exc
        return factory()


def default_formatter_registry() -> FormatterRegistry:
    return FormatterRegistry(
        {
            DEFAULT_FORMATTER: DefaultTitleFormatter,
            PREFIXED_FORMATTER: PrefixedTitleFormatter,
        }
    )


__all__ = [
    "DEFAULT_FORMATTER",
    "PREFIXED_FORMATTER",
    "DefaultTitleFormatter",
    "FormatterFactory",
    "FormatterRegistry",
    "PrefixedTitleFormatter",
    "TitleFormatter",
    "default_formatter_registry",
]
