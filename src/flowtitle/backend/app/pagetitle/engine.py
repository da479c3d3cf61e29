"""Navigation-time page title resolution.

On every navigation the engine looks up the :class:`PageTitle` metadata of the
target view, picks an effective locale from the provider's catalog, builds the
configured formatter and stores the formatted title on the active page. Each
step yields a :class:`Success` or a :class:`Failure`; the first failure stops
the chain and is logged. No failure escapes :meth:`PageTitleEngine.before_enter`,
so a broken title never breaks page rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from flask import Flask, current_app, g, request

from flowtitle.backend.app.localization import I18NProvider

from .annotation import TITLE_REGISTRY, PageTitle, PageTitleRegistry, target_name
from .formatter import FormatterRegistry, TitleFormatter, default_formatter_registry
from .result import Failure, FailureKind, Result, Success, case, match

ERROR_MSG_NO_LOCALE = (
    "no locale provided and i18n provider get_provided_locales() list is empty: "
)
ERROR_MSG_NO_ANNOTATION = "no annotation found at "
ERROR_MSG_EMPTY_ANNOTATION = "annotation defines neither message_key nor default_value at "

EXTENSION_KEY = "flowtitle"
_PAGE_ATTRIBUTE = "flowtitle_page"

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """Per-request page state the title is written to."""

    title: str | None = None
    locale: str | None = None


@dataclass(frozen=True)
class NavigationEvent:
    target: Any
    page: Page
    locale: str | None = None


class PageTitleEngine:
    """Resolve and apply localized page titles on navigation."""

    def __init__(
        self,
        provider: I18NProvider,
        registry: PageTitleRegistry | None = None,
        formatters: FormatterRegistry | None = None,
        default_title: str | None = None,
    ) -> None:
        self.provider = provider
        self.registry = registry if registry is not None else TITLE_REGISTRY
        self.formatters = formatters if formatters is not None else default_formatter_registry()
        self.default_title = default_title

    def resolve_key(self, target: Any) -> Result[str]:
        title = self.registry.lookup(target)
        return match(
            lambda: Success(title.message_key),
            case(
                lambda: title is None,
                lambda: Failure(
                    FailureKind.NO_ANNOTATION, ERROR_MSG_NO_ANNOTATION + target_name(target)
                ),
            ),
            case(
                lambda: not title.message_key and not title.default_value,
                lambda: Failure(
                    FailureKind.NO_ANNOTATION, ERROR_MSG_EMPTY_ANNOTATION + target_name(target)
                ),
            ),
            case(lambda: not title.message_key, lambda: Success(title.default_value)),
        )

    def resolve_locale(self, locale: str | None) -> Result[str]:
        """Pick the requested locale when supported, else the first provided one."""

        provided = tuple(self.provider.get_provided_locales())
        return match(
            lambda: Success(provided[0]),
            case(
                lambda: not provided,
                lambda: Failure(
                    FailureKind.NO_LOCALE,
                    ERROR_MSG_NO_LOCALE + type(self.provider).__name__,
                ),
            ),
            case(lambda: locale is None, lambda: Success(provided[0])),
            case(lambda: locale in provided, lambda: Success(locale)),
        )

    def build_formatter(self, title: PageTitle) -> Result[TitleFormatter]:
        try:
            return Success(self.formatters.create(title.formatter))
        except Exception as exc:
            return Failure(
                FailureKind.FORMATTER_CONSTRUCTION,
                f"could not create title formatter '{title.formatter}': {exc}",
            )

    def apply_formatter(
        self, formatter: TitleFormatter, locale: str, key: str
    ) -> Result[str]:
        try:
            return Success(formatter(self.provider, locale, key))
        except Exception as exc:
            return Failure(
                FailureKind.FORMATTER_APPLICATION,
                f"title formatter failed for key '{key}' and locale '{locale}': {exc}",
            )

    def resolve_title(self, target: Any, locale: str | None) -> Result[str]:
        """Compute the title for ``target`` without touching any page state."""

        title = self.registry.lookup(target)

        def with_key(key: str) -> Result[str]:
            return self.resolve_locale(locale).bind(
                lambda effective_locale: self.build_formatter(title).bind(
                    lambda formatter: self.apply_formatter(formatter, effective_locale, key)
                )
            )

        return self.resolve_key(target).bind(with_key)

    def before_enter(self, event: NavigationEvent) -> None:
        """Set the page title for the navigation, logging any failure."""

        def set_title(title: str) -> None:
            event.page.title = title

        def log_failure(failure: Failure) -> None:
            logger.info("%s", failure)

        self.resolve_title(event.target, event.locale).if_present_or_else(
            set_title, log_failure
        )

    # Flask lifecycle hooks

    def init_app(self, app: Flask, navigation_blueprints: Iterable[str] | None = None) -> None:
        """Register the page-init and pre-navigation hooks on ``app``.

        ``navigation_blueprints`` limits title handling to the named
        blueprints; ``None`` applies it to every endpoint of the app.
        """

        app.extensions[EXTENSION_KEY] = self
        scopes = None if navigation_blueprints is None else frozenset(navigation_blueprints)

        @app.before_request
        def _on_navigation() -> None:
            if scopes is not None and request.blueprint not in scopes:
                return
            self._init_page()
            self._before_navigation()

        @app.context_processor
        def _inject_page_title() -> dict[str, Any]:
            page = current_page()
            title = page.title if page is not None and page.title else self.default_title
            return {"page_title": title}

    def _init_page(self) -> None:
        setattr(g, _PAGE_ATTRIBUTE, Page(locale=requested_locale(self.provider)))

    def _before_navigation(self) -> None:
        if request.endpoint is None:
            return
        target = current_app.view_functions.get(request.endpoint)
        if target is None:
            return
        page = current_page()
        if page is None:
            return
        self.before_enter(NavigationEvent(target=target, page=page, locale=page.locale))


def current_page() -> Page | None:
    return g.get(_PAGE_ATTRIBUTE)


def requested_locale(provider: I18NProvider) -> str | None:
    """Read the locale of the current request.

    An explicit ``?locale=`` query argument wins and is lowercased; otherwise
    the best ``Accept-Language`` match against the provided locales is used.
    """

    explicit = request.args.get("locale", "").strip().lower()
    if explicit:
        return explicit
    provided = list(provider.get_provided_locales())
    if not provided:
        return None
    return request.accept_languages.best_match(provided)


__all__ = [
    "ERROR_MSG_EMPTY_ANNOTATION",
    "ERROR_MSG_NO_ANNOTATION",
    "ERROR_MSG_NO_LOCALE",
    "EXTENSION_KEY",
    "NavigationEvent",
    "Page",
    "PageTitleEngine",
    "current_page",
    "requested_locale",
]
