"""Annotation-driven, localized page titles for Flask views."""

from .annotation import TITLE_REGISTRY, PageTitle, PageTitleRegistry, page_title
from .engine import NavigationEvent, Page, PageTitleEngine, current_page
from .formatter import (
    DEFAULT_FORMATTER,
    DefaultTitleFormatter,
    FormatterRegistry,
    PrefixedTitleFormatter,
    TitleFormatter,
    default_formatter_registry,
)
from .result import Failure, FailureKind, Result, Success

__all__ = [
    "DEFAULT_FORMATTER",
    "DefaultTitleFormatter",
    "Failure",
    "FailureKind",
    "FormatterRegistry",
    "NavigationEvent",
    "Page",
    "PageTitle",
    "PageTitleEngine",
    "PageTitleRegistry",
    "PrefixedTitleFormatter",
    "Result",
    "Success",
    "TITLE_REGISTRY",
    "TitleFormatter",
    "current_page",
    "default_formatter_registry",
    "page_title",
]
