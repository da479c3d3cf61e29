"""Declarative page title metadata attached to navigation targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .formatter import DEFAULT_FORMATTER

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class PageTitle:
    """Title metadata: a message key, a literal fallback and a formatter id."""

    message_key: str = ""
    default_value: str = ""
    formatter: str = DEFAULT_FORMATTER


class PageTitleRegistry:
    """Registry of title metadata keyed by navigation target identity."""

    def __init__(self) -> None:
        self._titles: dict[Any, PageTitle] = {}

    def register(self, target: Any, title: PageTitle) -> None:
        self._titles[target] = title

    def lookup(self, target: Any) -> PageTitle | None:
        return self._titles.get(target)

    def __contains__(self, target: object) -> bool:
        return target in self._titles

    def __len__(self) -> int:
        return len(self._titles)

    def page_title(
        self,
        message_key: str = "",
        default_value: str = "",
        formatter: str = DEFAULT_FORMATTER,
    ) -> Callable[[F], F]:
        """Decorator registering title metadata for a view."""

        title = PageTitle(
            message_key=message_key, default_value=default_value, formatter=formatter
        )

        def decorator(target: F) -> F:
            self.register(target, title)
            return target

        return decorator


TITLE_REGISTRY = PageTitleRegistry()
page_title = TITLE_REGISTRY.page_title


def target_name(target: Any) -> str:
    module = getattr(target, "__module__", None)
    name = getattr(target, "__qualname__", None) or repr(target)
    return f"{module}.{name}" if module else name


__all__ = ["PageTitle", "PageTitleRegistry", "TITLE_REGISTRY", "page_title", "target_name"]
