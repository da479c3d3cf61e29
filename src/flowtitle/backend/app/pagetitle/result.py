"""Tagged success/failure values and first-match-wins case evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    """Reasons a navigation-time title resolution stops."""

    NO_ANNOTATION = "no_annotation"
    NO_LOCALE = "no_locale"
    FORMATTER_CONSTRUCTION = "formatter_construction_failure"
    FORMATTER_APPLICATION = "formatter_application_failure"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Result[U]:
        return Success(func(self.value))

    def bind(self, func: Callable[[T], Result[U]]) -> Result[U]:
        return func(self.value)

    def if_present_or_else(
        self,
        on_success: Callable[[T], Any],
        on_failure: Callable[[Failure], Any],
    ) -> None:
        on_success(self.value)


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str

    def is_success(self) -> bool:
        return False

    def map(self, func: Callable[[Any], Any]) -> Failure:
        return self

    def bind(self, func: Callable[[Any], Any]) -> Failure:
        return self

    def if_present_or_else(
        self,
        on_success: Callable[[Any], Any],
        on_failure: Callable[[Failure], Any],
    ) -> None:
        on_failure(self)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


Result = Union[Success[T], Failure]

Case = tuple[Callable[[], bool], Callable[[], Any]]


def case(predicate: Callable[[], bool], outcome: Callable[[], Result[T]]) -> Case:
    """Pair a lazy predicate with the lazy outcome it selects."""

    return (predicate, outcome)


def match(default: Callable[[], Result[T]], *cases: Case) -> Result[T]:
    """Return the outcome of the first case whose predicate holds.

    Predicates are evaluated in order and only until one matches, so later
    predicates may rely on earlier ones having failed. ``default`` is used
    when no case matches.
    """

    for predicate, outcome in cases:
        if predicate():
            return outcome()
    return default()


__all__ = [
    "Case",
    "Failure",
    "FailureKind",
    "Result",
    "Success",
    "case",
    "match",
]
