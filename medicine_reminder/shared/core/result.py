"""
Two-variant result type for operations that report failures as values.

Repositories, the auth service and the auth controller never raise across
their public boundary; they return either ``Success(value)`` or
``Failure(failure)`` and the caller folds over the outcome.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Unit:
    """Empty success marker."""

    def __repr__(self) -> str:
        return "unit"


UNIT = Unit()


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a payload."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def fold(self, on_failure: Callable[[Any], R], on_success: Callable[[T], R]) -> R:
        return on_success(self.value)

    def map(self, func: Callable[[T], Any]) -> "Success[Any]":
        return Success(func(self.value))

    def get_or_none(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed failure."""

    failure: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def fold(self, on_failure: Callable[[E], R], on_success: Callable[[Any], R]) -> R:
        return on_failure(self.failure)

    def map(self, func: Callable[[Any], Any]) -> "Failure[E]":
        return self

    def get_or_none(self) -> None:
        return None


Result = Union[Success[T], Failure[Any]]


__all__ = [
    "Unit",
    "UNIT",
    "Success",
    "Failure",
    "Result",
]
