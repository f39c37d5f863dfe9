"""Explicit outcomes for calls to the hosted backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """The call completed and produced ``value`` (which may itself be empty)."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def value_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Unavailable:
    """The call failed; ``reason`` is meant for logs, not for users."""

    reason: str

    @property
    def ok(self) -> bool:
        return False

    def value_or(self, default: T) -> T:
        return default


Result = Union[Success[T], Unavailable]
