from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    BACKEND = "backend"
    NOT_FOUND = "not_found"
    RULE_VIOLATION = "rule_violation"


@dataclass(frozen=True)
class MapperError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a mapper call: a value, or the reason there is none."""

    value: T | None = None
    error: MapperError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=MapperError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def get_or_else(self, default):
        return self.value if self.error is None else default
