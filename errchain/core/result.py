from __future__ import annotations
"""Result record: a value/error pair where exactly one side is populated.

Used instead of raising so fallible calls can be inspected, wrapped and
passed along.  Unpacks like a tuple::

    value, err = from_call(load)
"""
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

__all__ = ["Result", "is_ok", "is_err"]


@dataclass(slots=True, frozen=True)
class Result(Generic[T]):  # noqa: D101
    value: Optional[T] = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("Result cannot hold both a value and an error")

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True when *error* is None."""
        return self.error is None

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(val: T) -> "Result[T]":  # noqa: D401
        return Result(value=val)

    @staticmethod
    def failure(err: BaseException) -> "Result[None]":  # noqa: D401
        return Result(error=err)

    # ------------------------------------------------------------------ #
    def value_or(self, default: T) -> T:
        """Return *value*, or *default* when this is a failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator:
        yield self.value
        yield self.error


def is_ok(result: Result) -> bool:
    return result.error is None


def is_err(result: Result) -> bool:
    return result.error is not None
