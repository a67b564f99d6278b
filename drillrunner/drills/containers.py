"""Container drills: optional values, cons lists, copy-on-write and wrappers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None past 23."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day > 23:
        return None
    return 0


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every value non-negative, copying only when it must.

    A mutable sequence is updated in place and returned. An immutable one is
    returned unchanged if it has no negative values, otherwise a new list
    with the absolute values is returned.
    """
    if isinstance(values, MutableSequence):
        for index, value in enumerate(values):
            if value < 0:
                values[index] = -value
        return values
    if any(value < 0 for value in values):
        return [abs(value) for value in values]
    return values


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T