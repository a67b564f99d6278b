"""Iterator drills: capitalising, dividing, factorials and counting progress."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word and return them as a list."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them without a separator."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """An exact division could not be carried out."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b if it divides evenly, otherwise raise a DivisionError."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide every sample number by 27, raising at the first failure."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _divide_or_error(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide every sample number by 27, keeping each quotient or error."""
    return [_divide_or_error(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Factorial of a non-negative integer."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(2, num + 1))


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several maps."""
    count = 0
    for progress_map in collection:
        count += count_for(progress_map, value)
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)