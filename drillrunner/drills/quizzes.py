"""Quiz drills: pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num * 2 if num <= 40 else num


class Command(enum.Enum):
    """A simple transformation applied to a string."""

    UPPERCASE = enum.auto()
    TRIM = enum.auto()


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string the given number of times."""

    times: int


def _apply(text: str, command: Command | Append) -> str:
    match command:
        case Command.UPPERCASE:
            return text.upper()
        case Command.TRIM:
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(pairs: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in pairs]


def format_grade(grade: float | str) -> str:
    """Render a numeric or alphabetical grade."""
    if isinstance(grade, str):
        return grade
    value = float(grade)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class ReportCard:
    """A student's report card."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{format_grade(self.grade)}"
        )