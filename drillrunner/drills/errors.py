"""Error-handling drills: nametags, token costs and positive integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_I32 = 32
_I64 = 64
_SIGNED = re.compile(r"[+-]?[0-9]+")


class ParseIntError(ValueError):
    """Text could not be read as an integer of the required width."""


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer, raising ParseIntError on bad input."""
    return _parse_signed(text, _I32)


def generate_nametag_text(name: str) -> str:
    """Text for a nametag; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ParseIntError if the quantity is not a number, and OverflowError
    if the cost does not fit in a signed 32-bit integer.
    """
    quantity = parse_int(item_quantity)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying the typed quantity; unchanged if unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens
    return tokens - cost


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed; `error` holds the cause."""

    def __init__(self, error: CreationError | ParseIntError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check that it is positive and non-zero."""
    try:
        value = _parse_signed(text, _I64)
    except ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc