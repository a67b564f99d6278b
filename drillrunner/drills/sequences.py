"""Sequence drills: arrays, lists and building new lists."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list of the values followed by 88."""
    return [*values, 88]