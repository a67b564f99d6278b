"""Trait drills: appending "Bar" and shared licensing information."""

from __future__ import annotations

import functools
from dataclasses import dataclass


@functools.singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_to_text(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_to_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()