"""Message drill: a small state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MAX = 255


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with 8-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to the given RGB components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8("red", self.red)
        _check_u8("green", self.green)
        _check_u8("blue", self.blue)


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Mark the machine as quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")