"""Solution to the message exercise: a state machine driven by message values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[Echo, Move, ChangeColor, Quit]


@dataclass
class MachineState:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")