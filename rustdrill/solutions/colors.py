"""Checked conversion of integer triples into RGB colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_CHANNEL = range(256)


class IntoColorError(ValueError):
    """The values cannot form a colour."""


class BadLenError(IntoColorError):
    """The sequence did not hold exactly three values."""


class IntConversionError(IntoColorError):
    """A channel value lies outside 0..=255."""


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_tuple(cls, triple: tuple[int, int, int]) -> Color:
        """Build a colour from a three element tuple or array."""
        red, green, blue = triple
        return cls._checked(red, green, blue)

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> Color:
        """Build a colour from a sequence that must hold exactly three values."""
        channels = tuple(values)
        if len(channels) != 3:
            raise BadLenError(f"expected 3 values, found {len(channels)}")
        return cls._checked(*channels)

    @classmethod
    def _checked(cls, red: int, green: int, blue: int) -> Color:
        for value in (red, green, blue):
            if not isinstance(value, int):
                raise TypeError(f"channel values must be integers, not {type(value).__name__}")
            if value not in _CHANNEL:
                raise IntConversionError(f"{value} is not in 0..=255")
        return cls(red, green, blue)