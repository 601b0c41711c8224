"""Solutions to the error handling exercises: raising, wrapping and propagating errors."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_SIGNED = re.compile(r"[+-]?[0-9]+")


def _bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width; raise ValueError as integer parsing does."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = _bounds(bits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Build the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    low, high = _bounds(32)
    if not low <= cost <= high:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity of items and return the tokens left.

    Raises ValueError when the quantity cannot be parsed or cannot be afforded.
    """
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """The value cannot form a positive non-zero integer."""


class NegativeError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap a positive value; raise NegativeError or ZeroError otherwise."""
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing failed; `cause` holds the integer parse error or the CreationError."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_int(s, 64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error