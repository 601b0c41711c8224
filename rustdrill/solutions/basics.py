"""Solutions to the introductory exercises: conditions, functions, strings, lists and options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """The square of a number."""
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour: 5 before 22:00, none from then on."""
    if time_of_day < 22:
        return 5
    return None


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the text."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """A new list holding every element doubled."""
    return [value * 2 for value in values]


def longest(x: str, y: str) -> str:
    """The text with more UTF-8 bytes; the second one when they are equally long."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def inner_slice(values: Sequence[T]) -> Sequence[T]:
    """The values without their first and last elements."""
    if not values:
        raise ValueError("cannot slice an empty sequence")
    return values[1 : len(values) - 1]


def fill_vec(values: Iterable[int]) -> list[int]:
    """A list of the given values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def last_char(data: str) -> str:
    """The last character of the text; raise ValueError if it is empty."""
    if not data:
        raise ValueError("text is empty")
    return data[-1]