"""Building a Person from "name,age" text, leniently or strictly."""

from __future__ import annotations

import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class ParsePersonError(ValueError):
    """The text does not describe a person."""


class EmptyInputError(ParsePersonError):
    """The input text was empty."""


class BadLengthError(ParsePersonError):
    """The text did not hold exactly two comma separated fields."""


class NoNameError(ParsePersonError):
    """The name field was empty."""


class AgeParseError(ParsePersonError):
    """The age field is not an unsigned integer."""


def _parse_unsigned(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls("John", 30)

    @classmethod
    def from_text(cls, s: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        try:
            return cls.parse(s)
        except ParsePersonError:
            return cls.default()

    @classmethod
    def parse(cls, s: str) -> Person:
        """Parse "name,age"; raise a ParsePersonError subclass describing the problem."""
        if not s:
            raise EmptyInputError("input is empty")
        fields = s.split(",")
        if len(fields) != 2:
            raise BadLengthError(f"expected 2 fields, found {len(fields)}")
        name, age_text = fields
        if not name:
            raise NoNameError("name is empty")
        try:
            age = _parse_unsigned(age_text)
        except ValueError as error:
            raise AgeParseError(str(error)) from error
        return cls(name, age)