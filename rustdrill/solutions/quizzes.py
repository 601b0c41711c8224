"""Solutions to the three quizzes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable


def calculate_price_of_apples(apples_amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if apples_amount > 40:
        return apples_amount
    return apples_amount * 2


class _Kind(Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation applied to one string by transformer()."""

    kind: _Kind
    count: int = 0

    UPPERCASE: ClassVar[Command]
    TRIM: ClassVar[Command]

    @classmethod
    def append(cls, count: int) -> Command:
        """Append "bar" the given number of times."""
        if count < 0:
            raise ValueError("count must not be negative")
        return cls(_Kind.APPEND, count)

    def apply(self, text: str) -> str:
        if self.kind is _Kind.UPPERCASE:
            return text.upper()
        if self.kind is _Kind.TRIM:
            return text.strip()
        return text + "bar" * self.count


Command.UPPERCASE = Command(_Kind.UPPERCASE)
Command.TRIM = Command(_Kind.TRIM)


def transformer(pairs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in pairs]


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetic."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"