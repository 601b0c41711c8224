"""Solutions to the trait exercises: shared behaviour through mixins and dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append 'Bar' to {type(value).__name__}")


@append_bar.register(str)
def _append_to_text(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_to_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports its licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


@dataclass
class SomeStruct(SomeTrait, OtherTrait):
    name: str = ""


def some_func(item: Any) -> bool:
    """Call both trait functions; the item must provide both traits."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} does not provide SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()