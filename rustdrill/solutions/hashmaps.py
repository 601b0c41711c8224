"""Solutions to the hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def default_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 5, "orange": 6}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit not yet in the basket, leaving the others untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass
class Team:
    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def add_goals(self, scored: int, conceded: int) -> None:
        """Add the goals of one match; totals are limited to 255."""
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _record(table: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = table.get(name)
    if team is None:
        table[name] = Team(name, scored, conceded)
    else:
        team.add_goals(scored, conceded)


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team_1,team_2,team_1_goals,team_2_goals"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        team_1_goals = _parse_goals(fields[2])
        team_2_goals = _parse_goals(fields[3])
        _record(scores, team_1, team_1_goals, team_2_goals)
        _record(scores, team_2, team_2_goals, team_1_goals)
    return scores